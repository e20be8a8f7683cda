"""Pydantic data models for SerialDeck."""

from serialdeck.models.message_log import (
    MAX_LOG_ENTRIES,
    LogDirection,
    LogEntry,
    MessageLog,
)
from serialdeck.models.modes import APPEND_MODES, AppendMode, DisplayMode, TxMode
from serialdeck.models.notification import (
    DEFAULT_TTL_SECONDS,
    Notification,
    NotificationLevel,
)
from serialdeck.models.serial_config import (
    BAUD_RATES,
    DATA_BITS,
    FLOW_CONTROLS,
    PARITIES,
    STOP_BITS,
    FlowControl,
    Parity,
    SerialConfig,
)

__all__ = [
    "APPEND_MODES",
    "AppendMode",
    "BAUD_RATES",
    "DATA_BITS",
    "DEFAULT_TTL_SECONDS",
    "DisplayMode",
    "FLOW_CONTROLS",
    "FlowControl",
    "LogDirection",
    "LogEntry",
    "MAX_LOG_ENTRIES",
    "MessageLog",
    "Notification",
    "NotificationLevel",
    "PARITIES",
    "Parity",
    "STOP_BITS",
    "SerialConfig",
    "TxMode",
]
