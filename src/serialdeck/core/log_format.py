"""Text rendering of log entries."""

from __future__ import annotations

from serialdeck.models.message_log import LogEntry
from serialdeck.models.modes import DisplayMode
from serialdeck.transport.codec import bytes_to_hex, bytes_to_text


def format_timestamp(entry: LogEntry) -> str:
    """``HH:MM:SS.mmm`` of the entry's local timestamp."""
    return entry.timestamp.strftime("%H:%M:%S.") + f"{entry.timestamp.microsecond // 1000:03d}"


def format_payload(data: bytes, display_mode: DisplayMode) -> str:
    if display_mode is DisplayMode.HEX:
        return bytes_to_hex(data)
    return bytes_to_text(data)


def format_entry(entry: LogEntry, display_mode: DisplayMode) -> str:
    """Render one log line, e.g. ``12:00:01.250 RX: 48 65``."""
    direction = entry.direction.value.upper()
    return f"{format_timestamp(entry)} {direction}: {format_payload(entry.data, display_mode)}"
