"""Serial sessions and the ordered store that owns them."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from serialdeck.core.cycling import cycle, step_index
from serialdeck.core.focus import FocusedField
from serialdeck.core.tx_buffer import TxBuffer
from serialdeck.models.message_log import MessageLog
from serialdeck.models.modes import APPEND_MODES, AppendMode, DisplayMode, TxMode
from serialdeck.models.notification import Notification, NotificationLevel
from serialdeck.models.serial_config import (
    BAUD_RATES,
    DATA_BITS,
    FLOW_CONTROLS,
    PARITIES,
    STOP_BITS,
    SerialConfig,
)
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)

LOG_PAGE = 10


@dataclass
class SerialSession:
    """One independently configured serial monitoring context."""

    id: int
    name: str
    config: SerialConfig = field(default_factory=SerialConfig)
    log: MessageLog = field(default_factory=MessageLog)
    display_mode: DisplayMode = DisplayMode.HEX
    connected: bool = False
    config_locked: bool = False
    scroll_offset: int = 0
    auto_scroll: bool = True
    tx: TxBuffer = field(default_factory=TxBuffer)
    tx_mode: TxMode = TxMode.ASCII
    append_mode: AppendMode = AppendMode.NONE
    focused_field: FocusedField = FocusedField.PORT
    notifications: deque[Notification] = field(default_factory=deque)

    @classmethod
    def with_port(cls, session_id: int, name: str, port: str) -> SerialSession:
        return cls(id=session_id, name=name, config=SerialConfig.with_port(port))

    # --- Lifecycle ---

    def reset_runtime(self) -> None:
        """Drop state tied to a live connection: log, connection and lock."""
        self.log = MessageLog(self.log.capacity)
        self.connected = False
        self.config_locked = False
        self.scroll_offset = 0
        self.auto_scroll = True

    def duplicate(self, session_id: int, name: str) -> SerialSession:
        """Copy name/config/preferences into a fresh, disconnected session."""
        clone = copy.copy(self)
        clone.id = session_id
        clone.name = name
        clone.config = self.config.model_copy()
        clone.tx = TxBuffer(self.tx.text, self.tx.cursor)
        clone.notifications = deque(self.notifications)
        clone.reset_runtime()
        return clone

    def mark_connected(self) -> None:
        self.connected = True
        self.config_locked = True

    def mark_disconnected(self) -> None:
        self.connected = False
        self.config_locked = False

    @property
    def can_modify_config(self) -> bool:
        return not self.config_locked

    # --- Notifications ---

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> Notification:
        notification = Notification(message=message, level=level)
        self.notifications.append(notification)
        return notification

    def info(self, message: str) -> Notification:
        return self.notify(message, NotificationLevel.INFO)

    def warning(self, message: str) -> Notification:
        return self.notify(message, NotificationLevel.WARNING)

    def error(self, message: str) -> Notification:
        return self.notify(message, NotificationLevel.ERROR)

    def success(self, message: str) -> Notification:
        return self.notify(message, NotificationLevel.SUCCESS)

    def expire_notifications(self, now: float | None = None) -> int:
        """Drop expired notifications from the front of the queue.

        Notifications share a TTL and are queued oldest first, so the scan
        stops at the first live one.
        """
        removed = 0
        while self.notifications and self.notifications[0].is_expired(now):
            self.notifications.popleft()
            removed += 1
        return removed

    @property
    def latest_notification(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    # --- Modes and focus ---

    def toggle_display_mode(self) -> DisplayMode:
        self.display_mode = self.display_mode.toggled()
        return self.display_mode

    def toggle_tx_mode(self) -> TxMode:
        self.tx_mode = self.tx_mode.toggled()
        return self.tx_mode

    def cycle_append_mode(self, step: int = 1) -> AppendMode:
        self.append_mode = cycle(APPEND_MODES, self.append_mode, step)
        return self.append_mode

    def focus_next_field(self) -> FocusedField:
        self.focused_field = self.focused_field.next()
        return self.focused_field

    def focus_prev_field(self) -> FocusedField:
        self.focused_field = self.focused_field.prev()
        return self.focused_field

    # --- Config editing (refused while locked) ---

    def cycle_baud_rate(self, step: int = 1) -> bool:
        if self.config_locked:
            return False
        self.config.baud_rate = cycle(BAUD_RATES, self.config.baud_rate, step)
        return True

    def cycle_data_bits(self, step: int = 1) -> bool:
        if self.config_locked:
            return False
        self.config.data_bits = cycle(DATA_BITS, self.config.data_bits, step)
        return True

    def cycle_parity(self, step: int = 1) -> bool:
        if self.config_locked:
            return False
        self.config.parity = cycle(PARITIES, self.config.parity, step)
        return True

    def cycle_stop_bits(self, step: int = 1) -> bool:
        if self.config_locked:
            return False
        self.config.stop_bits = cycle(STOP_BITS, self.config.stop_bits, step)
        return True

    def cycle_flow_control(self, step: int = 1) -> bool:
        if self.config_locked:
            return False
        self.config.flow_control = cycle(FLOW_CONTROLS, self.config.flow_control, step)
        return True

    def select_port(self, ports: Sequence[str], index: int) -> bool:
        if self.config_locked or not 0 <= index < len(ports):
            return False
        self.config.port = ports[index]
        return True

    def cycle_port(self, ports: Sequence[str], step: int = 1) -> bool:
        if self.config_locked or not ports:
            return False
        if self.config.port in ports:
            index = step_index(list(ports).index(self.config.port), len(ports), step)
        else:
            index = 0
        return self.select_port(ports, index)

    def adjust_config_field(
        self, focused: FocusedField, step: int, ports: Sequence[str] = (),
    ) -> bool:
        """Step the config value behind ``focused``.

        Returns False for non-config fields, while locked, or when there is
        nothing to select.
        """
        if focused is FocusedField.PORT:
            return self.cycle_port(ports, step)
        if focused is FocusedField.BAUD_RATE:
            return self.cycle_baud_rate(step)
        if focused is FocusedField.DATA_BITS:
            return self.cycle_data_bits(step)
        if focused is FocusedField.PARITY:
            return self.cycle_parity(step)
        if focused is FocusedField.STOP_BITS:
            return self.cycle_stop_bits(step)
        if focused is FocusedField.FLOW_CONTROL:
            return self.cycle_flow_control(step)
        return False

    def apply_config(self, config: SerialConfig) -> bool:
        if self.config_locked:
            return False
        self.config = config.model_copy()
        return True

    # --- Log view ---

    def record_rx(self, data: bytes) -> None:
        self.log.push_rx(data)
        self._follow_log()

    def record_tx(self, data: bytes) -> None:
        self.log.push_tx(data)
        self._follow_log()

    def _follow_log(self) -> None:
        if self.auto_scroll:
            self.scroll_offset = max(len(self.log) - 1, 0)

    def scroll_up(self, lines: int = LOG_PAGE) -> None:
        self.auto_scroll = False
        self.scroll_offset = max(self.scroll_offset - lines, 0)

    def scroll_down(self, lines: int = LOG_PAGE) -> None:
        self.scroll_offset = min(self.scroll_offset + lines, max(len(self.log) - 1, 0))
        if self.scroll_offset >= len(self.log) - 1:
            self.auto_scroll = True

    def scroll_home(self) -> None:
        self.auto_scroll = False
        self.scroll_offset = 0

    def scroll_end(self) -> None:
        self.auto_scroll = True
        self.scroll_offset = max(len(self.log) - 1, 0)

    def toggle_auto_scroll(self) -> bool:
        self.auto_scroll = not self.auto_scroll
        if self.auto_scroll:
            self._follow_log()
        return self.auto_scroll

    def clear_log(self) -> None:
        self.log.clear()
        self.scroll_offset = 0


class SessionStore:
    """Ordered sessions plus the index of the active one.

    Never empty: removal of the last session is refused. Session ids are
    handed out monotonically and never reused.
    """

    def __init__(self) -> None:
        self._sessions: list[SerialSession] = [SerialSession(id=0, name="Session 1")]
        self._active = 0
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[SerialSession]:
        return iter(self._sessions)

    @property
    def sessions(self) -> tuple[SerialSession, ...]:
        return tuple(self._sessions)

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active(self) -> SerialSession:
        return self._sessions[self._active]

    def get(self, index: int) -> SerialSession | None:
        if 0 <= index < len(self._sessions):
            return self._sessions[index]
        return None

    def index_of(self, session_id: int) -> int | None:
        for index, session in enumerate(self._sessions):
            if session.id == session_id:
                return index
        return None

    def _allocate_id(self) -> int:
        session_id = self._next_id
        self._next_id += 1
        return session_id

    def _append(self, session: SerialSession) -> int:
        self._sessions.append(session)
        index = len(self._sessions) - 1
        logger.debug("session_added", index=index, session_id=session.id, name=session.name)
        return index

    def add(self, name: str | None = None) -> int:
        """Append a default session and return its index."""
        session_id = self._allocate_id()
        if name is None:
            name = f"Session {session_id + 1}"
        return self._append(SerialSession(id=session_id, name=name))

    def add_with_port(self, port: str, name: str | None = None) -> int:
        """Append a session pre-configured for ``port`` and return its index."""
        session_id = self._allocate_id()
        if name is None:
            name = f"Session {session_id + 1} - {port}"
        return self._append(SerialSession.with_port(session_id, name, port))

    def remove(self, index: int) -> SerialSession | None:
        """Remove and return the session at ``index``.

        Returns None, leaving the store untouched, for an out-of-range index
        or when it would remove the last session.
        """
        if len(self._sessions) <= 1 or not 0 <= index < len(self._sessions):
            return None
        removed = self._sessions.pop(index)
        if self._active == index:
            self._active = min(index, len(self._sessions) - 1)
        elif self._active > index:
            self._active -= 1
        logger.debug("session_removed", index=index, session_id=removed.id, active=self._active)
        return removed

    def switch_to(self, index: int) -> bool:
        if 0 <= index < len(self._sessions):
            self._active = index
            return True
        return False

    def next(self) -> None:
        if self._sessions:
            self._active = step_index(self._active, len(self._sessions), 1)

    def prev(self) -> None:
        if self._sessions:
            self._active = step_index(self._active, len(self._sessions), -1)

    def rename(self, index: int, name: str) -> bool:
        session = self.get(index)
        if session is None:
            return False
        session.name = name
        return True

    def duplicate_active(self) -> int:
        """Append a disconnected copy of the active session and return its index."""
        source = self.active
        return self._append(source.duplicate(self._allocate_id(), f"{source.name} (Copy)"))
