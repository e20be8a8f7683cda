"""Session tabs and split panes kept consistent with each other.

:class:`TabsController` is the only place that mutates both the
:class:`~serialdeck.core.session.SessionStore` and the
:class:`~serialdeck.core.panes.PaneRegistry`. After every public call:

* the store holds at least one session and the active index is in range,
* the registry holds exactly ``layout_mode.max_panes()`` slots,
* every slot maps to an existing session index,
* the focused pane is a valid slot.
"""

from __future__ import annotations

from dataclasses import dataclass

from serialdeck.core.focus import FocusedField
from serialdeck.core.layout import LayoutMode, Rect
from serialdeck.core.panes import PaneRegistry
from serialdeck.core.session import SerialSession, SessionStore
from serialdeck.models.message_log import LogEntry
from serialdeck.models.modes import DisplayMode, TxMode
from serialdeck.models.serial_config import SerialConfig
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionView:
    """Read-only copy of what a pane needs to draw one session."""

    index: int
    id: int
    name: str
    connected: bool
    config_locked: bool
    config: SerialConfig
    display_mode: DisplayMode
    tx_mode: TxMode
    append_label: str
    tx_text: str
    tx_cursor: int
    focused_field: FocusedField
    auto_scroll: bool
    rx_count: int
    tx_count: int
    log_window: tuple[LogEntry, ...]

    @classmethod
    def of(cls, index: int, session: SerialSession, log_rows: int) -> SessionView:
        if log_rows <= 0:
            window: list[LogEntry] = []
        elif session.auto_scroll:
            window = session.log.tail(log_rows)
        else:
            window = session.log.window(session.scroll_offset, log_rows)
        return cls(
            index=index,
            id=session.id,
            name=session.name,
            connected=session.connected,
            config_locked=session.config_locked,
            config=session.config.model_copy(),
            display_mode=session.display_mode,
            tx_mode=session.tx_mode,
            append_label=session.append_mode.label,
            tx_text=session.tx.text,
            tx_cursor=session.tx.cursor,
            focused_field=session.focused_field,
            auto_scroll=session.auto_scroll,
            rx_count=session.log.rx_count,
            tx_count=session.log.tx_count,
            log_window=tuple(window),
        )


@dataclass(frozen=True)
class PaneView:
    """One visible pane: where it is and which session it shows."""

    pane_index: int
    area: Rect
    focused: bool
    session: SessionView


@dataclass(frozen=True)
class TabsSnapshot:
    """Everything the renderer reads for one frame."""

    layout_mode: LayoutMode
    active_index: int
    focused_pane: int
    session_names: tuple[str, ...]
    session_connected: tuple[bool, ...]
    panes: tuple[PaneView, ...]

    @property
    def areas(self) -> list[Rect]:
        return [pane.area for pane in self.panes]


class TabsController:
    """Composes the session store and the pane registry."""

    def __init__(self) -> None:
        self._sessions = SessionStore()
        self._panes = PaneRegistry()
        self.show_tabs = True

    @property
    def sessions(self) -> SessionStore:
        return self._sessions

    @property
    def panes(self) -> PaneRegistry:
        return self._panes

    @property
    def layout_mode(self) -> LayoutMode:
        return self._panes.layout_mode

    def should_show_tabs(self) -> bool:
        return self.show_tabs and len(self._sessions) > 1

    # --- Sessions ---

    def add_session(self, name: str | None = None) -> int:
        return self._sessions.add(name)

    def add_session_with_port(self, port: str, name: str | None = None) -> int:
        return self._sessions.add_with_port(port, name)

    def remove_session(self, index: int) -> SerialSession | None:
        removed = self._sessions.remove(index)
        if removed is not None:
            self._panes.clamp_sessions(len(self._sessions))
        return removed

    def duplicate_session(self) -> int:
        return self._sessions.duplicate_active()

    def switch_session(self, index: int) -> bool:
        return self._sessions.switch_to(index)

    def next_session(self) -> None:
        self._sessions.next()

    def prev_session(self) -> None:
        self._sessions.prev()

    def rename_session(self, index: int, name: str) -> bool:
        return self._sessions.rename(index, name)

    @property
    def active_session(self) -> SerialSession:
        return self._sessions.active

    # --- Layout ---

    def next_layout(self) -> LayoutMode:
        self._panes.next_layout()
        self._ensure_sessions_for_panes()
        return self.layout_mode

    def prev_layout(self) -> LayoutMode:
        self._panes.prev_layout()
        self._ensure_sessions_for_panes()
        return self.layout_mode

    def set_layout_mode(self, mode: LayoutMode) -> LayoutMode:
        self._panes.set_layout_mode(mode)
        self._ensure_sessions_for_panes()
        return self.layout_mode

    def _ensure_sessions_for_panes(self) -> None:
        """Create sessions until every pane slot maps to one that exists."""
        added = 0
        for index in range(len(self._sessions), self._panes.pane_count()):
            self._sessions.add(f"Session {index + 1}")
            added += 1
        self._panes.clamp_sessions(len(self._sessions))
        logger.info(
            "layout_changed",
            mode=self.layout_mode.value,
            panes=self._panes.pane_count(),
            sessions_added=added,
        )

    # --- Panes ---

    def focus_next_pane(self) -> None:
        self._panes.focus_next_pane()

    def focus_prev_pane(self) -> None:
        self._panes.focus_prev_pane()

    def focus_pane(self, pane_index: int) -> bool:
        return self._panes.focus_pane(pane_index)

    def session_for_pane(self, pane_index: int) -> SerialSession | None:
        session_index = self._panes.session_for_pane(pane_index)
        if session_index is None:
            return None
        return self._sessions.get(session_index)

    def focused_pane_session(self) -> SerialSession | None:
        return self.session_for_pane(self._panes.focused_pane)

    def cycle_focused_pane_session(self) -> None:
        self._panes.cycle_focused_session(len(self._sessions))

    def cycle_focused_pane_session_prev(self) -> None:
        self._panes.cycle_focused_session_prev(len(self._sessions))

    # --- Housekeeping ---

    def update_notifications(self, now: float | None = None) -> int:
        """Expire notifications across all sessions; return how many were dropped."""
        return sum(session.expire_notifications(now) for session in self._sessions)

    def snapshot(self, bounds: Rect, chrome_rows: int = 0) -> TabsSnapshot:
        """Build the per-frame view for ``bounds``.

        ``chrome_rows`` is how many rows of each pane the renderer reserves
        for borders, headers and the TX line; the rest is filled with log.
        """
        panes = []
        for pane_index, area in enumerate(self._panes.calculate_areas(bounds)):
            session_index = self._panes.session_for_pane(pane_index)
            session = self._sessions.get(session_index) if session_index is not None else None
            if session is None:
                continue
            panes.append(PaneView(
                pane_index=pane_index,
                area=area,
                focused=self._panes.is_pane_focused(pane_index),
                session=SessionView.of(session_index, session, area.height - chrome_rows),
            ))
        return TabsSnapshot(
            layout_mode=self.layout_mode,
            active_index=self._sessions.active_index,
            focused_pane=self._panes.focused_pane,
            session_names=tuple(s.name for s in self._sessions),
            session_connected=tuple(s.connected for s in self._sessions),
            panes=tuple(panes),
        )
