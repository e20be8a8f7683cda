"""Pane slots for the current layout and the session shown in each."""

from __future__ import annotations

from serialdeck.core.cycling import step_index
from serialdeck.core.layout import LayoutMode, Rect


class PaneRegistry:
    """Tracks the layout mode, pane-to-session mapping and focused pane.

    Holds session *indices* only. Growing the layout maps new slot ``i`` to
    session ``i`` whether or not that session exists yet; the owner is
    responsible for creating missing sessions in the same operation.
    """

    def __init__(self, layout_mode: LayoutMode = LayoutMode.SINGLE) -> None:
        self._layout_mode = layout_mode
        self._pane_to_session: list[int] = list(range(layout_mode.max_panes()))
        self._focused = 0

    @property
    def layout_mode(self) -> LayoutMode:
        return self._layout_mode

    @property
    def focused_pane(self) -> int:
        return self._focused

    @property
    def pane_mappings(self) -> tuple[int, ...]:
        return tuple(self._pane_to_session)

    def pane_count(self) -> int:
        return len(self._pane_to_session)

    # --- Layout ---

    def set_layout_mode(self, mode: LayoutMode) -> None:
        self._layout_mode = mode
        self._adjust_panes()

    def next_layout(self) -> None:
        self.set_layout_mode(self._layout_mode.next())

    def prev_layout(self) -> None:
        self.set_layout_mode(self._layout_mode.prev())

    def _adjust_panes(self) -> None:
        wanted = self._layout_mode.max_panes()
        current = len(self._pane_to_session)
        if wanted > current:
            self._pane_to_session.extend(range(current, wanted))
        elif wanted < current:
            del self._pane_to_session[wanted:]
        if self._focused >= len(self._pane_to_session):
            self._focused = max(len(self._pane_to_session) - 1, 0)

    def calculate_areas(self, bounds: Rect) -> list[Rect]:
        return self._layout_mode.calculate_areas(bounds)

    # --- Focus ---

    def focus_next_pane(self) -> None:
        if self._pane_to_session:
            self._focused = step_index(self._focused, len(self._pane_to_session), 1)

    def focus_prev_pane(self) -> None:
        if self._pane_to_session:
            self._focused = step_index(self._focused, len(self._pane_to_session), -1)

    def focus_pane(self, pane_index: int) -> bool:
        if 0 <= pane_index < len(self._pane_to_session):
            self._focused = pane_index
            return True
        return False

    def is_pane_focused(self, pane_index: int) -> bool:
        return self._focused == pane_index

    # --- Mapping ---

    def session_for_pane(self, pane_index: int) -> int | None:
        if 0 <= pane_index < len(self._pane_to_session):
            return self._pane_to_session[pane_index]
        return None

    def focused_session(self) -> int | None:
        return self.session_for_pane(self._focused)

    def set_pane_session(self, pane_index: int, session_index: int) -> bool:
        if 0 <= pane_index < len(self._pane_to_session):
            self._pane_to_session[pane_index] = session_index
            return True
        return False

    def cycle_focused_session(self, total_sessions: int) -> None:
        if total_sessions <= 0 or not self._pane_to_session:
            return
        current = self._pane_to_session[self._focused]
        self._pane_to_session[self._focused] = step_index(current, total_sessions, 1)

    def cycle_focused_session_prev(self, total_sessions: int) -> None:
        if total_sessions <= 0 or not self._pane_to_session:
            return
        current = self._pane_to_session[self._focused]
        self._pane_to_session[self._focused] = step_index(current, total_sessions, -1)

    def clamp_sessions(self, total_sessions: int) -> None:
        """Point any slot past ``total_sessions`` at the last session."""
        last = max(total_sessions - 1, 0)
        self._pane_to_session = [min(s, last) for s in self._pane_to_session]

    def reset_mappings(self) -> None:
        self._pane_to_session = list(range(len(self._pane_to_session)))
