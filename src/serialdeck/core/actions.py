"""Abstract input actions, independent of any terminal key encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from serialdeck.core.layout import LayoutMode


class ActionKind(StrEnum):
    # Application
    QUIT = "quit"
    TOGGLE_HELP = "toggle_help"
    SHOW_ABOUT = "show_about"
    SAVE_CONFIG = "save_config"
    LOAD_CONFIG = "load_config"

    # Connection and config
    TOGGLE_CONNECTION = "toggle_connection"
    FOCUS_NEXT_FIELD = "focus_next_field"
    FOCUS_PREV_FIELD = "focus_prev_field"
    ADJUST_FIELD = "adjust_field"
    CYCLE_PARITY = "cycle_parity"
    CYCLE_FLOW_CONTROL = "cycle_flow_control"
    REFRESH_PORTS = "refresh_ports"

    # Session view
    TOGGLE_DISPLAY_MODE = "toggle_display_mode"
    TOGGLE_TX_MODE = "toggle_tx_mode"
    CYCLE_APPEND_MODE = "cycle_append_mode"
    TOGGLE_AUTO_SCROLL = "toggle_auto_scroll"
    CLEAR_LOG = "clear_log"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_HOME = "scroll_home"
    SCROLL_END = "scroll_end"

    # Text entry (TX line, or the rename prompt while renaming)
    INSERT_TEXT = "insert_text"
    BACKSPACE = "backspace"
    DELETE = "delete"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_HOME = "cursor_home"
    CURSOR_END = "cursor_end"
    SUBMIT = "submit"
    CANCEL_INPUT = "cancel_input"

    # Sessions
    NEW_SESSION = "new_session"
    CLOSE_SESSION = "close_session"
    DUPLICATE_SESSION = "duplicate_session"
    NEXT_SESSION = "next_session"
    PREV_SESSION = "prev_session"
    SWITCH_SESSION = "switch_session"
    RENAME_START = "rename_start"

    # Layout and panes
    NEXT_LAYOUT = "next_layout"
    PREV_LAYOUT = "prev_layout"
    SET_LAYOUT = "set_layout"
    NEXT_PANE = "next_pane"
    PREV_PANE = "prev_pane"
    FOCUS_PANE = "focus_pane"
    CYCLE_PANE_SESSION = "cycle_pane_session"
    CYCLE_PANE_SESSION_PREV = "cycle_pane_session_prev"

    # Menu
    MENU_OPEN = "menu_open"
    MENU_LEFT = "menu_left"
    MENU_RIGHT = "menu_right"
    MENU_UP = "menu_up"
    MENU_DOWN = "menu_down"
    MENU_ENTER = "menu_enter"
    MENU_ESCAPE = "menu_escape"
    MENU_CLOSE = "menu_close"
    MENU_CLICK = "menu_click"
    MENU_ITEM_CLICK = "menu_item_click"


@dataclass(frozen=True)
class InputAction:
    """One decoded user intent.

    Only the fields relevant to ``kind`` are read: ``step`` for
    ``ADJUST_FIELD``, ``text`` for ``INSERT_TEXT``, ``index`` for
    ``SWITCH_SESSION``, ``FOCUS_PANE``, ``MENU_CLICK`` and
    ``MENU_ITEM_CLICK`` (menu index), ``item`` for ``MENU_ITEM_CLICK`` and
    ``layout`` for ``SET_LAYOUT``.
    """

    kind: ActionKind
    step: int = 0
    text: str = ""
    index: int = 0
    item: int = 0
    layout: LayoutMode | None = None

    @classmethod
    def of(cls, kind: ActionKind) -> InputAction:
        return cls(kind=kind)

    @classmethod
    def adjust(cls, step: int) -> InputAction:
        return cls(kind=ActionKind.ADJUST_FIELD, step=step)

    @classmethod
    def insert(cls, text: str) -> InputAction:
        return cls(kind=ActionKind.INSERT_TEXT, text=text)

    @classmethod
    def switch_session(cls, index: int) -> InputAction:
        return cls(kind=ActionKind.SWITCH_SESSION, index=index)

    @classmethod
    def focus_pane(cls, pane_index: int) -> InputAction:
        return cls(kind=ActionKind.FOCUS_PANE, index=pane_index)

    @classmethod
    def set_layout(cls, mode: LayoutMode) -> InputAction:
        return cls(kind=ActionKind.SET_LAYOUT, layout=mode)

    @classmethod
    def menu_click(cls, menu_index: int) -> InputAction:
        return cls(kind=ActionKind.MENU_CLICK, index=menu_index)

    @classmethod
    def menu_item_click(cls, menu_index: int, item_index: int) -> InputAction:
        return cls(kind=ActionKind.MENU_ITEM_CLICK, index=menu_index, item=item_index)
