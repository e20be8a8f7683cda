"""Core domain layer: sessions, panes, layout, focus, menus and dispatch."""

from serialdeck.core.actions import ActionKind, InputAction
from serialdeck.core.connections import ConnectionManager
from serialdeck.core.dispatcher import Dispatcher, Overlay
from serialdeck.core.focus import FocusedField
from serialdeck.core.layout import LayoutMode, Rect
from serialdeck.core.menu import MENU_BAR, MenuAction, MenuMode, MenuNavigator, MenuState
from serialdeck.core.panes import PaneRegistry
from serialdeck.core.session import SerialSession, SessionStore
from serialdeck.core.tabs import PaneView, SessionView, TabsController, TabsSnapshot

__all__ = [
    "ActionKind",
    "ConnectionManager",
    "Dispatcher",
    "FocusedField",
    "InputAction",
    "LayoutMode",
    "MENU_BAR",
    "MenuAction",
    "MenuMode",
    "MenuNavigator",
    "MenuState",
    "Overlay",
    "PaneRegistry",
    "PaneView",
    "Rect",
    "SerialSession",
    "SessionStore",
    "SessionView",
    "TabsController",
    "TabsSnapshot",
]
