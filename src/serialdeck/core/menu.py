"""Menu bar definition and its three-state navigation machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from serialdeck.core.cycling import step_index


class MenuAction(StrEnum):
    """Command bound to a menu item."""
    SAVE_CONFIG = "save_config"
    LOAD_CONFIG = "load_config"
    EXIT = "exit"
    NEW_SESSION = "new_session"
    DUPLICATE_SESSION = "duplicate_session"
    RENAME_SESSION = "rename_session"
    CLOSE_SESSION = "close_session"
    VIEW_SINGLE = "view_single"
    VIEW_SPLIT_HORIZONTAL = "view_split_horizontal"
    VIEW_SPLIT_VERTICAL = "view_split_vertical"
    VIEW_GRID_2X2 = "view_grid_2x2"
    VIEW_NEXT_PANE = "view_next_pane"
    VIEW_PREV_PANE = "view_prev_pane"
    SHOW_SHORTCUTS = "show_shortcuts"
    SHOW_ABOUT = "show_about"
    SEPARATOR = "separator"

    @property
    def is_separator(self) -> bool:
        return self is MenuAction.SEPARATOR

    @property
    def label(self) -> str:
        return _ACTION_LABELS.get(self, "")


_ACTION_LABELS: dict[MenuAction, str] = {
    MenuAction.SAVE_CONFIG: "Save Config",
    MenuAction.LOAD_CONFIG: "Load Config",
    MenuAction.EXIT: "Exit",
    MenuAction.NEW_SESSION: "New Session",
    MenuAction.DUPLICATE_SESSION: "Duplicate Session",
    MenuAction.RENAME_SESSION: "Rename Session",
    MenuAction.CLOSE_SESSION: "Close Session",
    MenuAction.VIEW_SINGLE: "Single",
    MenuAction.VIEW_SPLIT_HORIZONTAL: "Split Horizontal",
    MenuAction.VIEW_SPLIT_VERTICAL: "Split Vertical",
    MenuAction.VIEW_GRID_2X2: "Grid 2x2",
    MenuAction.VIEW_NEXT_PANE: "Next Pane",
    MenuAction.VIEW_PREV_PANE: "Previous Pane",
    MenuAction.SHOW_SHORTCUTS: "Shortcuts",
    MenuAction.SHOW_ABOUT: "About",
}


@dataclass(frozen=True)
class Menu:
    """A top-level menu and its items (separators included)."""

    label: str
    items: tuple[MenuAction, ...]

    def item(self, index: int) -> MenuAction | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None


MENU_BAR: tuple[Menu, ...] = (
    Menu("File", (
        MenuAction.SAVE_CONFIG,
        MenuAction.LOAD_CONFIG,
        MenuAction.SEPARATOR,
        MenuAction.EXIT,
    )),
    Menu("Session", (
        MenuAction.NEW_SESSION,
        MenuAction.DUPLICATE_SESSION,
        MenuAction.RENAME_SESSION,
        MenuAction.SEPARATOR,
        MenuAction.CLOSE_SESSION,
    )),
    Menu("View", (
        MenuAction.VIEW_SINGLE,
        MenuAction.VIEW_SPLIT_HORIZONTAL,
        MenuAction.VIEW_SPLIT_VERTICAL,
        MenuAction.VIEW_GRID_2X2,
        MenuAction.SEPARATOR,
        MenuAction.VIEW_NEXT_PANE,
        MenuAction.VIEW_PREV_PANE,
    )),
    Menu("Help", (
        MenuAction.SHOW_SHORTCUTS,
        MenuAction.SEPARATOR,
        MenuAction.SHOW_ABOUT,
    )),
)


class MenuMode(StrEnum):
    CLOSED = "closed"
    BAR_FOCUSED = "bar_focused"
    DROPDOWN_OPEN = "dropdown_open"


@dataclass(frozen=True)
class MenuState:
    """``Closed``, ``BarFocused(menu)`` or ``DropdownOpen(menu, item)``."""

    mode: MenuMode = MenuMode.CLOSED
    menu_index: int = 0
    item_index: int = 0

    @classmethod
    def closed(cls) -> MenuState:
        return cls()

    @classmethod
    def bar_focused(cls, menu_index: int) -> MenuState:
        return cls(MenuMode.BAR_FOCUSED, menu_index, 0)

    @classmethod
    def dropdown_open(cls, menu_index: int, item_index: int = 0) -> MenuState:
        return cls(MenuMode.DROPDOWN_OPEN, menu_index, item_index)

    @property
    def is_open(self) -> bool:
        return self.mode is not MenuMode.CLOSED


class MenuNavigator:
    """Applies navigation keys to a :class:`MenuState`.

    ``enter`` returns the bound :class:`MenuAction` when an item is activated;
    every other transition returns None.
    """

    def __init__(self, menus: tuple[Menu, ...] = MENU_BAR) -> None:
        self.menus = menus
        self.state = MenuState.closed()

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    def open(self) -> None:
        if self.state.mode is MenuMode.CLOSED:
            self.state = MenuState.bar_focused(0)

    def close(self) -> None:
        self.state = MenuState.closed()

    def _item_count(self, menu_index: int) -> int:
        return len(self.menus[menu_index].items)

    def left(self) -> None:
        self._switch_menu(-1)

    def right(self) -> None:
        self._switch_menu(1)

    def _switch_menu(self, step: int) -> None:
        target = step_index(self.state.menu_index, len(self.menus), step)
        if self.state.mode is MenuMode.BAR_FOCUSED:
            self.state = MenuState.bar_focused(target)
        elif self.state.mode is MenuMode.DROPDOWN_OPEN:
            self.state = MenuState.dropdown_open(target, 0)

    def up(self) -> None:
        if self.state.mode is MenuMode.DROPDOWN_OPEN:
            self._move_item(-1)

    def down(self) -> None:
        if self.state.mode is MenuMode.BAR_FOCUSED:
            self.state = MenuState.dropdown_open(self.state.menu_index, 0)
        elif self.state.mode is MenuMode.DROPDOWN_OPEN:
            self._move_item(1)

    def _move_item(self, step: int) -> None:
        menu_index = self.state.menu_index
        item = step_index(self.state.item_index, self._item_count(menu_index), step)
        self.state = MenuState.dropdown_open(menu_index, item)

    def enter(self) -> MenuAction | None:
        if self.state.mode is MenuMode.BAR_FOCUSED:
            self.state = MenuState.dropdown_open(self.state.menu_index, 0)
            return None
        if self.state.mode is MenuMode.DROPDOWN_OPEN:
            action = self.menus[self.state.menu_index].item(self.state.item_index)
            if action is None or action.is_separator:
                return None
            self.state = MenuState.closed()
            return action
        return None

    def escape(self) -> None:
        if self.state.mode is MenuMode.DROPDOWN_OPEN:
            self.state = MenuState.bar_focused(self.state.menu_index)
        elif self.state.mode is MenuMode.BAR_FOCUSED:
            self.state = MenuState.closed()

    def click_menu(self, menu_index: int) -> None:
        """Open ``menu_index``'s dropdown, or close it if it is already open."""
        if not 0 <= menu_index < len(self.menus):
            return
        if self.state.mode is MenuMode.DROPDOWN_OPEN and self.state.menu_index == menu_index:
            self.state = MenuState.closed()
        else:
            self.state = MenuState.dropdown_open(menu_index, 0)

    def click_item(self, menu_index: int, item_index: int) -> MenuAction | None:
        if not 0 <= menu_index < len(self.menus):
            return None
        action = self.menus[menu_index].item(item_index)
        if action is None or action.is_separator:
            return None
        self.state = MenuState.closed()
        return action
