"""Menu bar and its dropdown."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from serialdeck.core.layout import Rect
from serialdeck.core.menu import MENU_BAR, Menu, MenuMode, MenuState
from serialdeck.ui.hit_test import DROPDOWN_TOP_ROW, label_spans
from serialdeck.ui.theme import COLORS

MENU_LABELS: tuple[str, ...] = tuple(menu.label for menu in MENU_BAR)


def dropdown_rect(menu_index: int, menus: tuple[Menu, ...] = MENU_BAR) -> Rect:
    """Screen rectangle of the bordered dropdown for ``menu_index``."""
    spans = label_spans([menu.label for menu in menus])
    menu = menus[menu_index]
    inner = max(len(action.label) for action in menu.items) + 2
    return Rect(spans[menu_index][0], DROPDOWN_TOP_ROW, inner + 2, len(menu.items) + 2)


def render_menu_bar(state: MenuState) -> Text:
    bar = Text()
    for index, label in enumerate(MENU_LABELS):
        selected = state.is_open and state.menu_index == index
        style = f"reverse {COLORS['accent_blue']}" if selected else COLORS["text_primary"]
        bar.append(f" {label} ", style=style)
    bar.append("   F10 menu  F1 help", style=COLORS["text_muted"])
    return bar


def render_dropdown(state: MenuState, width: int) -> Text:
    menu = MENU_BAR[state.menu_index]
    lines = []
    for index, action in enumerate(menu.items):
        if action.is_separator:
            lines.append(Text("─" * width, style=COLORS["border"]))
            continue
        style = f"reverse {COLORS['accent_blue']}" if index == state.item_index else ""
        lines.append(Text(f" {action.label} ".ljust(width), style=style))
    return Text("\n").join(lines)


class MenuBar(Static):
    def show(self, state: MenuState) -> None:
        self.update(render_menu_bar(state))


class MenuDropdown(Static):
    def show(self, state: MenuState) -> Rect | None:
        """Draw the dropdown for ``state``; return its rectangle while open."""
        if state.mode is not MenuMode.DROPDOWN_OPEN:
            self.display = False
            return None
        rect = dropdown_rect(state.menu_index)
        self.display = True
        self.styles.offset = (rect.x, rect.y)
        self.styles.width = rect.width
        self.styles.height = rect.height
        self.update(render_dropdown(state, rect.width - 2))
        return rect
