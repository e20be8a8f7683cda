"""Session tab strip."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from serialdeck.core.tabs import TabsSnapshot
from serialdeck.ui.theme import COLORS

TAB_GAP = 1


def tab_labels(snapshot: TabsSnapshot) -> list[str]:
    labels = []
    for index, (name, connected) in enumerate(zip(snapshot.session_names, snapshot.session_connected)):
        marker = "*" if connected else ""
        labels.append(f"{index + 1}:{name}{marker}")
    return labels


def render_tabs(snapshot: TabsSnapshot) -> Text:
    strip = Text()
    for index, label in enumerate(tab_labels(snapshot)):
        if index:
            strip.append(" " * TAB_GAP)
        if index == snapshot.active_index:
            strip.append(f" {label} ", style=f"bold reverse {COLORS['accent_blue']}")
        else:
            strip.append(f" {label} ", style=COLORS["text_secondary"])
    strip.append(f"  [{snapshot.layout_mode.label}]", style=COLORS["text_muted"])
    return strip


class TabBar(Static):
    def show(self, snapshot: TabsSnapshot, visible: bool) -> None:
        self.display = visible
        if visible:
            self.update(render_tabs(snapshot))
