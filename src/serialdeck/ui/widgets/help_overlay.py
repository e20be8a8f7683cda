"""Keyboard shortcut and about panels."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from serialdeck import __version__
from serialdeck.core.dispatcher import Overlay
from serialdeck.ui.theme import COLORS

SHORTCUTS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("Sessions", (
        ("Ctrl+T", "New session"),
        ("Ctrl+W", "Close session"),
        ("Ctrl+Tab / Ctrl+Right", "Next session"),
        ("Ctrl+Shift+Tab / Ctrl+Left", "Previous session"),
        ("Ctrl+1..9", "Switch to session"),
        ("F2", "Rename session"),
    )),
    ("Layout", (
        ("Ctrl+L / Ctrl+Shift+L", "Next / previous layout"),
        ("Ctrl+P / Ctrl+Shift+P", "Next / previous pane"),
        ("Ctrl+N", "Cycle session in pane"),
    )),
    ("Serial", (
        ("o", "Connect / disconnect"),
        ("Tab / Shift+Tab", "Next / previous field"),
        ("Up Down Left Right, hjkl", "Change field value"),
        ("p / f", "Cycle parity / flow control"),
        ("r", "Refresh ports"),
    )),
    ("Log and TX", (
        ("x", "Toggle HEX / TEXT view"),
        ("a", "Toggle auto scroll"),
        ("c", "Clear log"),
        ("n", "Cycle line ending"),
        ("PgUp PgDn Home End", "Scroll log"),
        ("Enter", "Send (TX field)"),
        ("Up / Down", "Toggle HEX / ASCII (TX field)"),
    )),
    ("General", (
        ("F10", "Menu"),
        ("F1", "This help"),
        ("q / Esc / Ctrl+Q", "Quit"),
    )),
)


def render_shortcuts() -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style=COLORS["accent_yellow"], no_wrap=True)
    table.add_column(style=COLORS["text_primary"])
    for section, rows in SHORTCUTS:
        table.add_row(Text(section, style=f"bold {COLORS['accent_purple']}"), "")
        for keys, description in rows:
            table.add_row(f"  {keys}", description)
    table.add_row("", "")
    table.add_row(Text("Esc or F1 to close", style=COLORS["text_muted"]), "")
    return table


def render_about() -> Text:
    text = Text(f"SerialDeck {__version__}\n", style=f"bold {COLORS['accent_blue']}")
    text.append("Multi-session serial port monitor\n\n", style=COLORS["text_primary"])
    text.append("Esc or F1 to close", style=COLORS["text_muted"])
    return text


class HelpOverlay(Static):
    def show(self, overlay: Overlay | None, screen_width: int, screen_height: int) -> None:
        if overlay is None:
            self.display = False
            return
        self.display = True
        if overlay is Overlay.HELP:
            self.update(render_shortcuts())
            width, height = 64, 36
        else:
            self.update(render_about())
            width, height = 40, 7
        width = min(width, screen_width)
        height = min(height, screen_height)
        self.styles.width = width
        self.styles.height = height
        self.styles.offset = (max((screen_width - width) // 2, 0), max((screen_height - height) // 2, 0))
