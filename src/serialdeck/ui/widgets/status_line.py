"""Bottom status line: newest notification, rename prompt or key hints."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from serialdeck.core.tx_buffer import TxBuffer
from serialdeck.models.notification import Notification
from serialdeck.ui.theme import COLORS, LEVEL_COLORS

HINTS = "F1 help  F10 menu  o connect  Tab field  Ctrl+T new  Ctrl+L layout  Ctrl+Q quit"


def render_status(notification: Notification | None, rename: TxBuffer | None = None) -> Text:
    if rename is not None:
        line = Text("Rename session: ", style=f"bold {COLORS['accent_yellow']}")
        cursor = rename.cursor
        line.append(rename.text[:cursor])
        line.append(rename.text[cursor:cursor + 1] or " ", style="reverse")
        line.append(rename.text[cursor + 1:])
        line.append("   Enter confirm  Esc cancel", style=COLORS["text_muted"])
        return line
    if notification is not None:
        return Text(notification.message, style=LEVEL_COLORS[notification.level])
    return Text(HINTS, style=COLORS["text_muted"])


class StatusLine(Static):
    def show(self, notification: Notification | None, rename: TxBuffer | None = None) -> None:
        self.update(render_status(notification, rename))
