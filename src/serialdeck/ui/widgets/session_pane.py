"""Pane widget drawing one serial session."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from serialdeck.core.focus import FocusedField
from serialdeck.core.log_format import format_entry
from serialdeck.core.tabs import PaneView, SessionView
from serialdeck.models.message_log import LogDirection
from serialdeck.ui.theme import COLORS

# Rows of a pane not available to the log: two border rows, the config
# row, the counters row and the TX line.
PANE_CHROME_ROWS = 5

_FIELD_LABELS: tuple[tuple[FocusedField, str], ...] = (
    (FocusedField.PORT, "Port"),
    (FocusedField.BAUD_RATE, "Baud"),
    (FocusedField.DATA_BITS, "Data"),
    (FocusedField.PARITY, "Parity"),
    (FocusedField.STOP_BITS, "Stop"),
    (FocusedField.FLOW_CONTROL, "Flow"),
)


def _field_value(view: SessionView, field: FocusedField) -> str:
    config = view.config
    values = {
        FocusedField.PORT: config.port or "-",
        FocusedField.BAUD_RATE: str(config.baud_rate),
        FocusedField.DATA_BITS: str(config.data_bits),
        FocusedField.PARITY: config.parity.value,
        FocusedField.STOP_BITS: str(config.stop_bits),
        FocusedField.FLOW_CONTROL: config.flow_control.value,
    }
    return values[field]


def render_config_row(view: SessionView, focused: bool) -> Text:
    row = Text()
    value_style = COLORS["text_muted"] if view.config_locked else COLORS["text_primary"]
    for field, label in _FIELD_LABELS:
        row.append(f"{label}:", style=COLORS["text_secondary"])
        style = value_style
        if focused and view.focused_field is field:
            style = f"reverse {COLORS['accent_yellow']}"
        row.append(f"[{_field_value(view, field)}]", style=style)
        row.append(" ")
    if view.config_locked:
        row.append("locked", style=COLORS["accent_orange"])
    return row


def render_counters_row(view: SessionView, focused: bool) -> Text:
    row = Text()
    row.append(f"RX {view.rx_count}", style=COLORS["rx"])
    row.append("  ")
    row.append(f"TX {view.tx_count}", style=COLORS["tx"])
    row.append(f"  View {view.display_mode.value.upper()}", style=COLORS["text_secondary"])
    row.append(f"  Auto {'on' if view.auto_scroll else 'off'}", style=COLORS["text_secondary"])
    if focused and view.focused_field is FocusedField.LOG_AREA:
        row.append("  [log]", style=f"reverse {COLORS['accent_yellow']}")
    return row


def render_tx_row(view: SessionView, focused: bool) -> Text:
    row = Text()
    prompt_style = COLORS["accent_blue"]
    if focused and view.focused_field is FocusedField.TX_INPUT:
        prompt_style = f"bold {COLORS['accent_yellow']}"
    row.append(f"TX {view.tx_mode.value.upper()} +{view.append_label}> ", style=prompt_style)
    text = view.tx_text
    if focused and view.focused_field is FocusedField.TX_INPUT:
        cursor = min(view.tx_cursor, len(text))
        row.append(text[:cursor])
        row.append(text[cursor:cursor + 1] or " ", style="reverse")
        row.append(text[cursor + 1:])
    else:
        row.append(text)
    return row


def render_session(view: SessionView, focused: bool, log_rows: int) -> Text:
    """Full pane body: config row, counters, log window, TX line."""
    lines = [render_config_row(view, focused), render_counters_row(view, focused)]
    for entry in view.log_window[:max(log_rows, 0)]:
        color = COLORS["rx"] if entry.direction is LogDirection.RX else COLORS["tx"]
        lines.append(Text(format_entry(entry, view.display_mode), style=color, no_wrap=True))
    for _ in range(max(log_rows, 0) - len(view.log_window)):
        lines.append(Text(""))
    lines.append(render_tx_row(view, focused))
    return Text("\n").join(lines)


class SessionPane(Static):
    """Absolutely positioned pane; geometry comes from the layout engine."""

    def __init__(self, pane_index: int) -> None:
        super().__init__("", id=f"pane-{pane_index}")
        self.pane_index = pane_index

    def show(self, pane: PaneView) -> None:
        area = pane.area
        self.display = True
        self.styles.offset = (area.x, area.y)
        self.styles.width = area.width
        self.styles.height = area.height
        self.set_class(pane.focused, "focused")
        session = pane.session
        self.border_title = Text(f"{session.index + 1}: {session.name}")
        self.border_subtitle = "connected" if session.connected else "disconnected"
        self.update(render_session(session, pane.focused, area.height - PANE_CHROME_ROWS))

    def hide(self) -> None:
        self.display = False
