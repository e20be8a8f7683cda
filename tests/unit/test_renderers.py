"""Unit tests for the pure text renderers behind the widgets."""

from __future__ import annotations

from serialdeck.core.focus import FocusedField
from serialdeck.core.layout import Rect
from serialdeck.core.menu import MenuState
from serialdeck.core.tx_buffer import TxBuffer
from serialdeck.models.notification import Notification
from serialdeck.ui.widgets.menu_bar import dropdown_rect, render_dropdown, render_menu_bar
from serialdeck.ui.widgets.session_pane import render_session, render_tx_row
from serialdeck.ui.widgets.status_line import HINTS, render_status
from serialdeck.ui.widgets.tab_bar import render_tabs, tab_labels


def view_of(controller, height: int = 12):
    return controller.snapshot(Rect(0, 0, 80, height), chrome_rows=5).panes[0].session


class TestSessionPaneRender:
    """Test the session pane body."""

    def test_body_height(self, controller):
        controller.active_session.record_rx(b"Hi")
        body = render_session(view_of(controller), True, 7)
        lines = body.plain.split("\n")
        assert len(lines) == 2 + 7 + 1
        assert "RX: 48 69" in lines[2]

    def test_config_row(self, controller):
        controller.active_session.config.port = "/dev/ttyUSB0"
        controller.active_session.mark_connected()
        first = render_session(view_of(controller), False, 0).plain.split("\n")[0]
        assert "Port:[/dev/ttyUSB0]" in first
        assert "Baud:[9600]" in first
        assert first.endswith("locked")

    def test_tx_row(self, controller):
        session = controller.active_session
        session.focused_field = FocusedField.TX_INPUT
        session.tx.insert("AT")
        row = render_tx_row(view_of(controller), True)
        assert row.plain == "TX ASCII +None> AT "


class TestStatusRender:
    """Test the status line."""

    def test_hints_when_idle(self):
        assert render_status(None).plain == HINTS

    def test_notification(self):
        assert render_status(Notification(message="Log cleared")).plain == "Log cleared"

    def test_rename_prompt_wins(self):
        line = render_status(Notification(message="x"), TxBuffer("Modem", cursor=5)).plain
        assert line.startswith("Rename session: Modem")


class TestTabsRender:
    """Test the tab strip."""

    def test_labels_mark_connected(self, controller):
        controller.add_session("GPS")
        controller.sessions.get(1).mark_connected()
        snapshot = controller.snapshot(Rect(0, 0, 80, 24))
        assert tab_labels(snapshot) == ["1:Session 1", "2:GPS*"]
        assert render_tabs(snapshot).plain.startswith(" 1:Session 1   2:GPS* ")


class TestMenuRender:
    """Test the menu bar and dropdown."""

    def test_menu_bar(self):
        assert render_menu_bar(MenuState.closed()).plain.startswith(" File  Session  View  Help ")

    def test_dropdown_rect(self):
        rect = dropdown_rect(1)
        assert (rect.x, rect.y) == (6, 1)
        assert rect.height == 5 + 2
        assert rect.width == len("Duplicate Session") + 4

    def test_dropdown_lines(self):
        state = MenuState.dropdown_open(0, 0)
        lines = render_dropdown(state, 13).plain.split("\n")
        assert len(lines) == 4
        assert lines[0] == " Save Config "
        assert set(lines[2]) == {"─"}
