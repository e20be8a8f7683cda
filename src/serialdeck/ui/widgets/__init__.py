"""Textual widgets for the SerialDeck screen."""

from serialdeck.ui.widgets.help_overlay import HelpOverlay
from serialdeck.ui.widgets.menu_bar import MenuBar, MenuDropdown
from serialdeck.ui.widgets.session_pane import SessionPane
from serialdeck.ui.widgets.status_line import StatusLine
from serialdeck.ui.widgets.tab_bar import TabBar

__all__ = [
    "HelpOverlay",
    "MenuBar",
    "MenuDropdown",
    "SessionPane",
    "StatusLine",
    "TabBar",
]
