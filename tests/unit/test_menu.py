"""Unit tests for the menu bar navigation state machine."""

from __future__ import annotations

from serialdeck.core.menu import MENU_BAR, MenuAction, MenuMode, MenuNavigator, MenuState


class TestMenuBarDefinition:
    """Test the static menu catalogue."""

    def test_menu_labels(self):
        assert [m.label for m in MENU_BAR] == ["File", "Session", "View", "Help"]

    def test_every_item_has_label_except_separators(self):
        for menu in MENU_BAR:
            for action in menu.items:
                assert bool(action.label) != action.is_separator

    def test_item_out_of_range(self):
        assert MENU_BAR[0].item(99) is None


class TestMenuNavigatorKeys:
    """Test keyboard transitions between closed, bar and dropdown."""

    def test_open_focuses_first_menu(self):
        nav = MenuNavigator()
        nav.open()
        assert nav.state == MenuState.bar_focused(0)
        assert nav.is_open

    def test_open_when_already_open_is_noop(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(2, 1)
        nav.open()
        assert nav.state == MenuState.dropdown_open(2, 1)

    def test_left_right_wrap_on_bar(self):
        nav = MenuNavigator()
        nav.open()
        nav.left()
        assert nav.state == MenuState.bar_focused(3)
        nav.right()
        assert nav.state == MenuState.bar_focused(0)

    def test_left_right_in_dropdown_resets_item(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(0, 3)
        nav.right()
        assert nav.state == MenuState.dropdown_open(1, 0)

    def test_down_opens_dropdown(self):
        nav = MenuNavigator()
        nav.open()
        nav.down()
        assert nav.state == MenuState.dropdown_open(0, 0)

    def test_up_down_wrap_over_items(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(3, 0)
        nav.up()
        assert nav.state.item_index == 2
        nav.down()
        assert nav.state.item_index == 0

    def test_up_on_bar_is_noop(self):
        nav = MenuNavigator()
        nav.open()
        nav.up()
        assert nav.state.mode is MenuMode.BAR_FOCUSED

    def test_keys_while_closed_are_noops(self):
        nav = MenuNavigator()
        nav.left()
        nav.right()
        nav.up()
        nav.down()
        nav.escape()
        assert nav.state == MenuState.closed()
        assert nav.enter() is None

    def test_enter_on_bar_opens_dropdown(self):
        nav = MenuNavigator()
        nav.open()
        assert nav.enter() is None
        assert nav.state == MenuState.dropdown_open(0, 0)

    def test_enter_on_item_returns_action_and_closes(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(1, 1)
        assert nav.enter() is MenuAction.DUPLICATE_SESSION
        assert not nav.is_open

    def test_enter_on_separator_keeps_dropdown(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(0, 2)
        assert nav.enter() is None
        assert nav.state == MenuState.dropdown_open(0, 2)

    def test_escape_steps_back(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(2, 4)
        nav.escape()
        assert nav.state == MenuState.bar_focused(2)
        nav.escape()
        assert nav.state == MenuState.closed()

    def test_close(self):
        nav = MenuNavigator()
        nav.state = MenuState.dropdown_open(2, 4)
        nav.close()
        assert not nav.is_open


class TestMenuNavigatorMouse:
    """Test click transitions."""

    def test_click_menu_opens_dropdown(self):
        nav = MenuNavigator()
        nav.click_menu(2)
        assert nav.state == MenuState.dropdown_open(2, 0)

    def test_click_same_menu_toggles_closed(self):
        nav = MenuNavigator()
        nav.click_menu(2)
        nav.click_menu(2)
        assert not nav.is_open

    def test_click_other_menu_switches(self):
        nav = MenuNavigator()
        nav.click_menu(2)
        nav.click_menu(0)
        assert nav.state == MenuState.dropdown_open(0, 0)

    def test_click_menu_out_of_range(self):
        nav = MenuNavigator()
        nav.click_menu(7)
        assert not nav.is_open

    def test_click_item(self):
        nav = MenuNavigator()
        nav.click_menu(0)
        assert nav.click_item(0, 3) is MenuAction.EXIT
        assert not nav.is_open

    def test_click_separator_is_refused(self):
        nav = MenuNavigator()
        nav.click_menu(3)
        assert nav.click_item(3, 1) is None
        assert nav.is_open

    def test_click_item_out_of_range(self):
        nav = MenuNavigator()
        assert nav.click_item(0, 10) is None
        assert nav.click_item(5, 0) is None
