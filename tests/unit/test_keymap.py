"""Unit tests for key decoding."""

from __future__ import annotations

import pytest

from serialdeck.core.actions import ActionKind, InputAction
from serialdeck.ui.keymap import KeyContext, decode_key

COMMAND = KeyContext()
TEXT = KeyContext(text_entry=True)
MENU = KeyContext(menu_open=True)
RENAME = KeyContext(renaming=True)
OVERLAY = KeyContext(overlay_open=True)


def kind_of(key: str, context: KeyContext, character: str | None = None) -> ActionKind | None:
    action = decode_key(key, character, context)
    return action.kind if action is not None else None


class TestGlobalKeys:
    """Test keys that work in every mode except overlays and renaming."""

    @pytest.mark.parametrize("key, kind", [
        ("ctrl+q", ActionKind.QUIT),
        ("ctrl+t", ActionKind.NEW_SESSION),
        ("ctrl+w", ActionKind.CLOSE_SESSION),
        ("ctrl+tab", ActionKind.NEXT_SESSION),
        ("ctrl+shift+tab", ActionKind.PREV_SESSION),
        ("ctrl+l", ActionKind.NEXT_LAYOUT),
        ("ctrl+shift+l", ActionKind.PREV_LAYOUT),
        ("ctrl+p", ActionKind.NEXT_PANE),
        ("ctrl+n", ActionKind.CYCLE_PANE_SESSION),
        ("f1", ActionKind.TOGGLE_HELP),
        ("f2", ActionKind.RENAME_START),
        ("f10", ActionKind.MENU_OPEN),
    ])
    def test_global_in_command_and_text_modes(self, key, kind):
        assert kind_of(key, COMMAND) is kind
        assert kind_of(key, TEXT) is kind

    def test_ctrl_digit_switches_session(self):
        assert decode_key("ctrl+1", None, COMMAND) == InputAction.switch_session(0)
        assert decode_key("ctrl+9", None, TEXT) == InputAction.switch_session(8)

    def test_ctrl_zero_is_unbound(self):
        assert decode_key("ctrl+0", None, COMMAND) is None


class TestCommandKeys:
    """Test single-key commands outside the TX line."""

    @pytest.mark.parametrize("key, kind", [
        ("q", ActionKind.QUIT),
        ("escape", ActionKind.QUIT),
        ("o", ActionKind.TOGGLE_CONNECTION),
        ("tab", ActionKind.FOCUS_NEXT_FIELD),
        ("shift+tab", ActionKind.FOCUS_PREV_FIELD),
        ("x", ActionKind.TOGGLE_DISPLAY_MODE),
        ("a", ActionKind.TOGGLE_AUTO_SCROLL),
        ("c", ActionKind.CLEAR_LOG),
        ("p", ActionKind.CYCLE_PARITY),
        ("f", ActionKind.CYCLE_FLOW_CONTROL),
        ("n", ActionKind.CYCLE_APPEND_MODE),
        ("r", ActionKind.REFRESH_PORTS),
        ("pageup", ActionKind.SCROLL_UP),
        ("end", ActionKind.SCROLL_END),
    ])
    def test_commands(self, key, kind):
        assert kind_of(key, COMMAND, key if len(key) == 1 else None) is kind

    @pytest.mark.parametrize("key, step", [
        ("up", -1), ("k", -1), ("left", -1), ("h", -1),
        ("down", 1), ("j", 1), ("right", 1), ("l", 1),
    ])
    def test_adjust_keys(self, key, step):
        assert decode_key(key, None, COMMAND) == InputAction.adjust(step)

    def test_unbound_key(self):
        assert decode_key("z", "z", COMMAND) is None


class TestTextEntryKeys:
    """Test the TX line bindings."""

    def test_printable_characters_are_inserted(self):
        assert decode_key("q", "q", TEXT) == InputAction.insert("q")
        assert decode_key("space", " ", TEXT) == InputAction.insert(" ")

    @pytest.mark.parametrize("key, kind", [
        ("enter", ActionKind.SUBMIT),
        ("escape", ActionKind.CANCEL_INPUT),
        ("backspace", ActionKind.BACKSPACE),
        ("delete", ActionKind.DELETE),
        ("left", ActionKind.CURSOR_LEFT),
        ("home", ActionKind.CURSOR_HOME),
        ("tab", ActionKind.FOCUS_NEXT_FIELD),
        ("up", ActionKind.TOGGLE_TX_MODE),
        ("pagedown", ActionKind.SCROLL_DOWN),
    ])
    def test_editing_keys(self, key, kind):
        assert kind_of(key, TEXT) is kind

    def test_unprintable_character_is_ignored(self):
        assert decode_key("ctrl+x", "\x18", TEXT) is None


class TestMenuKeys:
    """Test navigation while the menu is open."""

    @pytest.mark.parametrize("key, kind", [
        ("left", ActionKind.MENU_LEFT),
        ("right", ActionKind.MENU_RIGHT),
        ("up", ActionKind.MENU_UP),
        ("down", ActionKind.MENU_DOWN),
        ("enter", ActionKind.MENU_ENTER),
        ("escape", ActionKind.MENU_ESCAPE),
        ("f10", ActionKind.MENU_ESCAPE),
    ])
    def test_navigation(self, key, kind):
        assert kind_of(key, MENU) is kind

    def test_other_keys_are_swallowed(self):
        assert decode_key("o", "o", MENU) is None
        assert kind_of("ctrl+q", MENU) is ActionKind.QUIT


class TestModalKeys:
    """Test the overlay and rename prompt."""

    @pytest.mark.parametrize("key", ["escape", "f1", "enter", "q"])
    def test_overlay_close_keys(self, key):
        assert kind_of(key, OVERLAY, key if len(key) == 1 else None) is ActionKind.TOGGLE_HELP

    def test_overlay_blocks_other_keys(self):
        assert decode_key("o", "o", OVERLAY) is None
        assert kind_of("ctrl+q", OVERLAY) is ActionKind.QUIT

    def test_rename_only_edits_text(self):
        assert decode_key("q", "q", RENAME) == InputAction.insert("q")
        assert kind_of("enter", RENAME) is ActionKind.SUBMIT
        assert kind_of("escape", RENAME) is ActionKind.CANCEL_INPUT
        assert decode_key("ctrl+q", None, RENAME) is None
        assert decode_key("f10", None, RENAME) is None
