"""Translate terminal key names into :class:`InputAction` values.

Key names follow Textual's conventions (``"ctrl+t"``, ``"shift+tab"``,
``"pageup"``). Decoding is a pure function of the key and a small
:class:`KeyContext`, so the whole table can be tested without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass

from serialdeck.core.actions import ActionKind, InputAction


@dataclass(frozen=True)
class KeyContext:
    """What the UI is doing when a key arrives."""

    overlay_open: bool = False
    renaming: bool = False
    menu_open: bool = False
    text_entry: bool = False


_GLOBAL_KEYS: dict[str, ActionKind] = {
    "ctrl+q": ActionKind.QUIT,
    "ctrl+t": ActionKind.NEW_SESSION,
    "ctrl+w": ActionKind.CLOSE_SESSION,
    "ctrl+tab": ActionKind.NEXT_SESSION,
    "ctrl+right": ActionKind.NEXT_SESSION,
    "ctrl+shift+tab": ActionKind.PREV_SESSION,
    "ctrl+left": ActionKind.PREV_SESSION,
    "ctrl+l": ActionKind.NEXT_LAYOUT,
    "ctrl+shift+l": ActionKind.PREV_LAYOUT,
    "ctrl+p": ActionKind.NEXT_PANE,
    "ctrl+shift+p": ActionKind.PREV_PANE,
    "ctrl+n": ActionKind.CYCLE_PANE_SESSION,
    "ctrl+shift+n": ActionKind.CYCLE_PANE_SESSION_PREV,
    "f1": ActionKind.TOGGLE_HELP,
    "f2": ActionKind.RENAME_START,
    "f10": ActionKind.MENU_OPEN,
}

_MENU_KEYS: dict[str, ActionKind] = {
    "left": ActionKind.MENU_LEFT,
    "right": ActionKind.MENU_RIGHT,
    "up": ActionKind.MENU_UP,
    "down": ActionKind.MENU_DOWN,
    "enter": ActionKind.MENU_ENTER,
    "escape": ActionKind.MENU_ESCAPE,
    "f10": ActionKind.MENU_ESCAPE,
}

_EDIT_KEYS: dict[str, ActionKind] = {
    "enter": ActionKind.SUBMIT,
    "escape": ActionKind.CANCEL_INPUT,
    "backspace": ActionKind.BACKSPACE,
    "delete": ActionKind.DELETE,
    "left": ActionKind.CURSOR_LEFT,
    "right": ActionKind.CURSOR_RIGHT,
    "home": ActionKind.CURSOR_HOME,
    "end": ActionKind.CURSOR_END,
}

_TX_KEYS: dict[str, ActionKind] = {
    "tab": ActionKind.FOCUS_NEXT_FIELD,
    "shift+tab": ActionKind.FOCUS_PREV_FIELD,
    "up": ActionKind.TOGGLE_TX_MODE,
    "down": ActionKind.TOGGLE_TX_MODE,
    "pageup": ActionKind.SCROLL_UP,
    "pagedown": ActionKind.SCROLL_DOWN,
}

_COMMAND_KEYS: dict[str, ActionKind] = {
    "q": ActionKind.QUIT,
    "escape": ActionKind.QUIT,
    "o": ActionKind.TOGGLE_CONNECTION,
    "tab": ActionKind.FOCUS_NEXT_FIELD,
    "shift+tab": ActionKind.FOCUS_PREV_FIELD,
    "x": ActionKind.TOGGLE_DISPLAY_MODE,
    "a": ActionKind.TOGGLE_AUTO_SCROLL,
    "c": ActionKind.CLEAR_LOG,
    "p": ActionKind.CYCLE_PARITY,
    "f": ActionKind.CYCLE_FLOW_CONTROL,
    "n": ActionKind.CYCLE_APPEND_MODE,
    "r": ActionKind.REFRESH_PORTS,
    "pageup": ActionKind.SCROLL_UP,
    "pagedown": ActionKind.SCROLL_DOWN,
    "home": ActionKind.SCROLL_HOME,
    "end": ActionKind.SCROLL_END,
}

_ADJUST_KEYS: dict[str, int] = {
    "up": -1,
    "k": -1,
    "left": -1,
    "h": -1,
    "down": 1,
    "j": 1,
    "right": 1,
    "l": 1,
}

_OVERLAY_CLOSE_KEYS = frozenset({"escape", "f1", "enter", "q"})


def _switch_index(key: str) -> int | None:
    """``ctrl+1`` … ``ctrl+9`` to a zero-based session index."""
    prefix, _, digit = key.rpartition("+")
    if prefix == "ctrl" and len(digit) == 1 and "1" <= digit <= "9":
        return int(digit) - 1
    return None


def _printable(key: str, character: str | None) -> str | None:
    if not character or key.startswith(("ctrl+", "alt+")):
        return None
    return character if character.isprintable() else None


def _decode_text(key: str, character: str | None) -> InputAction | None:
    if key in _EDIT_KEYS:
        return InputAction.of(_EDIT_KEYS[key])
    text = _printable(key, character)
    if text is not None:
        return InputAction.insert(text)
    return None


def decode_key(key: str, character: str | None, context: KeyContext) -> InputAction | None:
    """Return the action bound to ``key`` in ``context``, or None if unbound."""
    if context.overlay_open:
        if key == "ctrl+q":
            return InputAction.of(ActionKind.QUIT)
        if key in _OVERLAY_CLOSE_KEYS:
            return InputAction.of(ActionKind.TOGGLE_HELP)
        return None

    if context.renaming:
        return _decode_text(key, character)

    if context.menu_open and key in _MENU_KEYS:
        return InputAction.of(_MENU_KEYS[key])

    if key in _GLOBAL_KEYS:
        return InputAction.of(_GLOBAL_KEYS[key])
    index = _switch_index(key)
    if index is not None:
        return InputAction.switch_session(index)

    if context.menu_open:
        return None

    if context.text_entry:
        if key in _TX_KEYS:
            return InputAction.of(_TX_KEYS[key])
        return _decode_text(key, character)

    if key in _COMMAND_KEYS:
        return InputAction.of(_COMMAND_KEYS[key])
    if key in _ADJUST_KEYS:
        return InputAction.adjust(_ADJUST_KEYS[key])
    return None
