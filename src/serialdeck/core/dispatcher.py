"""Applies decoded input actions to the application state.

The dispatcher is the single entry point the UI calls: one
:meth:`Dispatcher.dispatch` per input event and one :meth:`Dispatcher.tick`
per frame. Every recoverable failure ends up as a notification on the
session being edited; nothing here raises to the caller.
"""

from __future__ import annotations

import time
from enum import StrEnum

from serialdeck.core.actions import ActionKind, InputAction
from serialdeck.core.connections import ConnectionManager
from serialdeck.core.focus import FocusedField
from serialdeck.core.layout import LayoutMode
from serialdeck.core.menu import MenuAction, MenuNavigator
from serialdeck.core.session import SerialSession
from serialdeck.core.tabs import TabsController
from serialdeck.core.tx_buffer import TxBuffer
from serialdeck.exceptions import (
    ConfigValidationError,
    HexDecodeError,
    PersistenceError,
    TransportError,
)
from serialdeck.models.modes import AppendMode
from serialdeck.persistence import ConfigStore
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)

LOCKED_WARNING = "Config locked, disconnect first"

TEXT_ACTIONS = frozenset({
    ActionKind.INSERT_TEXT,
    ActionKind.BACKSPACE,
    ActionKind.DELETE,
    ActionKind.CURSOR_LEFT,
    ActionKind.CURSOR_RIGHT,
    ActionKind.CURSOR_HOME,
    ActionKind.CURSOR_END,
    ActionKind.SUBMIT,
    ActionKind.CANCEL_INPUT,
})

_MENU_LAYOUTS: dict[MenuAction, LayoutMode] = {
    MenuAction.VIEW_SINGLE: LayoutMode.SINGLE,
    MenuAction.VIEW_SPLIT_HORIZONTAL: LayoutMode.SPLIT_HORIZONTAL,
    MenuAction.VIEW_SPLIT_VERTICAL: LayoutMode.SPLIT_VERTICAL,
    MenuAction.VIEW_GRID_2X2: LayoutMode.GRID_2X2,
}


class Overlay(StrEnum):
    """Modal panel drawn over the workspace."""
    HELP = "help"
    ABOUT = "about"


class Dispatcher:
    """Routes :class:`InputAction` values to the controller and its collaborators.

    The session being edited is the one shown in the focused pane. Switching
    sessions from the tab bar shows the new active session in the focused
    pane, and moving pane focus makes that pane's session active, so the
    highlighted tab always matches the pane receiving keystrokes.
    """

    def __init__(
        self,
        controller: TabsController,
        connections: ConnectionManager,
        config_store: ConfigStore | None = None,
    ) -> None:
        self.controller = controller
        self.connections = connections
        self.config_store = config_store or ConfigStore()
        self.menu = MenuNavigator()
        self.ports: list[str] = []
        self.overlay: Overlay | None = None
        self.rename_buffer: TxBuffer | None = None
        self.should_quit = False

    # --- State queries ---

    @property
    def target(self) -> SerialSession:
        """Session receiving keyboard input."""
        session = self.controller.focused_pane_session()
        return session if session is not None else self.controller.active_session

    @property
    def is_renaming(self) -> bool:
        return self.rename_buffer is not None

    @property
    def accepts_text(self) -> bool:
        """True when printable keys should be inserted rather than treated as commands."""
        if self.is_renaming:
            return True
        return self.target.focused_field is FocusedField.TX_INPUT

    # --- Entry points ---

    def dispatch(self, action: InputAction) -> None:
        if self.is_renaming:
            if action.kind in TEXT_ACTIONS:
                self._edit_rename(action)
            return
        handler = getattr(self, f"_on_{action.kind.value}", None)
        if handler is None:
            logger.warning("unhandled_action", kind=action.kind.value)
            return
        handler(action)

    def tick(self, now: float | None = None) -> None:
        """Expire notifications and poll every connected session once."""
        now = time.monotonic() if now is None else now
        self.controller.update_notifications(now)
        for session in self.controller.sessions:
            if self.connections.is_connected(session):
                self.connections.poll(session)

    def start(self) -> None:
        """Scan ports and preselect the first one for a session without a port."""
        self.refresh_ports()
        session = self.target
        if self.ports and not session.config.port:
            session.select_port(self.ports, 0)
        logger.info("dispatcher_started", ports=len(self.ports))

    def refresh_ports(self, announce: bool = False) -> list[str]:
        self.ports = self.connections.list_ports()
        logger.debug("ports_refreshed", count=len(self.ports))
        if announce:
            if self.ports:
                self.target.success(f"Found {len(self.ports)} port(s)")
            else:
                self.target.warning("No serial ports found")
        return self.ports

    def shutdown(self) -> None:
        self.connections.disconnect_all()

    # --- Focus syncing between tabs and panes ---

    def _show_active_in_focused_pane(self) -> None:
        panes = self.controller.panes
        panes.set_pane_session(panes.focused_pane, self.controller.sessions.active_index)

    def _activate_focused_pane_session(self) -> None:
        session_index = self.controller.panes.focused_session()
        if session_index is not None:
            self.controller.switch_session(session_index)

    # --- Application ---

    def _on_quit(self, action: InputAction) -> None:
        self.should_quit = True

    def _on_toggle_help(self, action: InputAction) -> None:
        self.overlay = None if self.overlay is not None else Overlay.HELP

    def _on_show_about(self, action: InputAction) -> None:
        self.overlay = Overlay.ABOUT

    def _on_save_config(self, action: InputAction) -> None:
        session = self.target
        try:
            path = self.config_store.save(session.config)
        except PersistenceError as exc:
            session.error(f"Save failed: {exc}")
            return
        session.success(f"Config saved: {path}")

    def _on_load_config(self, action: InputAction) -> None:
        session = self.target
        if not session.can_modify_config:
            session.warning(LOCKED_WARNING)
            return
        config = self.config_store.load()
        if config is None:
            session.warning("No saved config found")
            return
        session.apply_config(config)
        session.success(f"Config loaded: {config.format_display()}")

    # --- Connection and config ---

    def _on_toggle_connection(self, action: InputAction) -> None:
        session = self.target
        if self.connections.is_connected(session):
            self.connections.disconnect(session)
            session.info("Disconnected, config unlocked")
            return
        try:
            self.connections.connect(session)
        except ConfigValidationError as exc:
            session.warning(str(exc))
            return
        except TransportError as exc:
            session.error(f"Connect failed: {exc}")
            return
        session.success(f"Connected: {session.config.port} (config locked)")

    def _on_focus_next_field(self, action: InputAction) -> None:
        self.target.focus_next_field()

    def _on_focus_prev_field(self, action: InputAction) -> None:
        self.target.focus_prev_field()

    def _on_adjust_field(self, action: InputAction) -> None:
        session = self.target
        field = session.focused_field
        if not field.is_config:
            return
        if session.config_locked:
            session.warning(LOCKED_WARNING)
            return
        if field is FocusedField.PORT and not self.ports:
            self.refresh_ports()
            if not self.ports:
                session.warning("No serial ports found")
                return
        if session.adjust_config_field(field, action.step or 1, self.ports):
            session.info(f"Config: {session.config.format_display()}")

    def _on_cycle_parity(self, action: InputAction) -> None:
        session = self.target
        if session.cycle_parity():
            session.info(f"Parity: {session.config.parity.value}")
        else:
            session.warning(LOCKED_WARNING)

    def _on_cycle_flow_control(self, action: InputAction) -> None:
        session = self.target
        if session.cycle_flow_control():
            session.info(f"Flow control: {session.config.flow_control.value}")
        else:
            session.warning(LOCKED_WARNING)

    def _on_refresh_ports(self, action: InputAction) -> None:
        self.refresh_ports(announce=True)

    # --- Session view ---

    def _on_toggle_display_mode(self, action: InputAction) -> None:
        mode = self.target.toggle_display_mode()
        self.target.info(f"Display mode: {mode.value.upper()}")

    def _on_toggle_tx_mode(self, action: InputAction) -> None:
        mode = self.target.toggle_tx_mode()
        self.target.info(f"TX mode: {mode.value.upper()}")

    def _on_cycle_append_mode(self, action: InputAction) -> None:
        mode = self.target.cycle_append_mode()
        self.target.info(f"Append: {mode.label}")

    def _on_toggle_auto_scroll(self, action: InputAction) -> None:
        enabled = self.target.toggle_auto_scroll()
        self.target.info(f"Auto scroll: {'on' if enabled else 'off'}")

    def _on_clear_log(self, action: InputAction) -> None:
        self.target.clear_log()
        self.target.info("Log cleared")

    def _on_scroll_up(self, action: InputAction) -> None:
        self.target.scroll_up()

    def _on_scroll_down(self, action: InputAction) -> None:
        self.target.scroll_down()

    def _on_scroll_home(self, action: InputAction) -> None:
        self.target.scroll_home()

    def _on_scroll_end(self, action: InputAction) -> None:
        self.target.scroll_end()

    # --- TX line ---

    def _on_insert_text(self, action: InputAction) -> None:
        self.target.tx.insert(action.text)

    def _on_backspace(self, action: InputAction) -> None:
        self.target.tx.backspace()

    def _on_delete(self, action: InputAction) -> None:
        self.target.tx.delete()

    def _on_cursor_left(self, action: InputAction) -> None:
        self.target.tx.move_left()

    def _on_cursor_right(self, action: InputAction) -> None:
        self.target.tx.move_right()

    def _on_cursor_home(self, action: InputAction) -> None:
        self.target.tx.home()

    def _on_cursor_end(self, action: InputAction) -> None:
        self.target.tx.end()

    def _on_cancel_input(self, action: InputAction) -> None:
        self.target.tx.clear()

    def _on_submit(self, action: InputAction) -> None:
        """Encode and send the TX line; the text is kept unless the write succeeds."""
        session = self.target
        if session.tx.is_empty:
            session.warning("Input is empty")
            return
        if not self.connections.is_connected(session):
            session.error("Port not connected")
            return
        try:
            data = session.tx.encode(session.tx_mode, session.append_mode)
        except HexDecodeError as exc:
            session.error(f"Hex format error: {exc}")
            return
        try:
            self.connections.send(session, data)
        except TransportError as exc:
            session.error(f"Send failed: {exc}")
            return
        session.tx.clear()
        if session.append_mode is AppendMode.NONE:
            session.success(f"Sent {len(data)} bytes")
        else:
            session.success(f"Sent {len(data)} bytes + {session.append_mode.label}")

    # --- Rename prompt ---

    def _on_rename_start(self, action: InputAction) -> None:
        self.rename_buffer = TxBuffer(self.controller.active_session.name)
        self.rename_buffer.end()

    def _edit_rename(self, action: InputAction) -> None:
        buffer = self.rename_buffer
        if buffer is None:
            return
        kind = action.kind
        if kind is ActionKind.SUBMIT:
            self._commit_rename(buffer.text.strip())
        elif kind is ActionKind.CANCEL_INPUT:
            self.rename_buffer = None
        elif kind is ActionKind.INSERT_TEXT:
            buffer.insert(action.text)
        elif kind is ActionKind.BACKSPACE:
            buffer.backspace()
        elif kind is ActionKind.DELETE:
            buffer.delete()
        elif kind is ActionKind.CURSOR_LEFT:
            buffer.move_left()
        elif kind is ActionKind.CURSOR_RIGHT:
            buffer.move_right()
        elif kind is ActionKind.CURSOR_HOME:
            buffer.home()
        elif kind is ActionKind.CURSOR_END:
            buffer.end()

    def _commit_rename(self, name: str) -> None:
        session = self.controller.active_session
        if not name:
            session.warning("Session name cannot be empty")
            return
        self.controller.rename_session(self.controller.sessions.active_index, name)
        self.rename_buffer = None
        session.info(f"Renamed to {name}")

    # --- Sessions ---

    def _on_new_session(self, action: InputAction) -> None:
        index = self.controller.add_session()
        self.controller.switch_session(index)
        self._show_active_in_focused_pane()
        logger.info("session_added", index=index)

    def _on_close_session(self, action: InputAction) -> None:
        index = self.controller.sessions.active_index
        session = self.controller.active_session
        if len(self.controller.sessions) <= 1:
            session.warning("Cannot close the last session")
            return
        self.connections.forget(session.id)
        self.controller.remove_session(index)
        self._show_active_in_focused_pane()
        logger.info("session_closed", index=index, session_id=session.id)

    def _on_duplicate_session(self, action: InputAction) -> None:
        index = self.controller.duplicate_session()
        self.controller.switch_session(index)
        self._show_active_in_focused_pane()
        self.controller.active_session.info("Session duplicated")

    def _on_next_session(self, action: InputAction) -> None:
        self.controller.next_session()
        self._show_active_in_focused_pane()

    def _on_prev_session(self, action: InputAction) -> None:
        self.controller.prev_session()
        self._show_active_in_focused_pane()

    def _on_switch_session(self, action: InputAction) -> None:
        if self.controller.switch_session(action.index):
            self._show_active_in_focused_pane()

    # --- Layout and panes ---

    def _on_next_layout(self, action: InputAction) -> None:
        self.controller.next_layout()
        self._after_layout_change()

    def _on_prev_layout(self, action: InputAction) -> None:
        self.controller.prev_layout()
        self._after_layout_change()

    def _on_set_layout(self, action: InputAction) -> None:
        if action.layout is None:
            return
        self.controller.set_layout_mode(action.layout)
        self._after_layout_change()

    def _after_layout_change(self) -> None:
        self._activate_focused_pane_session()
        self.target.info(f"Layout: {self.controller.layout_mode.label}")

    def _on_next_pane(self, action: InputAction) -> None:
        self.controller.focus_next_pane()
        self._activate_focused_pane_session()

    def _on_prev_pane(self, action: InputAction) -> None:
        self.controller.focus_prev_pane()
        self._activate_focused_pane_session()

    def _on_focus_pane(self, action: InputAction) -> None:
        if self.controller.focus_pane(action.index):
            self._activate_focused_pane_session()

    def _on_cycle_pane_session(self, action: InputAction) -> None:
        self.controller.cycle_focused_pane_session()
        self._activate_focused_pane_session()

    def _on_cycle_pane_session_prev(self, action: InputAction) -> None:
        self.controller.cycle_focused_pane_session_prev()
        self._activate_focused_pane_session()

    # --- Menu ---

    def _on_menu_open(self, action: InputAction) -> None:
        self.menu.open()

    def _on_menu_left(self, action: InputAction) -> None:
        self.menu.left()

    def _on_menu_right(self, action: InputAction) -> None:
        self.menu.right()

    def _on_menu_up(self, action: InputAction) -> None:
        self.menu.up()

    def _on_menu_down(self, action: InputAction) -> None:
        self.menu.down()

    def _on_menu_escape(self, action: InputAction) -> None:
        self.menu.escape()

    def _on_menu_close(self, action: InputAction) -> None:
        self.menu.close()

    def _on_menu_enter(self, action: InputAction) -> None:
        self.run_menu_action(self.menu.enter())

    def _on_menu_click(self, action: InputAction) -> None:
        self.menu.click_menu(action.index)

    def _on_menu_item_click(self, action: InputAction) -> None:
        self.run_menu_action(self.menu.click_item(action.index, action.item))

    def run_menu_action(self, menu_action: MenuAction | None) -> None:
        if menu_action is None:
            return
        logger.debug("menu_action", action=menu_action.value)
        if menu_action in _MENU_LAYOUTS:
            self.dispatch(InputAction.set_layout(_MENU_LAYOUTS[menu_action]))
            return
        kind = _MENU_ACTIONS.get(menu_action)
        if kind is not None:
            self.dispatch(InputAction.of(kind))


_MENU_ACTIONS: dict[MenuAction, ActionKind] = {
    MenuAction.SAVE_CONFIG: ActionKind.SAVE_CONFIG,
    MenuAction.LOAD_CONFIG: ActionKind.LOAD_CONFIG,
    MenuAction.EXIT: ActionKind.QUIT,
    MenuAction.NEW_SESSION: ActionKind.NEW_SESSION,
    MenuAction.DUPLICATE_SESSION: ActionKind.DUPLICATE_SESSION,
    MenuAction.RENAME_SESSION: ActionKind.RENAME_START,
    MenuAction.CLOSE_SESSION: ActionKind.CLOSE_SESSION,
    MenuAction.VIEW_NEXT_PANE: ActionKind.NEXT_PANE,
    MenuAction.VIEW_PREV_PANE: ActionKind.PREV_PANE,
    MenuAction.SHOW_SHORTCUTS: ActionKind.TOGGLE_HELP,
    MenuAction.SHOW_ABOUT: ActionKind.SHOW_ABOUT,
}
