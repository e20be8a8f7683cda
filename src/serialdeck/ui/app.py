"""SerialDeck Textual application."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.containers import Container
from textual.events import Click, Key, MouseScrollDown, MouseScrollUp, Resize

from serialdeck.core.actions import ActionKind, InputAction
from serialdeck.core.dispatcher import Dispatcher
from serialdeck.core.layout import LayoutMode, Rect
from serialdeck.core.tabs import TabsSnapshot
from serialdeck.ui.hit_test import FrameLayout, decode_click, label_spans
from serialdeck.ui.keymap import KeyContext, decode_key
from serialdeck.ui.theme import CSS
from serialdeck.ui.widgets import (
    HelpOverlay,
    MenuBar,
    MenuDropdown,
    SessionPane,
    StatusLine,
    TabBar,
)
from serialdeck.ui.widgets.menu_bar import MENU_LABELS
from serialdeck.ui.widgets.session_pane import PANE_CHROME_ROWS
from serialdeck.ui.widgets.tab_bar import TAB_GAP, tab_labels
from serialdeck.utils.logging import get_logger

logger = get_logger(__name__)

TICK_INTERVAL_S = 0.1
TAB_BAR_ROW = 1
MAX_PANES = max(mode.max_panes() for mode in LayoutMode.catalogue())


class Workspace(Container):
    """Focus holder for the panes; every key is routed through the keymap."""

    can_focus = True

    def on_key(self, event: Key) -> None:
        if isinstance(self.app, SerialDeckApp):
            self.app.handle_key(event.key, event.character)
        event.stop()
        event.prevent_default()

    def on_resize(self, event: Resize) -> None:
        if isinstance(self.app, SerialDeckApp):
            self.app.refresh_view()


class SerialDeckApp(App):
    CSS = CSS
    TITLE = "SerialDeck"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, dispatcher: Dispatcher) -> None:
        super().__init__()
        self.dispatcher = dispatcher
        self.frame = FrameLayout(menu_labels=MENU_LABELS)

    def compose(self) -> ComposeResult:
        yield MenuBar("", id="menu-bar")
        yield TabBar("", id="tab-bar")
        with Workspace(id="workspace"):
            for index in range(MAX_PANES):
                yield SessionPane(index)
        yield StatusLine("", id="status-line")
        yield MenuDropdown("", id="menu-dropdown")
        yield HelpOverlay("", id="help-overlay")

    def on_mount(self) -> None:
        self.dispatcher.start()
        self.query_one(Workspace).focus()
        self.set_interval(TICK_INTERVAL_S, self.tick)
        self.refresh_view()
        logger.info("ui_started")

    def on_unmount(self) -> None:
        self.dispatcher.shutdown()
        logger.info("ui_stopped")

    def tick(self) -> None:
        self.dispatcher.tick()
        self.refresh_view()

    # --- Input ---

    def key_context(self) -> KeyContext:
        dispatcher = self.dispatcher
        return KeyContext(
            overlay_open=dispatcher.overlay is not None,
            renaming=dispatcher.is_renaming,
            menu_open=dispatcher.menu.is_open,
            text_entry=dispatcher.accepts_text,
        )

    def handle_key(self, key: str, character: str | None) -> bool:
        action = decode_key(key, character, self.key_context())
        if action is None:
            return False
        self.apply(action)
        return True

    def apply(self, action: InputAction) -> None:
        logger.debug("input_action", kind=action.kind.value)
        self.dispatcher.dispatch(action)
        if self.dispatcher.should_quit:
            self.exit()
            return
        self.refresh_view()

    def on_click(self, event: Click) -> None:
        menu = self.dispatcher.menu
        action = decode_click(
            self.frame,
            event.screen_x,
            event.screen_y,
            overlay_open=self.dispatcher.overlay is not None,
            menu_open=menu.is_open,
            menu_index=menu.state.menu_index,
        )
        if action is not None:
            self.apply(action)

    def on_mouse_scroll_up(self, event: MouseScrollUp) -> None:
        self.apply(InputAction.of(ActionKind.SCROLL_UP))

    def on_mouse_scroll_down(self, event: MouseScrollDown) -> None:
        self.apply(InputAction.of(ActionKind.SCROLL_DOWN))

    # --- Rendering ---

    def refresh_view(self) -> None:
        """Redraw every widget from a fresh snapshot and record the frame geometry."""
        dispatcher = self.dispatcher
        controller = dispatcher.controller
        workspace = self.query_one(Workspace)
        bounds = Rect(0, 0, workspace.size.width, workspace.size.height)
        snapshot = controller.snapshot(bounds, PANE_CHROME_ROWS)

        views = {pane.pane_index: pane for pane in snapshot.panes}
        for widget in self.query(SessionPane):
            view = views.get(widget.pane_index)
            if view is None:
                widget.hide()
            else:
                widget.show(view)

        tabs_visible = controller.should_show_tabs()
        self.query_one(TabBar).show(snapshot, tabs_visible)
        self.query_one(MenuBar).show(dispatcher.menu.state)
        dropdown = self.query_one(MenuDropdown).show(dispatcher.menu.state)
        self.query_one(StatusLine).show(dispatcher.target.latest_notification, dispatcher.rename_buffer)
        self.query_one(HelpOverlay).show(dispatcher.overlay, self.size.width, self.size.height)

        self.frame = self._frame_layout(snapshot, workspace, dropdown, tabs_visible)

    def _frame_layout(
        self,
        snapshot: TabsSnapshot,
        workspace: Workspace,
        dropdown: Rect | None,
        tabs_visible: bool,
    ) -> FrameLayout:
        return FrameLayout(
            pane_areas=tuple(snapshot.areas),
            workspace_origin=(workspace.region.x, workspace.region.y),
            menu_labels=MENU_LABELS,
            dropdown=dropdown,
            tab_row=TAB_BAR_ROW if tabs_visible else None,
            tab_spans=tuple(label_spans(tab_labels(snapshot), gap=TAB_GAP)),
        )
