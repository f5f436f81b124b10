"""Main Rota TUI application.

Owns the browser state, maps key presses to state transitions and renders the
state after each one.

Modified: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Header

from ..config.settings import Settings
from ..core.state import BrowserState
from . import render
from .keybindings import Action, KeybindingRegistry, build_registry
from .messages import DirectoryLoaded, StateChanged
from .ui.browser_view import BrowserView


logger = logging.getLogger(__name__)


class RotaApp(App):
    """Main application class for Rota."""

    CSS_PATH = "app.tcss"
    TITLE = "Rota"
    SUB_TITLE = "read-only directory browser"

    def __init__(
        self,
        start_directory: Optional[Path] = None,
        settings: Optional[Settings] = None,
        state: Optional[BrowserState] = None,
        keymap: Optional[KeybindingRegistry] = None,
    ):
        """Initialize the application.

        Args:
            start_directory: Directory to browse (default: working directory)
            settings: Loaded settings (default: built-in defaults)
            state: Pre-built browser state, mainly for tests
            keymap: Keybinding registry (default: built from settings)

        Raises:
            StartupError: If no starting directory can be resolved
            ConfigurationError: If settings or keybinding overrides are invalid
        """
        super().__init__()

        self.settings = settings or Settings()
        self.settings.validate()
        self.keymap = keymap or build_registry(self.settings.keys.bindings)
        self.state = state or BrowserState.open(start_directory)
        self.hint_line = self.keymap.format_hint_line()

        self.browser_view: Optional[BrowserView] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        with Container(id="main-container"):
            self.browser_view = BrowserView(
                list_width=self.settings.ui.list_width, id="browser-view"
            )
            yield self.browser_view

    async def on_mount(self) -> None:
        """Apply the theme and draw the first frame."""
        theme = self.settings.ui.theme
        if theme:
            if theme in self.available_themes:
                self.theme = theme
            else:
                logger.warning(f"Unknown theme '{theme}', keeping default")

        self.post_message(DirectoryLoaded(
            self.state.current_directory,
            len(self.state.entries),
            self.state.last_error,
        ))
        await self.render_state()

    # Input dispatch

    async def on_key(self, event: events.Key) -> None:
        """Translate a key press into a browser transition."""
        action = self.keymap.resolve(event.key)
        if action is None:
            return

        event.stop()
        event.prevent_default()
        self.dispatch_action(action)

    def dispatch_action(self, action: Action) -> None:
        """Apply one transition to the state."""
        state = self.state
        logger.debug(f"Dispatching {action.value}")

        if action is Action.QUIT:
            self.exit()
            return

        directory_before = state.current_directory
        if action is Action.MOVE_DOWN:
            state.move_selection(1)
        elif action is Action.MOVE_UP:
            state.move_selection(-1)
        elif action is Action.OPEN:
            state.enter_selected()
        elif action is Action.PARENT:
            state.go_parent()
        elif action is Action.REFRESH:
            state.refresh()

        if action is Action.REFRESH or state.current_directory != directory_before:
            self.post_message(DirectoryLoaded(
                state.current_directory, len(state.entries), state.last_error
            ))
        self.post_message(StateChanged(action))

    # Rendering

    async def render_state(self) -> None:
        """Draw the current state. Reads the state, never changes it."""
        if not self.browser_view:
            return

        state = self.state
        entry = state.selected_entry()
        await self.browser_view.show(
            directory=render.header_text(state),
            entries=state.entries,
            selected_index=state.selected_index if state.entries else None,
            footer=render.footer_text(state, self.hint_line),
            footer_is_error=state.last_error is not None,
            details=render.details_text(
                entry,
                date_format=self.settings.ui.date_format,
                relative_time=self.settings.ui.relative_time,
            ),
        )

    # Message handlers

    async def on_state_changed(self, message: StateChanged) -> None:
        await self.render_state()

    def on_directory_loaded(self, message: DirectoryLoaded) -> None:
        """Keep the window title in step with the browsed directory."""
        self.sub_title = str(message.directory)
        if message.error:
            logger.info(f"Showing {message.directory} with error: {message.error}")
        else:
            logger.info(f"Showing {message.directory} ({message.entry_count} entries)")


def run_app(
    start_directory: Optional[Path] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Run the Rota TUI application.

    Args:
        start_directory: Optional directory to start in
        settings: Optional loaded settings
    """
    app = RotaApp(start_directory=start_directory, settings=settings)
    app.run()


if __name__ == "__main__":
    run_app()
