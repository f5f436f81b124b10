"""Two-region browser view for Rota.

Navigation region (directory header, entry list, status footer) on the left,
details of the selected entry on the right.

Modified: 2026-10-18
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.widget import Widget
from textual.widgets import Static

from ...core.models import Entry
from ..render import entry_label
from .status_bar import StatusBar


class EntryColumn(ScrollableContainer):
    """Scrollable list of directory entries with one highlighted row."""

    DEFAULT_CSS = """
    EntryColumn {
        height: 1fr;
        border: round $accent;
        border-title-color: $text-muted;
        padding: 0 1;
    }

    EntryColumn > .entry-item {
        width: 100%;
        height: 1;
    }

    EntryColumn > .entry-item.directory {
        color: $primary;
        text-style: bold;
    }

    EntryColumn > .entry-item.selected {
        text-style: reverse;
    }

    EntryColumn > .placeholder {
        width: 100%;
        color: $text-muted;
        content-align: center middle;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.entries: List[Entry] = []
        self.selected_index: Optional[int] = None
        # Keys go to the app, not to container scrolling
        self.can_focus = False
        self.border_title = "Entries"

    async def set_entries(self, entries: List[Entry]) -> None:
        """Show a new snapshot; a no-op when it is the one already shown."""
        if entries is self.entries and self.children:
            return
        self.entries = entries
        self.selected_index = None
        await self.refresh_display()

    async def refresh_display(self) -> None:
        """Rebuild the rows from ``self.entries``."""
        await self.remove_children()

        if not self.entries:
            await self.mount(Static("No entries", classes="placeholder"))
            return

        items = []
        for entry in self.entries:
            classes = ["entry-item"]
            if entry.is_dir:
                classes.append("directory")
            items.append(Static(entry_label(entry), classes=" ".join(classes), markup=False))
        await self.mount(*items)

    def highlight(self, index: Optional[int]) -> None:
        """Mark row ``index`` as selected (None clears the highlight)."""
        if index is not None and not 0 <= index < len(self.entries):
            index = None
        self.selected_index = index

        items = self.query(".entry-item")
        for i, item in enumerate(items):
            item.set_class(i == index, "selected")

        if index is not None and index < len(items):
            self.scroll_to_widget(items[index], animate=False)


class DetailsPane(Vertical):
    """Right region showing metadata for the selected entry."""

    DEFAULT_CSS = """
    DetailsPane {
        width: 1fr;
        height: 100%;
        border: round $accent;
        border-title-color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.text = ""
        self.body: Optional[Static] = None
        self.border_title = "Details"

    def compose(self) -> ComposeResult:
        self.body = Static("", id="details-body", markup=False)
        yield self.body

    def show_text(self, text: str) -> None:
        self.text = text
        if self.body:
            self.body.update(text)


class BrowserView(Widget):
    """Container for the navigation and details regions."""

    DEFAULT_CSS = """
    BrowserView {
        width: 100%;
        height: 1fr;
    }

    BrowserView > Horizontal {
        width: 100%;
        height: 100%;
    }

    BrowserView #nav-region {
        height: 100%;
    }

    BrowserView #nav-header {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }
    """

    def __init__(self, list_width: int = 60, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.list_width = list_width
        self.header: Optional[Static] = None
        self.entry_column: Optional[EntryColumn] = None
        self.status_bar: Optional[StatusBar] = None
        self.details_pane: Optional[DetailsPane] = None

    def compose(self) -> ComposeResult:
        """Create the two regions."""
        self.header = Static("", id="nav-header", markup=False)
        self.entry_column = EntryColumn(id="entry-column")
        self.status_bar = StatusBar(id="status-bar")
        self.details_pane = DetailsPane(id="details-pane")

        with Horizontal():
            nav = Vertical(id="nav-region")
            nav.styles.width = f"{self.list_width}%"
            with nav:
                yield self.header
                yield self.entry_column
                yield self.status_bar
            yield self.details_pane

    async def show(
        self,
        directory: str,
        entries: List[Entry],
        selected_index: Optional[int],
        footer: str,
        footer_is_error: bool,
        details: str,
    ) -> None:
        """Render one frame from prepared text."""
        if self.header:
            self.header.update(directory)
        if self.entry_column:
            await self.entry_column.set_entries(entries)
            self.entry_column.highlight(selected_index)
        if self.status_bar:
            self.status_bar.show(footer, is_error=footer_is_error)
        if self.details_pane:
            self.details_pane.show_text(details)
