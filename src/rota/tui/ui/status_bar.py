"""Status footer widget for Rota.

Shows either the last error or the key hints under the entry list.

Modified: 2026-10-18
"""

from textual.widgets import Static


class StatusBar(Static):
    """Footer of the navigation region."""

    DEFAULT_CSS = """
    StatusBar {
        height: 3;
        border: round $accent;
        border-title-color: $text-muted;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar.error {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs):
        super().__init__("", markup=False, **kwargs)
        self.text = ""
        self.border_title = "Status"

    def show(self, text: str, is_error: bool = False) -> None:
        """Display ``text``, styled as an error when ``is_error``."""
        self.text = text
        self.set_class(is_error, "error")
        self.update(text)
