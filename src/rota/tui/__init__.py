"""
TUI (Terminal User Interface) for Rota.

Textual-based two-region browser: entry list on the left, details on the right.

Modified: 2026-10-18
"""

__all__ = ["app", "keybindings", "messages", "render", "session"]
