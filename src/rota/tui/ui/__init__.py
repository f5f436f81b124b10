"""
UI components for Rota TUI.

Modified: 2026-10-18
"""

__all__ = [
    "browser_view",
    "status_bar",
]
