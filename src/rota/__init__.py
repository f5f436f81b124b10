"""
Rota - read-only terminal directory browser.

Keyboard-driven listing of a directory with a details pane for the
selected entry. Never modifies the filesystem.

Created: 2026-10-18
"""

__version__ = "0.1.0"
__author__ = "Rota contributors"
