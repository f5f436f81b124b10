"""
Custom exceptions for Rota.

Modified: 2026-10-18
"""


class RotaError(Exception):
    """Base exception for all Rota errors."""

    pass


class StartupError(RotaError):
    """Raised when no starting directory can be determined."""

    pass


class ConfigurationError(RotaError):
    """Raised when configuration is invalid."""

    pass


class TerminalError(RotaError):
    """Raised when the controlling terminal cannot be acquired or is lost."""

    pass
