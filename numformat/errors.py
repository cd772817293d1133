"""
Exception types for the number formatter.
"""


class NumformatError(Exception):
    """Base class for all formatter errors."""


class ClipboardError(NumformatError):
    """Raised when the system clipboard rejects a write."""


class ConfigError(NumformatError):
    """Raised when the configuration file cannot be loaded."""


class TerminalError(NumformatError):
    """Raised when the interactive UI cannot take over the terminal."""
