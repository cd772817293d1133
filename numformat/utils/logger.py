"""
Logging utilities for the number formatter.
Supports both normal mode (rich console output) and debug mode (detailed logs).
"""

import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


class FormatterLogger:
    """
    Logger for the formatter with rich console output and optional debug mode.
    """

    def __init__(
        self,
        debug_mode: bool = False,
        debug_log_file: Optional[str] = None,
        console_output: bool = True
    ):
        self.debug_mode = debug_mode
        self.debug_log_file = debug_log_file
        self.console_output = console_output
        self.console = Console()

        # Setup Python logging
        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging."""
        self.logger = logging.getLogger('number-formatter')
        self.logger.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers = []

        # Console handler (kept off the screen while the terminal UI owns it)
        if self.console_output:
            console_handler = RichHandler(console=self.console, rich_tracebacks=True)
            console_handler.setLevel(logging.DEBUG if self.debug_mode else logging.INFO)
            self.logger.addHandler(console_handler)

        # File handler for debug mode
        if self.debug_mode and self.debug_log_file:
            log_path = Path(self.debug_log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode='a')
            file_handler.setLevel(logging.DEBUG)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Log error message."""
        self.logger.error(message, exc_info=exc_info)

    def success(self, message: str):
        """Print a success line."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_table(self, title: str, data: List[list], headers: List[str]):
        """Print a formatted table."""
        table = Table(title=title)
        for header in headers:
            table.add_column(header)
        for row in data:
            table.add_row(*[str(cell) for cell in row])
        self.console.print(table)


# Global logger instance
_logger_instance: Optional[FormatterLogger] = None


def get_logger() -> FormatterLogger:
    """Get the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = FormatterLogger()
    return _logger_instance


def init_logger(
    debug_mode: bool = False,
    debug_log_file: Optional[str] = None,
    console: bool = True
) -> FormatterLogger:
    """Initialize the global logger."""
    global _logger_instance
    _logger_instance = FormatterLogger(
        debug_mode=debug_mode,
        debug_log_file=debug_log_file,
        console_output=console
    )
    return _logger_instance
