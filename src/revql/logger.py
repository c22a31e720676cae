"""Logging for revql with Rich console output helpers."""

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class RevqlLogger(logging.Logger):
    """
    Logger that also owns the Rich console used for command output.

    Diagnostics go through the standard logging levels; search results are
    written with the console helpers (print, print_dict).
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the revql logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console()

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """
        Print a plain message (with Rich markup support).

        Lines are never wrapped to the terminal width, so long paths stay on
        one line.

        Args:
            message: Message to display
        """
        self.console.print(message, soft_wrap=True, highlight=False)

    def print_dict(self, data: dict[str, Any]) -> None:
        """
        Print dictionary data as JSON.

        Args:
            data: Dictionary to display
        """
        self.console.print_json(json.dumps(data, indent=2))


def get_logger(name: str = "revql") -> RevqlLogger:
    """
    Get or create a revql logger instance.

    Args:
        name: Logger name (default: "revql")

    Returns:
        RevqlLogger instance
    """
    logging.setLoggerClass(RevqlLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)
    logger.propagate = False

    return logger  # type: ignore[return-value]
