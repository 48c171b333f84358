"""
Progress reporting for environment operations.

The executable search narrates what it does (directories entered, executables
found, a final summary) through a SearchLog. The default implementation
forwards to the standard logging module; tests and callers can pass any
object with the same three methods.
"""

import logging
from typing import Optional, Protocol


class SearchLog(Protocol):
    """Receiver for human-readable progress messages."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...


class LoggingSearchLog:
    """SearchLog that writes to a logging.Logger (success is logged at INFO)."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("godotenv")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def success(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


__all__ = ["SearchLog", "LoggingSearchLog"]
