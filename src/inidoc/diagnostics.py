"""Leveled diagnostic messages emitted by documents.

A document never prints anything itself. It hands every message to a sink, which
defaults to NullSink. Use LoggingSink to route the messages into the logging
module.
"""

import logging
from enum import Enum
from typing import Protocol


class DiagLevel(Enum):
    """Severity of a diagnostic message."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
    CRITICAL = "critical"

    @property
    def logging_level(self) -> int:
        """The logging level a message of this severity is logged with."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: dict[DiagLevel, int] = {
    DiagLevel.DEBUG: logging.DEBUG,
    DiagLevel.INFO: logging.INFO,
    DiagLevel.WARN: logging.WARNING,
    DiagLevel.ERROR: logging.ERROR,
    DiagLevel.FATAL: logging.CRITICAL,
    DiagLevel.CRITICAL: logging.CRITICAL,
}


class DiagnosticSink(Protocol):
    """Consumer of diagnostic messages. Must not raise."""

    def __call__(self, level: DiagLevel, message: str) -> None: ...


class NullSink:
    """Sink that discards every message."""

    def __call__(self, level: DiagLevel, message: str) -> None:
        return None


class LoggingSink:
    """Sink that forwards messages to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """
        Args:
            logger (logging.Logger | None, optional): The logger to forward to. If None,
                will use the "inidoc" logger. Defaults to None.
        """
        self.logger = logger or logging.getLogger("inidoc")

    def __call__(self, level: DiagLevel, message: str) -> None:
        self.logger.log(level.logging_level, message)
