"""clilogger exception hierarchy."""

from __future__ import annotations


class CliLoggerError(Exception):
    """Base exception for all clilogger errors."""


class ConfigError(CliLoggerError):
    """Raised when the configuration is invalid or cannot be read."""


class EmptyMessageError(CliLoggerError):
    """Raised when a blank message is submitted to the log."""


class LogStoreError(CliLoggerError):
    """Raised when the log file cannot be written, read, or cleared."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.reason = reason
