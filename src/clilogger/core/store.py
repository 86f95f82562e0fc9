"""
Log store — the flat text file of timestamped user messages.

One entry per line::

    [2026-01-01T12:00:00.000Z] deployed build 42

Entries are only ever appended; the whole file can be cleared, individual
lines cannot be edited or removed. Every operation reports its outcome to the
OperationAuditor, except a blank-message rejection which never reaches storage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from clilogger.core.audit import OperationAuditor, iso_timestamp
from clilogger.core.constants import Operation
from clilogger.core.exceptions import EmptyMessageError, LogStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    message: str

    def render(self) -> str:
        return f"[{self.timestamp}] {self.message}"


class ReadStatus(str, Enum):
    CONTENTS = "contents"
    EMPTY = "empty"
    MISSING = "missing"


@dataclass(frozen=True)
class LogContents:
    status: ReadStatus
    text: str = ""


class LogStore:
    """Append, read-all and clear against a single log file."""

    def __init__(self, path: Path, auditor: OperationAuditor) -> None:
        self.path = path
        self._auditor = auditor

    def write(self, message: str) -> LogEntry:
        """
        Append ``message`` with the current timestamp.

        Raises EmptyMessageError for blank input (no audit record) and
        LogStoreError if the append fails (audited as WRITE_ERROR).
        """
        if not message or not message.strip():
            raise EmptyMessageError("Please provide a message to write.")

        entry = LogEntry(timestamp=iso_timestamp(), message=message)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8", errors="surrogateescape") as fh:
                fh.write(entry.render() + "\n")
        except (OSError, UnicodeError) as exc:
            self._auditor.record(Operation.WRITE_ERROR, f"- Failed to write: {message}")
            raise LogStoreError("write", str(exc)) from exc

        logger.debug("Appended entry to %s", self.path)
        self._auditor.record(Operation.WRITE, f'- Message: "{message}"')
        return entry

    def read_all(self) -> LogContents:
        """
        Load the whole log file.

        A missing file is reported as ReadStatus.MISSING and audited as
        READ_ERROR; a blank file as ReadStatus.EMPTY and audited as READ.
        """
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            self._auditor.record(Operation.READ_ERROR, "- Failed to read logs")
            return LogContents(status=ReadStatus.MISSING)
        except OSError as exc:
            self._auditor.record(Operation.READ_ERROR, "- Failed to read logs")
            raise LogStoreError("read", str(exc)) from exc

        self._auditor.record(Operation.READ, "- Logs displayed successfully")
        if not text.strip():
            return LogContents(status=ReadStatus.EMPTY)
        return LogContents(status=ReadStatus.CONTENTS, text=text)

    def clear(self) -> None:
        """Truncate the log file to zero length, creating it if absent."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            self._auditor.record(Operation.CLEAR_ERROR, "- Failed to clear logs")
            raise LogStoreError("clear", str(exc)) from exc

        logger.debug("Cleared %s", self.path)
        self._auditor.record(Operation.CLEAR, "- All logs cleared")
