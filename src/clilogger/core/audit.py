"""
Operation audit — append-only text log of every clilogger operation.

Each line has the form::

    [2026-01-01T12:00:00.000Z] Operation: WRITE - Message: "hello"

Entries are never modified or read back by clilogger itself.

Usage::

    auditor = OperationAuditor(path)
    auditor.record(Operation.CLEAR, "- All logs cleared")
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from clilogger.core.constants import Operation

logger = logging.getLogger(__name__)


def iso_timestamp(now: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OperationAuditor:
    """
    Best-effort append-only writer for audit records.

    Safe for single-process use (standard append open; OS-level atomicity).
    Not safe for concurrent multi-process writes without an external lock.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def record(self, operation: Operation | str, details: str = "") -> None:
        """Append one audit line. Write failures are logged, never raised."""
        name = operation.value if isinstance(operation, Operation) else operation
        line = f"[{iso_timestamp()}] Operation: {name} {details}\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8", errors="backslashreplace") as fh:
                fh.write(line)
        except (OSError, UnicodeError) as exc:
            # Audit failure must never block the operation being audited
            logger.error("Error logging operation %s to %s: %s", name, self.path, exc)
