"""Host system snapshot: platform, hostname, memory, CPU count and uptime."""

from __future__ import annotations

import socket
import sys
import time
from dataclasses import asdict, dataclass

import psutil

from clilogger.core.audit import OperationAuditor
from clilogger.core.constants import Operation

_MIB = 1024 * 1024


@dataclass(frozen=True)
class SystemSnapshot:
    """Point-in-time host metrics, already formatted for display."""

    platform: str
    hostname: str
    total_memory: str
    free_memory: str
    cpu_cores: int
    uptime: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def format_mebibytes(num_bytes: float) -> str:
    return f"{num_bytes / _MIB:.2f} MB"


def format_hours(seconds: float) -> str:
    return f"{seconds / 3600:.2f} hours"


def collect_snapshot() -> SystemSnapshot:
    """Query the OS for current metrics."""
    mem = psutil.virtual_memory()
    uptime_seconds = max(0.0, time.time() - psutil.boot_time())
    return SystemSnapshot(
        platform=sys.platform,
        hostname=socket.gethostname(),
        total_memory=format_mebibytes(mem.total),
        free_memory=format_mebibytes(mem.available),
        cpu_cores=psutil.cpu_count(logical=True) or 0,
        uptime=format_hours(uptime_seconds),
    )


class SystemInfoReader:
    """Takes a fresh snapshot on every call and audits it."""

    def __init__(self, auditor: OperationAuditor) -> None:
        self._auditor = auditor

    def snapshot(self) -> SystemSnapshot:
        snap = collect_snapshot()
        self._auditor.record(Operation.INFO, "- System information displayed")
        return snap
