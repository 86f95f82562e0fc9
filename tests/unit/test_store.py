"""Unit tests for clilogger.core.store — LogStore write / read_all / clear."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from clilogger.core.audit import OperationAuditor
from clilogger.core.exceptions import EmptyMessageError, LogStoreError
from clilogger.core.store import LogStore, ReadStatus

_LINE_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] (?P<msg>.*)$")


@pytest.fixture
def audit_path(tmp_path: Path) -> Path:
    return tmp_path / "operationLogs.txt"


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "logs.txt"


@pytest.fixture
def store(log_path: Path, audit_path: Path) -> LogStore:
    return LogStore(log_path, OperationAuditor(audit_path))


def _audit_lines(path: Path) -> list[str]:
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


# ---------------------------------------------------------------------------
# write
# ---------------------------------------------------------------------------


class TestWrite:
    def test_appends_timestamped_line(self, store: LogStore, log_path: Path) -> None:
        store.write("hello world")
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        match = _LINE_RE.match(lines[0])
        assert match is not None
        assert match.group("msg") == "hello world"

    def test_returns_entry(self, store: LogStore) -> None:
        entry = store.write("deploy 42")
        assert entry.message == "deploy 42"
        assert entry.render() == f"[{entry.timestamp}] deploy 42"

    def test_creates_missing_directory(self, tmp_path: Path, audit_path: Path) -> None:
        nested = tmp_path / "a" / "b" / "logs.txt"
        LogStore(nested, OperationAuditor(audit_path)).write("x")
        assert nested.exists()

    def test_entries_accumulate_in_order(self, store: LogStore, log_path: Path) -> None:
        store.write("first")
        store.write("second")
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert [_LINE_RE.match(line).group("msg") for line in lines] == ["first", "second"]

    def test_message_kept_verbatim(self, store: LogStore, log_path: Path) -> None:
        store.write("  padded [bold]markup[/bold]  ")
        line = log_path.read_text(encoding="utf-8").splitlines()[0]
        assert line.endswith("]   padded [bold]markup[/bold]  ")

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_message_rejected(
        self, store: LogStore, log_path: Path, audit_path: Path, blank: str
    ) -> None:
        with pytest.raises(EmptyMessageError):
            store.write(blank)
        assert not log_path.exists()
        assert _audit_lines(audit_path) == []

    def test_blank_message_leaves_existing_file_untouched(
        self, store: LogStore, log_path: Path
    ) -> None:
        store.write("keep me")
        before = log_path.read_text(encoding="utf-8")
        with pytest.raises(EmptyMessageError):
            store.write("   ")
        assert log_path.read_text(encoding="utf-8") == before

    def test_success_audited(self, store: LogStore, audit_path: Path) -> None:
        store.write("hello")
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert 'Operation: WRITE - Message: "hello"' in lines[0]

    def test_io_failure_raises_and_audits(self, tmp_path: Path, audit_path: Path) -> None:
        bad = tmp_path / "logs_dir"
        bad.mkdir()
        store = LogStore(bad, OperationAuditor(audit_path))
        with pytest.raises(LogStoreError) as exc_info:
            store.write("hello")
        assert exc_info.value.operation == "write"
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: WRITE_ERROR - Failed to write: hello" in lines[0]

    def test_undecodable_argv_bytes_round_trip(
        self, store: LogStore, log_path: Path, audit_path: Path
    ) -> None:
        # Non-UTF-8 argv bytes arrive as surrogate escapes on POSIX
        store.write("caf\udce9")
        assert log_path.read_bytes().endswith(b"] caf\xe9\n")
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: WRITE - Message:" in lines[0]

    def test_unencodable_message_audited_as_error(
        self, store: LogStore, log_path: Path, audit_path: Path
    ) -> None:
        with pytest.raises(LogStoreError):
            store.write("bad \ud800 surrogate")
        assert not log_path.exists() or log_path.read_bytes() == b""
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: WRITE_ERROR - Failed to write: bad \\ud800 surrogate" in lines[0]


# ---------------------------------------------------------------------------
# read_all
# ---------------------------------------------------------------------------


class TestReadAll:
    def test_missing_file(self, store: LogStore, audit_path: Path) -> None:
        contents = store.read_all()
        assert contents.status is ReadStatus.MISSING
        assert contents.text == ""
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: READ_ERROR - Failed to read logs" in lines[0]

    def test_empty_file(self, store: LogStore, log_path: Path, audit_path: Path) -> None:
        log_path.write_text("  \n\n", encoding="utf-8")
        contents = store.read_all()
        assert contents.status is ReadStatus.EMPTY
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: READ - Logs displayed successfully" in lines[0]

    def test_contents_returned_verbatim(self, store: LogStore, log_path: Path) -> None:
        store.write("hello world")
        contents = store.read_all()
        assert contents.status is ReadStatus.CONTENTS
        assert contents.text == log_path.read_text(encoding="utf-8")
        assert contents.text.count("hello world") == 1

    def test_invalid_utf8_bytes_replaced(
        self, store: LogStore, log_path: Path, audit_path: Path
    ) -> None:
        log_path.write_bytes(b"[2026-01-01T00:00:00.000Z] caf\xe9\n")
        contents = store.read_all()
        assert contents.status is ReadStatus.CONTENTS
        assert "caf\ufffd" in contents.text
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: READ - Logs displayed successfully" in lines[0]

    def test_io_failure_raises_and_audits(self, tmp_path: Path, audit_path: Path) -> None:
        bad = tmp_path / "logs_dir"
        bad.mkdir()
        store = LogStore(bad, OperationAuditor(audit_path))
        with pytest.raises(LogStoreError):
            store.read_all()
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: READ_ERROR" in lines[0]


# ---------------------------------------------------------------------------
# clear
# ---------------------------------------------------------------------------


class TestClear:
    def test_truncates(self, store: LogStore, log_path: Path) -> None:
        store.write("one")
        store.write("two")
        store.clear()
        assert log_path.read_text(encoding="utf-8") == ""
        assert store.read_all().status is ReadStatus.EMPTY

    def test_creates_absent_file(self, store: LogStore, log_path: Path) -> None:
        store.clear()
        assert log_path.exists()
        assert log_path.stat().st_size == 0

    def test_audited(self, store: LogStore, audit_path: Path) -> None:
        store.clear()
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: CLEAR - All logs cleared" in lines[0]

    def test_io_failure_raises_and_audits(self, tmp_path: Path, audit_path: Path) -> None:
        bad = tmp_path / "logs_dir"
        bad.mkdir()
        store = LogStore(bad, OperationAuditor(audit_path))
        with pytest.raises(LogStoreError):
            store.clear()
        lines = _audit_lines(audit_path)
        assert len(lines) == 1
        assert "Operation: CLEAR_ERROR - Failed to clear logs" in lines[0]


class TestAuditCount:
    def test_one_audit_line_per_operation(self, store: LogStore, audit_path: Path) -> None:
        store.write("a")
        store.read_all()
        store.clear()
        store.read_all()
        with pytest.raises(EmptyMessageError):
            store.write("")
        assert len(_audit_lines(audit_path)) == 4
