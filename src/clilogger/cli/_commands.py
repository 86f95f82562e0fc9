"""
Command implementations shared by the direct-argument CLI and the interactive menu.

Each ``cmd_*`` function renders its own output and returns an ExitCode; none
of them raise for documented failures.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import click
from rich.console import Console
from rich.markup import escape

from clilogger.core.audit import OperationAuditor
from clilogger.core.config import LoggerConfig
from clilogger.core.constants import (
    HELP_BANNER_END,
    HELP_BANNER_START,
    INFO_BANNER_END,
    INFO_BANNER_START,
    LOG_BANNER_END,
    LOG_BANNER_START,
    ExitCode,
    Operation,
)
from clilogger.core.exceptions import EmptyMessageError, LogStoreError
from clilogger.core.store import LogStore, ReadStatus
from clilogger.core.sysinfo import SystemInfoReader

logger = logging.getLogger(__name__)

PROG_NAME = "clilogger"


@dataclass
class AppContext:
    """Everything a command needs, built once per process from the config."""

    config: LoggerConfig
    auditor: OperationAuditor
    store: LogStore
    sysinfo: SystemInfoReader
    console: Console
    err_console: Console


def build_app(config: LoggerConfig, console: Console, err_console: Console) -> AppContext:
    auditor = OperationAuditor(config.audit_path)
    logger.debug("Log file: %s, audit file: %s", config.log_path, config.audit_path)
    return AppContext(
        config=config,
        auditor=auditor,
        store=LogStore(config.log_path, auditor),
        sysinfo=SystemInfoReader(auditor),
        console=console,
        err_console=err_console,
    )


# ---------------------------------------------------------------------------
# write / read / clear
# ---------------------------------------------------------------------------


def cmd_write(app: AppContext, message: str) -> ExitCode:
    try:
        app.store.write(message)
    except EmptyMessageError as exc:
        app.err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        app.console.print(f'Usage: {PROG_NAME} write "Your message here"')
        return ExitCode.SUCCESS
    except LogStoreError as exc:
        app.err_console.print(f"[red]Error writing to log file:[/red] {escape(exc.reason)}")
        return ExitCode.IO_ERROR

    app.console.print("[green]Log written successfully![/green]")
    return ExitCode.SUCCESS


def cmd_read(app: AppContext) -> ExitCode:
    try:
        contents = app.store.read_all()
    except LogStoreError as exc:
        app.err_console.print(f"[red]Error reading log file:[/red] {escape(exc.reason)}")
        return ExitCode.IO_ERROR

    if contents.status is ReadStatus.MISSING:
        app.console.print("No logs found. The log file doesn't exist yet.")
        app.console.print(f'Use "{PROG_NAME} write <message>" to create your first log.')
    elif contents.status is ReadStatus.EMPTY:
        app.console.print("No logs found. The log file is empty.")
    else:
        click.echo(f"\n{LOG_BANNER_START}")
        click.echo(contents.text)
        click.echo(f"{LOG_BANNER_END}\n")
    return ExitCode.SUCCESS


def cmd_clear(app: AppContext) -> ExitCode:
    try:
        app.store.clear()
    except LogStoreError as exc:
        app.err_console.print(f"[red]Error clearing log file:[/red] {escape(exc.reason)}")
        return ExitCode.IO_ERROR

    app.console.print("[green]Logs cleared successfully![/green]")
    return ExitCode.SUCCESS


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


def cmd_info(app: AppContext, as_json: bool = False) -> ExitCode:
    snap = app.sysinfo.snapshot()

    if as_json:
        click.echo(json.dumps(snap.to_dict(), indent=2))
        return ExitCode.SUCCESS

    rows = [
        ("Platform", snap.platform),
        ("Hostname", snap.hostname),
        ("Total Memory", snap.total_memory),
        ("Free Memory", snap.free_memory),
        ("CPU Cores", str(snap.cpu_cores)),
        ("System Uptime", snap.uptime),
    ]
    app.console.print(f"\n[bold]{INFO_BANNER_START}[/bold]", highlight=False)
    for label, value in rows:
        app.console.print(f"{label}: {escape(value)}", highlight=False)
    app.console.print(f"[bold]{INFO_BANNER_END}[/bold]\n", highlight=False)
    return ExitCode.SUCCESS


# ---------------------------------------------------------------------------
# help / unknown
# ---------------------------------------------------------------------------

_HELP_LINES = [
    f"Usage: {PROG_NAME} <command> [options]",
    "",
    "Commands:",
    "  write <message>    Write a message to the log file",
    "  write              Prompt for a message to write",
    "  read               Read and display all logs",
    "  clear              Clear all logs from the file",
    "  info [--json]      Display system information",
    "  interactive        Start the interactive menu (aliases: menu, i)",
    "  help               Show this help message (aliases: --help, -h)",
    "",
    "Run without a command to start the interactive menu.",
    "",
    "Examples:",
    f'  {PROG_NAME} write "This is my first log"',
    f"  {PROG_NAME} read",
    f"  {PROG_NAME} clear",
    f"  {PROG_NAME} info",
]


def cmd_help(app: AppContext) -> ExitCode:
    app.console.print(f"\n[bold]{HELP_BANNER_START}[/bold]")
    for line in _HELP_LINES:
        app.console.print(escape(line), highlight=False)
    app.console.print(f"[bold]{HELP_BANNER_END}[/bold]\n")
    app.auditor.record(Operation.HELP, "- Help displayed")
    return ExitCode.SUCCESS


def cmd_unknown(app: AppContext, command: str) -> ExitCode:
    app.err_console.print(f"[red]Unknown command:[/red] {escape(command)}", highlight=False)
    app.console.print(f'Use "{PROG_NAME} help" for available commands.')
    app.auditor.record(Operation.ERROR, f"- Unknown command: {command}")
    return ExitCode.SUCCESS
