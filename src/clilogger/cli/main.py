"""
clilogger CLI entry point.

Commands (verbs are case-insensitive):
  clilogger                      — interactive menu
  clilogger write [message...]   — append a message (prompts when omitted)
  clilogger read                 — print the log file
  clilogger clear                — truncate the log file
  clilogger info [--json]        — show system information
  clilogger interactive          — interactive menu (aliases: menu, i)
  clilogger help                 — usage text (aliases: --help, -h)

Anything else prints "Unknown command" and exits 0.
"""

from __future__ import annotations

import sys
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from clilogger import __version__
from clilogger.cli._commands import AppContext, build_app
from clilogger.core.constants import ExitCode

console = Console()
err_console = Console(stderr=True)

_ALIASES = {
    "--help": "help",
    "-h": "help",
    "menu": "interactive",
    "i": "interactive",
}


class CommandGroup(click.Group):
    """Case-insensitive dispatch with aliases and a catch-all for unknown verbs."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        name = cmd_name.lower()
        return super().get_command(ctx, _ALIASES.get(name, name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd = self.get_command(ctx, args[0])
        if cmd is None:
            return "unknown", unknown, [args[0].lower()]
        return cmd.name, cmd, args[1:]


def _load_app() -> AppContext:
    from clilogger.core.config import load_config
    from clilogger.core.exceptions import ConfigError
    from clilogger.core.logging import configure_logging

    try:
        config = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging.level)
    return build_app(config, console=console, err_console=err_console)


def _finish(ctx: click.Context, code: ExitCode) -> None:
    if code != ExitCode.SUCCESS:
        ctx.exit(int(code))


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(
    name="clilogger",
    cls=CommandGroup,
    invoke_without_command=True,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(__version__, "--version", "-V", message="clilogger %(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """clilogger — timestamped message log with an operation audit trail."""
    ctx.obj = _load_app()
    if ctx.invoked_subcommand is None:
        from clilogger.cli._interactive import InteractiveMenu

        _finish(ctx, InteractiveMenu(ctx.obj).run())


# ---------------------------------------------------------------------------
# write / read / clear
# ---------------------------------------------------------------------------


@cli.command(add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def write(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Append a message to the log file."""
    from clilogger.cli._commands import cmd_write

    app: AppContext = ctx.obj
    if words:
        message = " ".join(words)
    else:
        try:
            message = Prompt.ask(
                "Enter your log message", console=app.console, default="", show_default=False
            )
        except EOFError:
            message = ""
    _finish(ctx, cmd_write(app, message))


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def read(ctx: click.Context, extra: tuple[str, ...]) -> None:
    """Read and display all logs."""
    from clilogger.cli._commands import cmd_read

    _finish(ctx, cmd_read(ctx.obj))


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def clear(ctx: click.Context, extra: tuple[str, ...]) -> None:
    """Clear all logs from the file."""
    from clilogger.cli._commands import cmd_clear

    _finish(ctx, cmd_clear(ctx.obj))


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option("--json", "as_json", is_flag=True, default=False)
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def info(ctx: click.Context, as_json: bool, extra: tuple[str, ...]) -> None:
    """Display system information."""
    from clilogger.cli._commands import cmd_info

    _finish(ctx, cmd_info(ctx.obj, as_json=as_json))


# ---------------------------------------------------------------------------
# interactive / help / unknown
# ---------------------------------------------------------------------------


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def interactive(ctx: click.Context, extra: tuple[str, ...]) -> None:
    """Start the interactive menu."""
    from clilogger.cli._interactive import InteractiveMenu

    _finish(ctx, InteractiveMenu(ctx.obj).run())


@cli.command("help", add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def help_(ctx: click.Context, extra: tuple[str, ...]) -> None:
    """Show usage text."""
    from clilogger.cli._commands import cmd_help

    _finish(ctx, cmd_help(ctx.obj))


@click.command("unknown", add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("command_name")
@click.pass_context
def unknown(ctx: click.Context, command_name: str) -> None:
    """Report a verb that matches no command."""
    from clilogger.cli._commands import cmd_unknown

    _finish(ctx, cmd_unknown(ctx.obj, command_name))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None, **kwargs: Any) -> None:
    cli.main(args=argv, prog_name="clilogger", **kwargs)


if __name__ == "__main__":
    main()
