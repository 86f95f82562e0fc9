"""
Interactive menu — numbered options over the same commands as the CLI.

State machine::

    SHOW_MENU → AWAIT_CHOICE → EXECUTING → AWAIT_CONTINUE ─┬→ SHOW_MENU
                     │              │                      └→ EXIT
                     └── EOF ───────┴── option 6 ──────────→ EXIT

Every path into EXIT prints a goodbye and writes one EXIT audit record.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum

from rich.prompt import Prompt

from clilogger.cli._commands import AppContext, cmd_clear, cmd_help, cmd_info, cmd_read, cmd_write
from clilogger.core.constants import AFFIRMATIVE_ANSWERS, ExitCode, Operation

logger = logging.getLogger(__name__)


class MenuState(Enum):
    SHOW_MENU = "show_menu"
    AWAIT_CHOICE = "await_choice"
    EXECUTING = "executing"
    AWAIT_CONTINUE = "await_continue"
    EXIT = "exit"


MENU_OPTIONS = [
    ("1", "Write a log message"),
    ("2", "Read all logs"),
    ("3", "Clear all logs"),
    ("4", "Show system information"),
    ("5", "Help"),
    ("6", "Exit"),
]


def is_affirmative(answer: str | None) -> bool:
    return answer is not None and answer.strip().lower() in AFFIRMATIVE_ANSWERS


class InteractiveMenu:
    """
    Menu loop driven by blocking line reads.

    Usage::

        menu = InteractiveMenu(app)
        exit_code = menu.run()
    """

    def __init__(
        self,
        app: AppContext,
        pause_seconds: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._app = app
        self._console = app.console
        if pause_seconds is None:
            pause_seconds = app.config.interactive.pause_seconds
        self._pause_seconds = pause_seconds
        self._sleep = sleep

    def run(self) -> ExitCode:
        self._console.print("[bold]Welcome to CLI Logger![/bold]")
        state = MenuState.SHOW_MENU
        choice = ""

        while state is not MenuState.EXIT:
            logger.debug("Menu state: %s", state.value)
            if state is MenuState.SHOW_MENU:
                self._show_menu()
                state = MenuState.AWAIT_CHOICE
            elif state is MenuState.AWAIT_CHOICE:
                line = self._ask("Choose an option (1-6)")
                if line is None:
                    state = MenuState.EXIT
                else:
                    choice = line.strip()
                    state = MenuState.EXECUTING
            elif state is MenuState.EXECUTING:
                state = self._execute(choice)
            elif state is MenuState.AWAIT_CONTINUE:
                self._pause()
                answer = self._ask("Do you want to continue? (y/N)")
                state = MenuState.SHOW_MENU if is_affirmative(answer) else MenuState.EXIT

        self._console.print("Goodbye!")
        self._app.auditor.record(Operation.EXIT, "- Interactive session ended")
        return ExitCode.SUCCESS

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _show_menu(self) -> None:
        self._console.print("\n[bold]--- CLI LOGGER MENU ---[/bold]")
        for key, label in MENU_OPTIONS:
            self._console.print(f"  {key}. {label}", highlight=False)
        self._console.print()

    def _execute(self, choice: str) -> MenuState:
        if choice == "1":
            self._write()
        elif choice == "2":
            cmd_read(self._app)
        elif choice == "3":
            self._clear()
        elif choice == "4":
            cmd_info(self._app)
        elif choice == "5":
            cmd_help(self._app)
        elif choice == "6":
            return MenuState.EXIT
        else:
            self._console.print("[yellow]Invalid choice. Please select 1-6.[/yellow]")
        return MenuState.AWAIT_CONTINUE

    def _write(self) -> None:
        message = self._ask("Enter your log message")
        if message is None or not message.strip():
            self._app.err_console.print("[red]Error:[/red] Message cannot be empty.")
            return
        cmd_write(self._app, message)

    def _clear(self) -> None:
        answer = self._ask("Are you sure you want to clear all logs? (y/N)")
        if is_affirmative(answer):
            cmd_clear(self._app)
        else:
            self._console.print("Clear cancelled.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ask(self, prompt: str) -> str | None:
        """Read one line; None means the input stream is exhausted."""
        try:
            return Prompt.ask(prompt, console=self._console, default="", show_default=False)
        except EOFError:
            return None

    def _pause(self) -> None:
        if self._pause_seconds > 0:
            self._sleep(self._pause_seconds)
