"""clilogger constants: exit codes, filesystem layout, and audit operation names."""

from __future__ import annotations

from enum import Enum, IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    IO_ERROR = 1
    CONFIG_ERROR = 2


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

CLILOGGER_DIR_NAME = ".clilogger"
CONFIG_FILENAME = "config.toml"
LOG_FILENAME = "logs.txt"
AUDIT_FILENAME = "operationLogs.txt"

# ---------------------------------------------------------------------------
# Interactive mode
# ---------------------------------------------------------------------------

DEFAULT_PAUSE_SECONDS = 0.5  # cosmetic delay before re-prompting
MAX_PAUSE_SECONDS = 5.0
AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})

# ---------------------------------------------------------------------------
# Output banners
# ---------------------------------------------------------------------------

LOG_BANNER_START = "--- LOG CONTENTS ---"
LOG_BANNER_END = "--- END OF LOGS ---"
INFO_BANNER_START = "--- SYSTEM INFORMATION ---"
INFO_BANNER_END = "--- END SYSTEM INFO ---"
HELP_BANNER_START = "--- CLI LOGGER HELP ---"
HELP_BANNER_END = "--- END HELP ---"

# ---------------------------------------------------------------------------
# Audit operations
# ---------------------------------------------------------------------------


class Operation(str, Enum):
    """Operation names written to the audit file."""

    WRITE = "WRITE"
    WRITE_ERROR = "WRITE_ERROR"
    READ = "READ"
    READ_ERROR = "READ_ERROR"
    CLEAR = "CLEAR"
    CLEAR_ERROR = "CLEAR_ERROR"
    INFO = "INFO"
    HELP = "HELP"
    ERROR = "ERROR"
    EXIT = "EXIT"
