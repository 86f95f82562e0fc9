"""
clilogger — timestamped message log with an operation audit trail.

clilogger appends messages to a flat text log, prints or clears it, and
reports basic host metrics. Every operation is also written to a second,
append-only audit file.

Package layout (src/clilogger/):
  core/       — config, constants, exceptions, log store, auditor, system info
  cli/        — Click CLI entry point and the interactive menu
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
