"""
clilogger.core — storage, auditing, system metrics and shared infrastructure.

Modules:
    config      Configuration loading (TOML + env vars)
    constants   Exit codes, file names, audit operation names
    exceptions  clilogger exception hierarchy
    logging     Diagnostic logging setup
    audit       Append-only operation audit file
    store       Message log file (write / read / clear)
    sysinfo     Host system snapshot
"""
