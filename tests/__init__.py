"""
clilogger test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (temporary files only)
    tests/integration/  End-to-end CLI runs through click's CliRunner

Run all tests:
    pytest

Run unit tests only:
    pytest tests/unit/
"""
