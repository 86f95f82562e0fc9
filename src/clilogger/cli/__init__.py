"""
clilogger.cli — Click-based CLI entry point and the interactive menu.

Modules:
    main            Command group, case-insensitive dispatch, aliases
    _commands       write / read / clear / info / help / unknown handlers
    _interactive    Numbered menu loop
"""
