"""Utility modules for devcleaner.

This module exports commonly used utility functions.
"""

from devcleaner.utils.formatting import (
    console,
    create_project_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from devcleaner.utils.shell import CommandResult, command_exists, run_command, run_interactive

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_project_table",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
]
