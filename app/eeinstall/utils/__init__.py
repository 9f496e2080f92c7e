"""Utility modules for eeinstall.

This module exports commonly used utility functions.
"""

from eeinstall.utils.formatting import (
    console,
    err_console,
    print_command,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from eeinstall.utils.shell import (
    CommandResult,
    command_exists,
    probe_url,
    run_command,
    run_interactive,
)

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_command",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "probe_url",
    "run_command",
    "run_interactive",
]
