"""Rich console formatting utilities.

Provides consistent formatting for installer output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from eeinstall.models.package import InstallPlan

INSTALLER_THEME = Theme(
    {
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "added": "#c1ff62",
        "changed": "#0e8ac8",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=INSTALLER_THEME, color_system=_detect_color_system())
err_console = Console(theme=INSTALLER_THEME, stderr=True, color_system=_detect_color_system())


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]INFO:[/] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]WARNING:[/] {escape(message)}", highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]ERROR:[/] {escape(message)}", highlight=False)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")


def print_command(command: str) -> None:
    """Echo a command before it runs, shell-trace style."""
    err_console.print(f"[muted]+ {escape(command)}[/]", highlight=False)


def create_plan_table(plan: InstallPlan, extra: list[str] | None = None) -> Table:
    """Create a Rich table displaying the install transaction.

    Args:
        plan: The install plan to display.
        extra: Additional install arguments (e.g., the containerd.io spec).

    Returns:
        Rich Table configured for plan display.
    """
    table = Table(
        title=f"Install Plan ({plan.operation.value})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Version", style="muted")

    for pkg in plan.packages:
        table.add_row(f"[added]{pkg.name}[/added]", pkg.version or "latest")
    for arg in extra or []:
        table.add_row(f"[changed]{arg}[/changed]", "dependency")

    return table
