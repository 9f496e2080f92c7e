"""CLI package for eeinstall.

This package contains the Typer application.
"""

from eeinstall.cli.main import app

__all__ = ["app"]
