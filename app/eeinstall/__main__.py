"""Allow ``python -m eeinstall``."""

from eeinstall.cli.main import app

app()
