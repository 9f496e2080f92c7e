"""Main CLI application entry point.

Defines the Typer application. Every option can also be given through
the environment variable named in its help text.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from eeinstall import __version__
from eeinstall.core.config import DEFAULT_CHANNEL, InstallerConfig
from eeinstall.core.dispatcher import report_error, run_installer
from eeinstall.core.errors import ConfigurationError
from eeinstall.utils.formatting import err_console

app = typer.Typer(
    name="docker-ee-install",
    help="Install Docker EE through the native package manager.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docker-ee-install version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise only warnings.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


@app.command()
def install(
    url: Annotated[
        str | None,
        typer.Option(
            "--url",
            "-u",
            envvar="DOCKER_URL",
            help="Base URL of the Docker EE repository (required).",
            show_envvar=True,
        ),
    ] = None,
    engine_version: Annotated[
        str | None,
        typer.Option(
            "--engine-version",
            "-e",
            envvar="VERSION",
            help="Docker EE version to install, e.g. 20.10.12. Default: latest.",
            show_envvar=True,
        ),
    ] = None,
    channel: Annotated[
        str | None,
        typer.Option(
            "--channel",
            "-c",
            envvar="CHANNEL",
            help=f"Repository channel. Default: {DEFAULT_CHANNEL}.",
            show_envvar=True,
        ),
    ] = None,
    containerd_version: Annotated[
        str | None,
        typer.Option(
            "--containerd-version",
            envvar="CONTAINERD_VERSION",
            help="containerd.io version prefix to pin.",
            show_envvar=True,
        ),
    ] = None,
    os_release: Annotated[
        Path | None,
        typer.Option(
            "--os-release",
            help="os-release file describing the host.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print mutating commands instead of running them.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Install, upgrade or downgrade Docker EE on this host.

    The distribution is read from /etc/os-release and the matching
    package manager (apt, yum or zypper) is used.

    Examples:
        DOCKER_URL=https://repo.example.com docker-ee-install
        docker-ee-install --url https://repo.example.com --engine-version 20.10.12
        docker-ee-install -u https://repo.example.com -e 19.03.14-ee-1 --dry-run
    """
    configure_logging(verbose)

    try:
        config = InstallerConfig.from_env(
            {},
            docker_url=url,
            version=engine_version,
            channel=channel,
            containerd_version=containerd_version,
            dry_run=dry_run,
        )
    except ConfigurationError as e:
        raise typer.Exit(code=report_error(e)) from e

    exit_code = run_installer(config, os_release=os_release)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
