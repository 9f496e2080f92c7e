"""Backend dispatch.

Selects the installer for the host distribution, drives it through the
install sequence and converts fatal errors into process exit codes.
"""

import logging
from pathlib import Path

from eeinstall.core.config import InstallerConfig
from eeinstall.core.distro import detect_distribution, match_distribution
from eeinstall.core.errors import (
    InstallerError,
    UnsupportedDistributionError,
    VersionNotFoundError,
)
from eeinstall.core.privilege import CommandRunner, privilege_prefix
from eeinstall.installers.apt import AptInstaller
from eeinstall.installers.base import Installer
from eeinstall.installers.yum import YumInstaller
from eeinstall.installers.zypper import ZypperInstaller
from eeinstall.models.package import Backend
from eeinstall.utils.formatting import err_console, print_error, print_success, print_warning

logger = logging.getLogger(__name__)

ISSUE_URL = "https://github.com/docker/docker-install-ee"

# Exit statuses of a shell when a command is missing or cannot be run
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126

INSTALLERS: dict[Backend, type[Installer]] = {
    Backend.APT: AptInstaller,
    Backend.YUM: YumInstaller,
    Backend.ZYPPER: ZypperInstaller,
}


def report_error(error: InstallerError) -> int:
    """Print a fatal error for the operator.

    Args:
        error: The error that aborted the run.

    Returns:
        Exit code for the process.
    """
    err_console.print()
    print_error(str(error))
    if isinstance(error, UnsupportedDistributionError):
        err_console.print(f"       If you feel this is a mistake file an issue @ {ISSUE_URL}")
    elif isinstance(error, VersionNotFoundError):
        err_console.print(f"       Searched with: {error.search}", highlight=False, markup=False)
    err_console.print()
    return error.exit_code


class BackendDispatcher:
    """Runs the installer matching a distribution.

    Attributes:
        config: Installer configuration.
        runner: Runner for privileged commands.
    """

    def __init__(self, config: InstallerConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    def select(self, dist_id: str, dist_version: str) -> Installer:
        """Create the installer for a distribution.

        Args:
            dist_id: os-release ID.
            dist_version: os-release VERSION_ID.

        Returns:
            Installer for the matched backend.

        Raises:
            UnsupportedDistributionError: If the distribution is not supported.
        """
        target = match_distribution(dist_id, dist_version)
        logger.debug("Matched %s:%s to %s", dist_id, dist_version, target)
        return INSTALLERS[target.backend](self.config, target, self.runner)

    def dispatch(self, dist_id: str, dist_version: str) -> int:
        """Install Docker EE on a distribution.

        Args:
            dist_id: os-release ID.
            dist_version: os-release VERSION_ID.

        Returns:
            0 on success, otherwise the exit code of the first fatal error.
        """
        if self.config.dry_run:
            print_warning("Dry run: repository and package changes are only printed")

        try:
            installer = self.select(dist_id, dist_version)
            plan = installer.run()
        except InstallerError as e:
            return report_error(e)
        except FileNotFoundError as e:
            print_error(f"Command not found: {e.filename}")
            return COMMAND_NOT_FOUND
        except OSError as e:
            print_error(f"Cannot run {e.filename or 'command'}: {e.strerror or e}")
            return COMMAND_NOT_EXECUTABLE

        if self.config.dry_run:
            print_success("Dry run complete, no changes were made.")
        else:
            print_success(f"Docker EE {plan.operation.value} complete.")
        return 0


def run_installer(
    config: InstallerConfig,
    *,
    os_release: Path | None = None,
    user: str | None = None,
) -> int:
    """Acquire root, detect the distribution and dispatch.

    Args:
        config: Installer configuration.
        os_release: os-release file to read. If None, uses /etc/os-release.
        user: Current user name. If None, it is looked up.

    Returns:
        Process exit code.
    """
    try:
        prefix = privilege_prefix(user)
        dist_id, dist_version = detect_distribution(os_release)
    except InstallerError as e:
        return report_error(e)

    runner = CommandRunner(prefix, dry_run=config.dry_run)
    return BackendDispatcher(config, runner).dispatch(dist_id, dist_version)
