"""Zypper installer implementation.

Registers the Docker EE repository on SLES and openSUSE Leap and installs
with zypper, pinning versions as ``name-version``.
"""

import logging
import platform
from typing import cast

from eeinstall.core.config import InstallerConfig
from eeinstall.core.privilege import CommandRunner
from eeinstall.installers.base import Installer
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import CLI_PACKAGE, Backend, InstallPlan, ResolvedPackage
from eeinstall.queries.base import PackageQuery
from eeinstall.queries.zypper import ZypperQuery
from eeinstall.utils.shell import probe_url

logger = logging.getLogger(__name__)

# Packages from the distribution that conflict with Docker EE
CONFLICTING_PACKAGES = ["docker", "docker-engine", "docker-libnetwork", "runc", "containerd"]


class ZypperInstaller(Installer):
    """Installer for SLES 12/15 and openSUSE Leap 15."""

    def __init__(
        self,
        config: InstallerConfig,
        target: DistroTarget,
        runner: CommandRunner,
    ) -> None:
        super().__init__(config, target, runner)
        self.repo_version = ""
        self.install_flags: list[str] = []
        if target.dist_version.startswith("12"):
            self.repo_version = "12.3"
        elif target.dist_version.startswith("15"):
            self.repo_version = "15"
            self.install_flags = ["--allow-vendor-change"]

    @property
    def backend(self) -> Backend:
        """Return ZYPPER as the backend."""
        return Backend.ZYPPER

    @property
    def supports_rootless(self) -> bool:
        return self.repo_version != "12.3"

    @property
    def repo_alias(self) -> str:
        """Return the zypper alias of the Docker EE repository."""
        return f"docker-ee-{self.config.channel}"

    def _create_query(self) -> PackageQuery:
        return ZypperQuery(self.runner)

    def install_prerequisites(self) -> None:
        self.runner.run(["zypper", "install", "-y", "curl"])

    def register_repository(self) -> None:
        url = self.config.docker_url
        if not probe_url(f"{url}/docker-ee.repo"):
            url = f"{url}/sles"
        self.repo_url = url

        arch = platform.machine()
        # removerepo of an unknown alias is harmless
        self.runner.run(["zypper", "removerepo", self.repo_alias], check=False)
        self.runner.run(
            [
                "zypper",
                "addrepo",
                f"{url}/{self.repo_version}/{arch}/{self.config.channel}",
                self.repo_alias,
            ]
        )
        self.runner.run(["rpm", "--import", f"{url}/gpg"])
        self.runner.run(["zypper", "refresh"])

    def package_spec(self, package: ResolvedPackage) -> str:
        if package.version is None:
            return package.name
        return f"{package.name}-{package.version}"

    def install(self, plan: InstallPlan) -> None:
        self.runner.run(["zypper", "rm", "-y", *CONFLICTING_PACKAGES], check=False)

        main, *others = plan.packages
        args = ["zypper", "install", *self.install_flags, "--replacefiles", "-f", "-y"]
        args.append(self.package_spec(main))
        args.append(self.containerd_package)
        args.extend(self.package_spec(pkg) for pkg in others)

        self.runner.run(args)

    def after_install(self, plan: InstallPlan) -> None:
        """Pin the cli package again after the main transaction.

        zypper may resolve the cli package to another version while
        satisfying docker-ee's dependencies, so a requested version is
        enforced with a second forced install.
        """
        if self._pattern is None:
            return

        query = cast(ZypperQuery, self.query)
        if not query.is_installed(CLI_PACKAGE):
            return

        cli = self.resolver.select(CLI_PACKAGE, self._pattern)
        if cli is None:
            logger.info("No %s version to pin", CLI_PACKAGE)
            return

        self.runner.run(
            ["zypper", "install", "-f", "-y", self.package_spec(cli), self.containerd_package]
        )
