"""APT installer implementation.

Registers the Docker EE apt repository on Ubuntu and installs with
apt-get, pinning versions as ``name=version``.
"""

import logging
import shlex

from eeinstall.core.config import InstallerConfig
from eeinstall.core.privilege import CommandRunner
from eeinstall.installers.base import Installer
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import Backend, InstallPlan, ResolvedPackage
from eeinstall.queries.apt import AptQuery
from eeinstall.queries.base import PackageQuery
from eeinstall.utils.shell import command_exists, probe_url

logger = logging.getLogger(__name__)

_PREREQUISITES = [
    "apt-transport-https",
    "ca-certificates",
    "curl",
    "software-properties-common",
]

# Releases whose apt-get predates --allow-downgrades
_NO_ALLOW_DOWNGRADES = {"14.04"}


class AptInstaller(Installer):
    """Installer for Ubuntu APT repositories."""

    def __init__(
        self,
        config: InstallerConfig,
        target: DistroTarget,
        runner: CommandRunner,
    ) -> None:
        super().__init__(config, target, runner)
        self.runner.env.setdefault("DEBIAN_FRONTEND", "noninteractive")

    @property
    def backend(self) -> Backend:
        """Return APT as the backend."""
        return Backend.APT

    def _create_query(self) -> PackageQuery:
        return AptQuery(self.runner)

    def install_prerequisites(self) -> None:
        packages = list(_PREREQUISITES)
        if not command_exists("gpg"):
            packages.append("gnupg")

        self.runner.run(["apt-get", "update", "-qq"])
        self.runner.run(["apt-get", "install", "-y", "-qq", *packages])

    def register_repository(self) -> None:
        url = self.config.docker_url
        # A fetchable gpg key means the URL already points at the repository
        if not probe_url(f"{url}/gpg") and not url.endswith("/ubuntu"):
            url = f"{url}/ubuntu"
        self.repo_url = url

        arch = self._capture(["dpkg", "--print-architecture"])
        release = self._capture(["lsb_release", "-cs"])

        self.runner.shell(f"curl -fsSL {shlex.quote(url + '/gpg')} | apt-key add -qq - >/dev/null")
        self.runner.run(
            [
                "add-apt-repository",
                "-y",
                f"deb [arch={arch}] {url} {release} {self.config.channel}",
            ]
        )
        self.runner.run(["apt-get", "update", "-qq"])

    def package_spec(self, package: ResolvedPackage) -> str:
        if package.version is None:
            return package.name
        return f"{package.name}={package.version}"

    def install(self, plan: InstallPlan) -> None:
        args = ["apt-get", "install", "-y"]
        if plan.main.is_pinned and self.target.dist_version not in _NO_ALLOW_DOWNGRADES:
            args.append("--allow-downgrades")
        args.append("-qq")
        args.extend(self.package_spec(pkg) for pkg in plan.packages)
        args.append(self.containerd_package)

        self.runner.run(args)
