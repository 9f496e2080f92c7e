"""YUM installer implementation.

Registers the Docker EE yum repository on RHEL-family distributions and
installs with yum, choosing install/upgrade/downgrade explicitly.
"""

import logging
import re
import shlex
from pathlib import Path
from typing import cast

from eeinstall.core.config import InstallerConfig
from eeinstall.core.planner import plan_operation
from eeinstall.core.privilege import CommandRunner
from eeinstall.installers.base import Installer
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import (
    MAIN_PACKAGE,
    Backend,
    InstallPlan,
    Operation,
    ResolvedPackage,
    ResolvedPackages,
)
from eeinstall.queries.base import PackageQuery
from eeinstall.queries.yum import YumQuery, strip_epoch
from eeinstall.utils.shell import probe_url

logger = logging.getLogger(__name__)

HYPERVISOR_UUID_PATH = Path("/sys/hypervisor/uuid")
YUM_VARS_DIR = "/etc/yum/vars"

# Repository URLs already ending in a distribution directory
_DIST_SUFFIX = re.compile(r"/centos$|/rhel$|rocky$")

# Distributions published under another repository directory
_DIST_ALIASES = {"almalinux": "rhel"}


def on_ec2(path: Path = HYPERVISOR_UUID_PATH) -> bool:
    """Check whether the host is an EC2 instance."""
    try:
        with open(path, encoding="ascii", errors="replace") as f:
            return f.read(3) == "ec2"
    except OSError:
        return False


class YumInstaller(Installer):
    """Installer for CentOS, RHEL, Rocky, AlmaLinux, Amazon Linux and Oracle Linux."""

    def __init__(
        self,
        config: InstallerConfig,
        target: DistroTarget,
        runner: CommandRunner,
    ) -> None:
        super().__init__(config, target, runner)
        self.dist_id = _DIST_ALIASES.get(target.dist_id, target.dist_id)
        self.dist_version = target.dist_version

    @property
    def backend(self) -> Backend:
        """Return YUM as the backend."""
        return Backend.YUM

    @property
    def supports_rootless(self) -> bool:
        return f"{self.dist_id}:{self.dist_version}" != "oraclelinux:7"

    def _create_query(self) -> PackageQuery:
        return YumQuery(self.runner)

    def install_prerequisites(self) -> None:
        self.runner.shell("rpm -q curl || yum install -q -y curl")

    def register_repository(self) -> None:
        url = self.config.docker_url
        if not probe_url(f"{url}/docker-ee.repo") and not _DIST_SUFFIX.search(url):
            url = f"{url}/{self.dist_id}"
        self.repo_url = url

        if self.dist_id == "oraclelinux" and self.dist_version.startswith("7"):
            # "Oracle Linux 7 Server Add ons" carries container-selinux
            self.runner.run(["yum-config-manager", "--enable", "ol7_addons"])
        elif self.dist_id == "rhel" and self.dist_version.startswith("7"):
            self._enable_rhel7_extras()

        self.runner.shell(f"echo {shlex.quote(url)} > {YUM_VARS_DIR}/dockerurl")
        self.runner.shell(f"echo {shlex.quote(self.dist_version)} > {YUM_VARS_DIR}/dockerosversion")
        self.runner.run(
            ["yum", "install", "-q", "-y", "yum-utils", "device-mapper-persistent-data", "lvm2"]
        )
        self.runner.run(["yum-config-manager", "--add-repo", f"{url}/docker-ee.repo"])
        self.runner.run(["yum-config-manager", "--disable", "docker-ee-*"])
        self.runner.run(["yum-config-manager", "--enable", f"docker-ee-{self.config.channel}"])

    def _enable_rhel7_extras(self) -> None:
        extras_repo = "rhel-7-server-extras-rpms"
        if on_ec2():
            self.runner.run(["yum", "install", "-y", "rh-amazon-rhui-client"])
            extras_repo = "rhel-7-server-rhui-extras-rpms"
        self.runner.run(["yum-config-manager", "--enable", extras_repo])

    def package_spec(self, package: ResolvedPackage) -> str:
        if package.version is None:
            return package.name
        return f"{package.name}-{strip_epoch(package.version)}"

    def plan(self, resolved: ResolvedPackages) -> InstallPlan:
        operation = Operation.INSTALL
        if resolved.main.is_pinned:
            query = cast(YumQuery, self.query)
            operation = plan_operation(query, MAIN_PACKAGE, self.package_spec(resolved.main))
        return InstallPlan(operation=operation, packages=tuple(resolved.as_list()))

    def install(self, plan: InstallPlan) -> None:
        args = ["yum", plan.operation.value, "-q", "-y"]
        args.extend(self.package_spec(pkg) for pkg in plan.packages)
        args.append(self.containerd_package)

        self.runner.run(args)
