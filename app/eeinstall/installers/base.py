"""Abstract base class for backend installers.

This module defines the Installer interface that every package manager
backend implements, and the common install sequence they all follow.
"""

import logging
import shlex
from abc import ABC, abstractmethod

from eeinstall.core.config import InstallerConfig
from eeinstall.core.errors import CommandFailedError
from eeinstall.core.patterns import compile_pattern
from eeinstall.core.privilege import CommandRunner
from eeinstall.core.resolver import PackageResolver
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import (
    Backend,
    InstallPlan,
    Operation,
    ResolvedPackage,
    ResolvedPackages,
)
from eeinstall.models.version import MIN_ROOTLESS_VER, is_at_least
from eeinstall.queries.base import PackageQuery
from eeinstall.utils.formatting import console, create_plan_table

logger = logging.getLogger(__name__)


class Installer(ABC):
    """Abstract base class for all backend installers.

    An installer registers the Docker EE repository for one package
    manager family, resolves the requested version and runs the final
    install transaction.

    Attributes:
        config: Installer configuration.
        target: The matched distribution.
        runner: Runner for privileged commands.
        query: Version listing for this backend.
        repo_url: Repository URL, set by register_repository().

    Example:
        >>> installer = AptInstaller(config, target, runner)
        >>> plan = installer.run()
    """

    def __init__(
        self,
        config: InstallerConfig,
        target: DistroTarget,
        runner: CommandRunner,
    ) -> None:
        """Initialize the installer.

        Args:
            config: Installer configuration.
            target: The matched distribution.
            runner: Runner for privileged commands.
        """
        self.config = config
        self.target = target
        self.runner = runner
        self.query = self._create_query()
        self.resolver = PackageResolver(self.query)
        self.repo_url = config.docker_url
        self._pattern: str | None = None

    @property
    @abstractmethod
    def backend(self) -> Backend:
        """Return the backend this installer drives."""

    @abstractmethod
    def _create_query(self) -> PackageQuery:
        """Create the version listing for this backend."""

    @abstractmethod
    def install_prerequisites(self) -> None:
        """Install the tools needed to register the repository.

        Raises:
            CommandFailedError: If the package manager fails.
        """

    @abstractmethod
    def register_repository(self) -> None:
        """Register the Docker EE repository and its signing key.

        Raises:
            CommandFailedError: If any registration step fails.
        """

    @abstractmethod
    def package_spec(self, package: ResolvedPackage) -> str:
        """Format a package as an install argument in the backend's syntax."""

    @abstractmethod
    def install(self, plan: InstallPlan) -> None:
        """Run the install transaction.

        Raises:
            CommandFailedError: If the package manager fails.
        """

    @property
    def supports_rootless(self) -> bool:
        """Check if the repository for this distribution ships rootless-extras."""
        return True

    @property
    def containerd_package(self) -> str:
        """Return the containerd.io install argument."""
        return self.config.containerd_package(self.backend)

    def compile_pattern(self, version: str) -> str:
        """Compile the requested version into this backend's search pattern."""
        return compile_pattern(version, self.backend)

    def resolve(self) -> ResolvedPackages:
        """Resolve package versions for the configured version.

        Returns:
            ResolvedPackages (unpinned when no version was requested).

        Raises:
            VersionNotFoundError: If the requested version has no main package.
        """
        include_rootless = self.supports_rootless and is_at_least(
            self.config.version, MIN_ROOTLESS_VER
        )
        if not self.config.version:
            return self.resolver.resolve_latest(include_rootless=include_rootless)

        self._pattern = self.compile_pattern(self.config.version)
        return self.resolver.resolve(
            self.config.version,
            self._pattern,
            include_rootless=include_rootless,
        )

    def plan(self, resolved: ResolvedPackages) -> InstallPlan:
        """Build the install plan. The package manager decides the direction."""
        return InstallPlan(operation=Operation.INSTALL, packages=tuple(resolved.as_list()))

    def after_install(self, plan: InstallPlan) -> None:  # noqa: B027
        """Hook run after a successful install transaction."""

    def run(self) -> InstallPlan:
        """Run the full install sequence.

        Prerequisites, repository registration, resolution, planning,
        then the install transaction.

        Returns:
            The plan that was installed.
        """
        logger.info("Installing via %s for %s", self.backend.value, self.target.key)
        self.install_prerequisites()
        self.register_repository()
        logger.info("Using repository %s", self.repo_url)

        resolved = self.resolve()
        plan = self.plan(resolved)
        console.print(create_plan_table(plan, [self.containerd_package]))

        self.install(plan)
        self.after_install(plan)
        return plan

    def _capture(self, args: list[str]) -> str:
        """Run a read-only helper command and return its stripped output.

        Raises:
            CommandFailedError: If the command fails.
        """
        result = self.runner.query(args)
        if not result.success:
            raise CommandFailedError(shlex.join(args), result.returncode)
        return result.stdout.strip()
