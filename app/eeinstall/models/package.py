"""Package models for version resolution and install planning.

This module defines the backend enumeration and the data structures that
flow from resolution into the final install transaction.
"""

from dataclasses import dataclass
from enum import Enum

# Logical package names in the Docker EE repositories
MAIN_PACKAGE = "docker-ee"
CLI_PACKAGE = f"{MAIN_PACKAGE}-cli"
ROOTLESS_PACKAGE = f"{MAIN_PACKAGE}-rootless-extras"
CONTAINERD_PACKAGE = "containerd.io"


class Backend(Enum):
    """Supported native package manager families."""

    APT = "apt"
    YUM = "yum"
    ZYPPER = "zypper"

    @property
    def lists_newest_first(self) -> bool:
        """Whether the backend's version listing puts the newest entry first.

        ``apt-cache madison`` lists newest-first; ``yum list --showduplicates``
        and ``zypper search -s`` list oldest-first.
        """
        return self is Backend.APT


class Operation(Enum):
    """Package manager verb used for the install transaction."""

    INSTALL = "install"
    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"


@dataclass(frozen=True, slots=True)
class ResolvedPackage:
    """A package selected for installation.

    Attributes:
        name: Package name (e.g., 'docker-ee-cli').
        version: Version string as listed by the package manager, or None
            to let the package manager pick the newest available.
    """

    name: str
    version: str | None = None

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_pinned(self) -> bool:
        """Check if a concrete version was selected."""
        return self.version is not None


@dataclass(frozen=True, slots=True)
class ResolvedPackages:
    """Resolution result for the three logical packages.

    ``cli`` and ``rootless`` are None when the repository has no matching
    candidate; they are then left out of the install.
    """

    main: ResolvedPackage
    cli: ResolvedPackage | None = None
    rootless: ResolvedPackage | None = None

    def as_list(self) -> list[ResolvedPackage]:
        """Return the resolved packages in install order, skipping missing ones."""
        return [pkg for pkg in (self.main, self.cli, self.rootless) if pkg is not None]


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """The install transaction to run.

    Attributes:
        operation: Package manager verb (install, upgrade or downgrade).
        packages: Resolved packages, main package first.
    """

    operation: Operation
    packages: tuple[ResolvedPackage, ...]

    def __post_init__(self) -> None:
        """Validate plan data after initialization."""
        if not self.packages:
            msg = "Install plan needs at least one package"
            raise ValueError(msg)

    @property
    def main(self) -> ResolvedPackage:
        """Return the main package of the plan."""
        return self.packages[0]
