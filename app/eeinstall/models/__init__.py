"""Data models for eeinstall.

This module exports the core data structures used throughout the installer.
"""

from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import (
    CLI_PACKAGE,
    CONTAINERD_PACKAGE,
    MAIN_PACKAGE,
    ROOTLESS_PACKAGE,
    Backend,
    InstallPlan,
    Operation,
    ResolvedPackage,
    ResolvedPackages,
)
from eeinstall.models.version import MIN_ROOTLESS_VER, CalendarVersion, is_at_least

__all__ = [
    "CLI_PACKAGE",
    "CONTAINERD_PACKAGE",
    "MAIN_PACKAGE",
    "MIN_ROOTLESS_VER",
    "ROOTLESS_PACKAGE",
    "Backend",
    "CalendarVersion",
    "DistroTarget",
    "InstallPlan",
    "Operation",
    "ResolvedPackage",
    "ResolvedPackages",
    "is_at_least",
]
