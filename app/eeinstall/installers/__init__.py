"""Backend installers for the supported package managers.

This module provides the abstract Installer and its APT, YUM and zypper
implementations.
"""

from eeinstall.installers.apt import AptInstaller
from eeinstall.installers.base import Installer
from eeinstall.installers.yum import YumInstaller
from eeinstall.installers.zypper import ZypperInstaller

__all__ = ["AptInstaller", "Installer", "YumInstaller", "ZypperInstaller"]
