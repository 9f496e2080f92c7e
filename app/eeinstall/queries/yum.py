"""YUM version query implementation.

Lists available versions using ``yum list --showduplicates``::

    Available Packages
    docker-ee.x86_64        3:20.10.12-3.el8        docker-ee-test

Also exposes the installed-state and ``--assumeno`` probes used to
decide between install, upgrade and downgrade.
"""

import logging

from eeinstall.models.package import Backend
from eeinstall.queries.base import PackageQuery, PackageRow

logger = logging.getLogger(__name__)


def strip_epoch(version: str) -> str:
    """Cut an RPM epoch: '3:20.10.12-3.el8' -> '20.10.12-3.el8'."""
    return version.rpartition(":")[2]


class YumQuery(PackageQuery):
    """Query for YUM/DNF repositories. Lists oldest version first."""

    @property
    def backend(self) -> Backend:
        """Return YUM as the backend."""
        return Backend.YUM

    @property
    def listing_name(self) -> str:
        return "yum list"

    def search_args(self, package: str) -> list[str]:
        return ["yum", "list", "--showduplicates", package]

    def parse_line(self, line: str) -> PackageRow | None:
        parts = line.split()
        if len(parts) < 3:
            return None

        name, _, _arch = parts[0].rpartition(".")
        if not name:
            return None
        return PackageRow(name=name, version=parts[1], line=line)

    def is_installed(self, package: str) -> bool:
        """Check whether a package is currently installed."""
        return self._runner.query(["yum", "list", "installed", package]).success

    def would_upgrade(self, spec: str) -> bool:
        """Check whether ``yum upgrade`` has a transaction for ``spec``.

        ``--assumeno`` declines the transaction, which makes yum exit
        non-zero exactly when there was something to do.
        """
        return not self._runner.query(["yum", "upgrade", "--assumeno", spec]).success

    def would_downgrade(self, spec: str) -> bool:
        """Check whether ``yum downgrade`` has a transaction for ``spec``."""
        return not self._runner.query(["yum", "downgrade", "--assumeno", spec]).success
