"""Zypper version query implementation.

Lists available versions using ``zypper search -s``, which prints a table::

    S | Name      | Type    | Version    | Arch   | Repository
    --+-----------+---------+------------+--------+----------------
      | docker-ee | package | 20.10.12-3 | x86_64 | docker-ee-test
"""

import logging

from eeinstall.models.package import Backend
from eeinstall.queries.base import PackageQuery, PackageRow

logger = logging.getLogger(__name__)

# Column positions in the ``zypper search -s`` table
_NAME_COLUMN = 1
_VERSION_COLUMN = 3


class ZypperQuery(PackageQuery):
    """Query for zypper repositories. Lists oldest version first."""

    @property
    def backend(self) -> Backend:
        """Return ZYPPER as the backend."""
        return Backend.ZYPPER

    @property
    def listing_name(self) -> str:
        return "zypper search"

    def search_args(self, package: str) -> list[str]:
        return ["zypper", "search", "-s", package]

    def parse_line(self, line: str) -> PackageRow | None:
        columns = [column.strip() for column in line.split("|")]
        if len(columns) <= _VERSION_COLUMN:
            return None

        name = columns[_NAME_COLUMN]
        version = columns[_VERSION_COLUMN]
        if not name or not version or name == "Name":
            return None
        return PackageRow(name=name, version=version, line=line)

    def is_installed(self, package: str) -> bool:
        """Check the RPM database for an installed package."""
        return self._runner.query(["rpm", "-q", package]).success
