"""APT version query implementation.

Lists available versions using ``apt-cache madison``, whose output looks like::

     docker-ee | 5:20.10.12~3-0~ubuntu-focal | https://repo/ubuntu focal/test amd64 Packages
"""

import logging

from eeinstall.models.package import Backend
from eeinstall.queries.base import PackageQuery, PackageRow

logger = logging.getLogger(__name__)


class AptQuery(PackageQuery):
    """Query for APT repositories. Lists newest version first."""

    @property
    def backend(self) -> Backend:
        """Return APT as the backend."""
        return Backend.APT

    @property
    def listing_name(self) -> str:
        return "apt-cache madison"

    def search_args(self, package: str) -> list[str]:
        return ["apt-cache", "madison", package]

    def parse_line(self, line: str) -> PackageRow | None:
        parts = [part.strip() for part in line.split("|")]
        if len(parts) < 3 or not parts[0] or not parts[1]:
            logger.debug("Skipping malformed madison line: %r", line[:100])
            return None
        return PackageRow(name=parts[0], version=parts[1], line=line)
