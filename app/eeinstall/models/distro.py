"""Distribution models.

Describes the outcome of matching the host's os-release identity against
the supported distribution table.
"""

from dataclasses import dataclass

from eeinstall.models.package import Backend


@dataclass(frozen=True, slots=True)
class DistroTarget:
    """A supported distribution, normalized for repository lookup.

    Attributes:
        backend: Package manager family to drive.
        dist_id: Repository distribution name (e.g., 'ubuntu', 'oraclelinux').
        dist_version: Version string used for repository paths (e.g., '20.04', '7').
    """

    backend: Backend
    dist_id: str
    dist_version: str

    @property
    def key(self) -> str:
        """Return the ``id:version`` form used in messages."""
        return f"{self.dist_id}:{self.dist_version}"
