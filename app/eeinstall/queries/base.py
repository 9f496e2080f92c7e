"""Abstract base class for package version queries.

This module defines the PackageQuery interface that wraps a package
manager's "list every available version" command and returns
structured rows, so resolution logic never parses command output itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from eeinstall.core.privilege import CommandRunner
from eeinstall.models.package import Backend


@dataclass(frozen=True, slots=True)
class PackageRow:
    """One available version of a package.

    Attributes:
        name: Package name as listed (architecture suffix removed).
        version: Version string as listed.
        line: The raw listing line, used for pattern matching.
    """

    name: str
    version: str
    line: str


class PackageQuery(ABC):
    """Abstract base class for backend version listings.

    Rows are returned in the package manager's natural order; see
    Backend.lists_newest_first.

    Example:
        >>> query = AptQuery(runner)
        >>> for row in query.list_versions("docker-ee"):
        ...     print(row.version)
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize the query.

        Args:
            runner: Runner used to execute package manager commands.
        """
        self._runner = runner

    @property
    @abstractmethod
    def backend(self) -> Backend:
        """Return the backend this query handles."""

    @property
    @abstractmethod
    def listing_name(self) -> str:
        """Return a short name of the listing for messages (e.g., 'yum list')."""

    @abstractmethod
    def search_args(self, package: str) -> list[str]:
        """Return the command that lists all versions of ``package``."""

    @abstractmethod
    def parse_line(self, line: str) -> PackageRow | None:
        """Parse one listing line.

        Returns:
            PackageRow, or None for headers and malformed lines.
        """

    def list_versions(self, package: str) -> list[PackageRow]:
        """List every available version of a package.

        Args:
            package: Package name to search for.

        Returns:
            Rows whose name is exactly ``package``, in listing order.
            Empty if the package manager reports nothing.
        """
        result = self._runner.query(self.search_args(package))
        rows: list[PackageRow] = []
        for line in result.stdout.splitlines():
            if not line.strip():
                continue
            row = self.parse_line(line)
            if row is not None and row.name == package:
                rows.append(row)
        return rows
