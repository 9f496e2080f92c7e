"""Package version resolution.

Turns a compiled search pattern into concrete versions of the main,
cli and rootless-extras packages, using a PackageQuery listing.
"""

import logging
import re
import shlex

from eeinstall.core.errors import VersionNotFoundError
from eeinstall.models.package import (
    CLI_PACKAGE,
    MAIN_PACKAGE,
    ROOTLESS_PACKAGE,
    ResolvedPackage,
    ResolvedPackages,
)
from eeinstall.queries.base import PackageQuery, PackageRow
from eeinstall.utils.formatting import print_info

logger = logging.getLogger(__name__)


class PackageResolver:
    """Resolves Docker EE package versions against a repository listing.

    Attributes:
        query: Version listing of the active backend.
    """

    def __init__(self, query: PackageQuery) -> None:
        self.query = query

    def describe_search(self, package: str, pattern: str | None = None) -> str:
        """Return the search invocation for operator diagnostics."""
        command = shlex.join(self.query.search_args(package))
        if pattern is None:
            return command
        return f"{command} | grep {shlex.quote(pattern)}"

    def select(self, package: str, pattern: str) -> ResolvedPackage | None:
        """Select the newest listed version of a package matching a pattern.

        APT lists newest-first so the first match wins; YUM and zypper list
        oldest-first so the last match wins.

        Args:
            package: Package name to search.
            pattern: Compiled search pattern.

        Returns:
            ResolvedPackage with the selected version, or None if nothing matches.
        """
        regex = re.compile(pattern)
        matches: list[PackageRow] = [
            row for row in self.query.list_versions(package) if regex.search(row.line)
        ]
        logger.debug("%d %s row(s) match %r", len(matches), package, pattern)
        if not matches:
            return None

        row = matches[0] if self.query.backend.lists_newest_first else matches[-1]
        return ResolvedPackage(name=package, version=row.version)

    def resolve(
        self,
        version: str,
        pattern: str,
        *,
        include_rootless: bool = True,
    ) -> ResolvedPackages:
        """Resolve all packages for a requested version.

        Args:
            version: Requested version, used in messages.
            pattern: Pattern compiled from ``version`` for this backend.
            include_rootless: If False, the rootless-extras package is not searched.

        Returns:
            ResolvedPackages; cli and rootless are None when not found.

        Raises:
            VersionNotFoundError: If the main package has no matching version.
        """
        main = self.select(MAIN_PACKAGE, pattern)
        cli = self.select(CLI_PACKAGE, pattern)
        rootless = self.select(ROOTLESS_PACKAGE, pattern) if include_rootless else None

        search = self.describe_search(MAIN_PACKAGE, pattern)
        print_info(f"Searching repository for VERSION '{version}'")
        print_info(search)

        if main is None:
            raise VersionNotFoundError(version, search, self.query.listing_name)

        if cli is None:
            logger.info("No %s version matches %r, leaving it out", CLI_PACKAGE, version)
        if include_rootless and rootless is None:
            logger.info("No %s version matches %r, leaving it out", ROOTLESS_PACKAGE, version)

        return ResolvedPackages(main=main, cli=cli, rootless=rootless)

    def resolve_latest(self, *, include_rootless: bool = True) -> ResolvedPackages:
        """Resolve packages when no version was requested.

        The main package is left unpinned. The cli and rootless-extras
        packages are added unpinned when the repository lists them at all.

        Args:
            include_rootless: If False, the rootless-extras package is not searched.

        Returns:
            ResolvedPackages with no pinned versions.
        """
        print_info("No VERSION set, installing the latest available release")

        cli = ResolvedPackage(name=CLI_PACKAGE) if self._is_listed(CLI_PACKAGE) else None
        rootless = None
        if include_rootless and self._is_listed(ROOTLESS_PACKAGE):
            rootless = ResolvedPackage(name=ROOTLESS_PACKAGE)

        return ResolvedPackages(main=ResolvedPackage(name=MAIN_PACKAGE), cli=cli, rootless=rootless)

    def _is_listed(self, package: str) -> bool:
        return bool(self.query.list_versions(package))
