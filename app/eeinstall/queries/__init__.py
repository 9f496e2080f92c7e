"""Package version queries for the supported package managers.

This module exports the query classes used to list available versions.
"""

from eeinstall.queries.apt import AptQuery
from eeinstall.queries.base import PackageQuery, PackageRow
from eeinstall.queries.yum import YumQuery
from eeinstall.queries.zypper import ZypperQuery

__all__ = ["AptQuery", "PackageQuery", "PackageRow", "YumQuery", "ZypperQuery"]
