"""Install/upgrade/downgrade planning for YUM.

``yum install`` refuses to move an installed package to another version,
so the verb has to be picked up front. APT and zypper accept a pinned
version with their install verb and need no planning.
"""

import logging

from eeinstall.models.package import Operation
from eeinstall.queries.yum import YumQuery
from eeinstall.utils.formatting import print_info

logger = logging.getLogger(__name__)


def plan_operation(query: YumQuery, package: str, spec: str) -> Operation:
    """Choose the yum verb that moves ``package`` to ``spec``.

    Args:
        query: YUM query used for the installed-state and dry-run probes.
        package: Package name (e.g., 'docker-ee').
        spec: Pinned ``name-version`` argument.

    Returns:
        INSTALL when the package is absent, UPGRADE or DOWNGRADE when the
        matching dry run has a transaction, INSTALL otherwise.
    """
    print_info("Checking to determine whether this should be an upgrade or downgrade")

    operation = Operation.INSTALL
    if not query.is_installed(package):
        logger.debug("%s is not installed", package)
    elif query.would_upgrade(spec):
        operation = Operation.UPGRADE
    elif query.would_downgrade(spec):
        operation = Operation.DOWNGRADE
    else:
        # Already at the requested version; install is a no-op re-run
        logger.debug("%s already at requested version", package)

    print_info(f"will use install command {operation.value}")
    return operation
