"""Host distribution detection and the supported distribution table.

Reads ``/etc/os-release`` and maps its ``ID:VERSION_ID`` pair onto a
package manager backend and the repository naming that backend expects.
"""

import fnmatch
import logging
import shlex
from collections.abc import Callable
from pathlib import Path

from eeinstall.core.errors import ConfigurationError, UnsupportedDistributionError
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import Backend

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")


def _major(version: str) -> str:
    """Strip point releases: '8.6' -> '8'."""
    return version.split(".", 1)[0]


def _keep(version: str) -> str:
    return version


# (glob on "id:version", backend, repository dist id or None to keep it, version transform)
SUPPORTED_DISTRIBUTIONS: list[tuple[tuple[str, ...], Backend, str | None, Callable[[str], str]]] = [
    (
        ("ubuntu:14.04", "ubuntu:16.04", "ubuntu:18.04", "ubuntu:20.04", "ubuntu:22.04"),
        Backend.APT,
        None,
        _keep,
    ),
    (("centos:*", "rhel:*", "rocky:*", "almalinux:*"), Backend.YUM, None, _major),
    (("amzn:2",), Backend.YUM, "amazonlinux", _keep),
    (("ol:*",), Backend.YUM, "oraclelinux", _major),
    (("sles:12*", "sles:15*", "opensuse-leap:15*"), Backend.ZYPPER, None, _keep),
]


def parse_os_release(content: str) -> dict[str, str]:
    """Parse os-release content into a dictionary.

    Values may be shell-quoted; comments and blank lines are skipped.

    Args:
        content: Text of an os-release file.

    Returns:
        Mapping of keys (e.g., 'ID', 'VERSION_ID') to unquoted values.
    """
    fields: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            logger.debug("Skipping malformed os-release line: %r", line[:100])
            continue
        fields[key.strip()] = parts[0] if parts else ""
    return fields


def read_os_release(path: Path | None = None) -> dict[str, str]:
    """Read and parse an os-release file.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    release_path = path or OS_RELEASE_PATH
    try:
        content = release_path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read {release_path}: {e}"
        raise ConfigurationError(msg) from e
    return parse_os_release(content)


def detect_distribution(path: Path | None = None) -> tuple[str, str]:
    """Read the distribution identity of the host.

    Args:
        path: os-release file to read. If None, uses /etc/os-release.

    Returns:
        Tuple of (ID, VERSION_ID); either may be empty if not present.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    fields = read_os_release(path)
    dist_id = fields.get("ID", "").lower()
    dist_version = fields.get("VERSION_ID", "")
    logger.debug("Detected distribution %s:%s", dist_id, dist_version)
    return dist_id, dist_version


def match_distribution(dist_id: str, dist_version: str) -> DistroTarget:
    """Map a distribution identity onto a supported backend.

    Args:
        dist_id: os-release ID (e.g., 'ubuntu', 'ol').
        dist_version: os-release VERSION_ID (e.g., '20.04', '8.6').

    Returns:
        DistroTarget with the repository's naming for id and version.

    Raises:
        UnsupportedDistributionError: If no table entry matches.
    """
    key = f"{dist_id}:{dist_version}"
    for patterns, backend, alias, transform in SUPPORTED_DISTRIBUTIONS:
        if any(fnmatch.fnmatchcase(key, pattern) for pattern in patterns):
            return DistroTarget(
                backend=backend,
                dist_id=alias or dist_id,
                dist_version=transform(dist_version),
            )
    raise UnsupportedDistributionError(dist_id, dist_version)
