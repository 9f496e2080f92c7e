"""Version search patterns.

Each package manager prints versions in its own shape, so a requested
version is turned into a per-backend regular expression that is matched
against the package manager's listing lines:

- APT (``apt-cache madison``): ``5:20.10.12~3-0~ubuntu-focal``
- YUM (``yum list --showduplicates``): ``3:20.10.12-3.el8``
- ZYPPER (``zypper search -s``): ``20.10.12-3`` in a ``|``-separated table

In every flavor a ``-`` in the requested version is a segment delimiter
and becomes ``.*``, except the ``-ee-`` edition marker which is mapped to
the backend's literal spelling.
"""

from eeinstall.models.package import Backend

EDITION_MARKER = "-ee-"

_EDITION_REPLACEMENTS: dict[Backend, str] = {
    Backend.APT: "~ee~",
    Backend.YUM: r"\.ee\.",
    Backend.ZYPPER: r"\.ee\.",
}

# Distro/release tail expected after the version in each listing
_SUFFIXES: dict[Backend, str] = {
    Backend.APT: ".*-0~ubuntu",
    Backend.YUM: ".*el",
    # Closing column separator of the zypper table
    Backend.ZYPPER: r".*\|",
}


def compile_pattern(version: str, backend: Backend) -> str:
    """Compile a requested version into a backend search pattern.

    Args:
        version: Requested version (e.g., '20.10.12', '19.03.14-ee-1').
        backend: Package manager family.

    Returns:
        Regular expression for ``re.search`` against listing lines.

    Examples:
        >>> compile_pattern("20.10.12-ee-1", Backend.APT)
        '20.10.12~ee~1.*-0~ubuntu'
        >>> compile_pattern("20.10.12-rc1", Backend.YUM)
        '20.10.12.*rc1.*el'
    """
    edition = _EDITION_REPLACEMENTS[backend]
    segments = [part.replace("-", ".*") for part in version.split(EDITION_MARKER)]
    return edition.join(segments) + _SUFFIXES[backend]
