"""Calendar version models.

Docker EE releases use calendar versioning (``YY.MM[.PATCH]``), optionally
followed by a pre-release or build suffix (``20.10.12-rc1``,
``19.03.14-ee-1``). This module parses those strings and answers the one
ordering question the installer needs: is a requested release at least a
given minimum.
"""

import re
from dataclasses import dataclass

# First release that ships the docker-ee-rootless-extras package
MIN_ROOTLESS_VER = "20.10.12"

_LEADING_DIGITS = re.compile(r"^\d+")


@dataclass(frozen=True, slots=True)
class CalendarVersion:
    """A parsed ``YY.MM[.PATCH]`` version.

    Attributes:
        year: Two-digit release year.
        month: Release month (leading zeros removed).
        patch: Patch number, or None when the string carries no patch field.
    """

    year: int
    month: int
    patch: int | None = None

    @classmethod
    def parse(cls, value: str) -> "CalendarVersion":
        """Parse a version string, ignoring any ``-suffix``.

        Year and month must be integers. The patch field is parsed on a
        best-effort basis: its leading digits are used, and it is treated
        as absent when it has none.

        Args:
            value: Version string such as ``20.10.12`` or ``19.03.5-rc2``.

        Returns:
            Parsed CalendarVersion.

        Raises:
            ValueError: If the year or month component is not numeric.
        """
        clean = value.strip().split("-", 1)[0]
        parts = clean.split(".")
        if len(parts) < 2:
            msg = f"Invalid calendar version '{value}': expected YY.MM[.PATCH]"
            raise ValueError(msg)

        try:
            year = int(parts[0])
            month = int(parts[1])
        except ValueError:
            msg = f"Invalid calendar version '{value}': year and month must be numeric"
            raise ValueError(msg) from None

        patch: int | None = None
        if len(parts) >= 3:
            match = _LEADING_DIGITS.match(parts[2])
            if match:
                patch = int(match.group())

        return cls(year=year, month=month, patch=patch)

    def __str__(self) -> str:
        base = f"{self.year:02d}.{self.month:02d}"
        if self.patch is None:
            return base
        return f"{base}.{self.patch}"


def calver_at_least(version: CalendarVersion, threshold: CalendarVersion) -> bool:
    """Check whether ``version`` is newer than or equal to ``threshold``.

    Year decides first, then month. Patch numbers are only compared when
    year and month are equal and both versions carry one.

    Examples:
        >>> calver_at_least(CalendarVersion.parse("20.10.12"), CalendarVersion.parse("19.03"))
        True
        >>> calver_at_least(CalendarVersion.parse("19.03.02"), CalendarVersion.parse("20.10.12"))
        False
    """
    if version.year != threshold.year:
        return version.year > threshold.year
    if version.month != threshold.month:
        return version.month > threshold.month
    if version.patch is None or threshold.patch is None:
        return True
    return version.patch >= threshold.patch


def is_at_least(target: str | None, threshold: str | CalendarVersion) -> bool:
    """Check whether the requested release satisfies a minimum version.

    An unset target means "latest" and satisfies any minimum.

    Args:
        target: Requested version string, or None for latest.
        threshold: Minimum version, as a string or CalendarVersion.

    Returns:
        True if the target is unset or at least the threshold.

    Raises:
        ValueError: If the target's year or month is not numeric.
    """
    if not target:
        return True
    if isinstance(threshold, str):
        threshold = CalendarVersion.parse(threshold)
    return calver_at_least(CalendarVersion.parse(target), threshold)
