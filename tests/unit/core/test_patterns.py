"""Unit tests for version search pattern compilation."""

import re

import pytest
from eeinstall.core.patterns import compile_pattern
from eeinstall.models.package import Backend


class TestCompilePattern:
    """Tests for compile_pattern."""

    def test_apt_plain_version(self) -> None:
        """APT appends the Ubuntu revision suffix."""
        assert compile_pattern("20.10.12", Backend.APT) == "20.10.12.*-0~ubuntu"

    def test_apt_edition_marker(self) -> None:
        """APT spells the edition marker ~ee~ and wildcards other dashes."""
        assert compile_pattern("20.10.12-ee-1", Backend.APT) == "20.10.12~ee~1.*-0~ubuntu"

    def test_yum_edition_marker(self) -> None:
        """YUM spells the edition marker as an escaped .ee."""
        assert compile_pattern("17.06.2-ee-8", Backend.YUM) == r"17.06.2\.ee\.8.*el"

    def test_yum_prerelease(self) -> None:
        """Pre-release dashes become wildcards."""
        assert compile_pattern("20.10.12-rc1", Backend.YUM) == "20.10.12.*rc1.*el"

    def test_zypper_suffix(self) -> None:
        """ZYPPER ends at the next table column separator."""
        assert compile_pattern("20.10.12", Backend.ZYPPER) == r"20.10.12.*\|"

    def test_deterministic(self) -> None:
        """Same input always gives the same pattern."""
        for backend in Backend:
            assert compile_pattern("20.10.12-rc1", backend) == compile_pattern(
                "20.10.12-rc1", backend
            )

    @pytest.mark.parametrize("backend", list(Backend))
    def test_dash_wildcard_shared(self, backend: Backend) -> None:
        """All backends turn a plain dash into '.*'."""
        assert compile_pattern("20.10.12-rc1", backend).startswith("20.10.12.*rc1")

    @pytest.mark.parametrize(
        ("backend", "line"),
        [
            (Backend.APT, " docker-ee | 5:20.10.12~3-0~ubuntu-focal | https://r focal/test"),
            (Backend.YUM, "docker-ee.x86_64   3:20.10.12-3.el8   docker-ee-test"),
            (Backend.ZYPPER, "  | docker-ee | package | 20.10.12-3 | x86_64 | docker-ee-test"),
        ],
    )
    def test_matches_listing_line(self, backend: Backend, line: str) -> None:
        """Compiled patterns match the backend's listing lines."""
        assert re.search(compile_pattern("20.10.12", backend), line)

    def test_does_not_match_other_patch(self) -> None:
        """A different patch release does not match."""
        line = " docker-ee | 5:20.10.13~1-0~ubuntu-focal | https://r focal/test"
        assert re.search(compile_pattern("20.10.12", Backend.APT), line) is None
