"""Unit tests for ZypperInstaller."""

from unittest.mock import patch

import pytest
from eeinstall.installers.zypper import CONFLICTING_PACKAGES, ZypperInstaller
from eeinstall.models.distro import DistroTarget
from eeinstall.models.package import CLI_PACKAGE, MAIN_PACKAGE, ROOTLESS_PACKAGE, Backend

SLES15 = DistroTarget(backend=Backend.ZYPPER, dist_id="sles", dist_version="15.4")
SLES12 = DistroTarget(backend=Backend.ZYPPER, dist_id="sles", dist_version="12.5")


@pytest.fixture
def zypper_runner(make_runner, result_ok, mock_zypper_output, mock_zypper_cli_output):
    """Runner answering the queries of a pinned SLES install."""
    return make_runner(
        {
            ("zypper", "search", "-s", MAIN_PACKAGE): result_ok(mock_zypper_output),
            ("zypper", "search", "-s", CLI_PACKAGE): result_ok(mock_zypper_cli_output),
            ("rpm", "-q"): result_ok(),
        }
    )


class TestZypperInstaller:
    """Tests for ZypperInstaller class."""

    def test_sles15_settings(self, config, make_runner) -> None:
        """SLES 15 uses repo version 15 and allows vendor change."""
        installer = ZypperInstaller(config, SLES15, make_runner())
        assert installer.repo_version == "15"
        assert installer.install_flags == ["--allow-vendor-change"]
        assert installer.supports_rootless is True

    def test_sles12_settings(self, config, make_runner) -> None:
        """SLES 12 uses repo version 12.3 and has no rootless-extras."""
        installer = ZypperInstaller(config, SLES12, make_runner())
        assert installer.repo_version == "12.3"
        assert installer.install_flags == []
        assert installer.supports_rootless is False

    def test_register_repository(self, config, make_runner) -> None:
        """The channel repository is re-added under a fixed alias."""
        runner = make_runner()
        installer = ZypperInstaller(config, SLES15, runner)
        with (
            patch("eeinstall.installers.zypper.probe_url", return_value=False),
            patch("eeinstall.installers.zypper.platform.machine", return_value="x86_64"),
        ):
            installer.register_repository()

        assert installer.repo_url == "https://repo.example.com/sles"
        assert runner.commands == [
            ["zypper", "removerepo", "docker-ee-test"],
            [
                "zypper",
                "addrepo",
                "https://repo.example.com/sles/15/x86_64/test",
                "docker-ee-test",
            ],
            ["rpm", "--import", "https://repo.example.com/sles/gpg"],
            ["zypper", "refresh"],
        ]

    def test_full_run_pinned(self, pinned_config, zypper_runner) -> None:
        """Conflicts are removed, packages installed, then the cli re-pinned."""
        installer = ZypperInstaller(pinned_config, SLES15, zypper_runner)
        with (
            patch("eeinstall.installers.zypper.probe_url", return_value=True),
            patch("eeinstall.installers.zypper.platform.machine", return_value="x86_64"),
        ):
            installer.run()

        commands = zypper_runner.commands
        assert ["zypper", "rm", "-y", *CONFLICTING_PACKAGES] in commands
        assert commands[-2] == [
            "zypper",
            "install",
            "--allow-vendor-change",
            "--replacefiles",
            "-f",
            "-y",
            "docker-ee-20.10.12-3",
            "containerd.io",
            "docker-ee-cli-20.10.12-3",
        ]
        assert commands[-1] == [
            "zypper",
            "install",
            "-f",
            "-y",
            "docker-ee-cli-20.10.12-3",
            "containerd.io",
        ]

    def test_sles12_never_searches_rootless(self, pinned_config, zypper_runner) -> None:
        """No rootless-extras search on SLES 12."""
        installer = ZypperInstaller(pinned_config, SLES12, zypper_runner)
        installer.resolve()
        assert ["zypper", "search", "-s", ROOTLESS_PACKAGE] not in zypper_runner.queries

    def test_latest_does_not_repin_cli(self, config, zypper_runner) -> None:
        """Without a version the cli package is left alone after install."""
        installer = ZypperInstaller(config, SLES15, zypper_runner)
        with (
            patch("eeinstall.installers.zypper.probe_url", return_value=True),
            patch("eeinstall.installers.zypper.platform.machine", return_value="x86_64"),
        ):
            installer.run()

        last = zypper_runner.commands[-1]
        assert "--replacefiles" in last
        assert "docker-ee" in last

    def test_cli_not_installed_is_not_repinned(
        self, pinned_config, zypper_runner, result_failed
    ) -> None:
        """after_install does nothing when the cli package is absent."""
        zypper_runner.responses[("rpm", "-q")] = result_failed()
        installer = ZypperInstaller(pinned_config, SLES15, zypper_runner)
        with (
            patch("eeinstall.installers.zypper.probe_url", return_value=True),
            patch("eeinstall.installers.zypper.platform.machine", return_value="x86_64"),
        ):
            installer.run()

        assert "--replacefiles" in zypper_runner.commands[-1]
