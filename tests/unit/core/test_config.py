"""Unit tests for installer configuration."""

import pytest
from eeinstall.core.config import DEFAULT_CHANNEL, InstallerConfig
from eeinstall.core.errors import ConfigurationError
from eeinstall.models.package import Backend
from pydantic import ValidationError


class TestFromEnv:
    """Tests for InstallerConfig.from_env."""

    def test_reads_all_variables(self) -> None:
        """All documented variables are read."""
        config = InstallerConfig.from_env(
            {
                "DOCKER_URL": "https://repo.example.com/",
                "VERSION": "20.10.12",
                "CHANNEL": "stable-20.10",
                "CONTAINERD_VERSION": "1.6",
            }
        )
        assert config.docker_url == "https://repo.example.com"
        assert config.version == "20.10.12"
        assert config.channel == "stable-20.10"
        assert config.containerd_version == "1.6"
        assert config.dry_run is False

    def test_defaults(self) -> None:
        """Only DOCKER_URL is required."""
        config = InstallerConfig.from_env({"DOCKER_URL": "https://repo.example.com"})
        assert config.version is None
        assert config.channel == DEFAULT_CHANNEL
        assert config.containerd_version is None

    def test_missing_docker_url(self) -> None:
        """Missing DOCKER_URL raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="DOCKER_URL must be set"):
            InstallerConfig.from_env({})

    def test_empty_docker_url(self) -> None:
        """An empty DOCKER_URL counts as missing."""
        with pytest.raises(ConfigurationError, match="DOCKER_URL must be set"):
            InstallerConfig.from_env({"DOCKER_URL": ""})

    def test_empty_version_means_latest(self) -> None:
        """An empty VERSION is treated as unset."""
        config = InstallerConfig.from_env({"DOCKER_URL": "https://x", "VERSION": ""})
        assert config.version is None

    def test_overrides_take_precedence(self) -> None:
        """Explicit values override the environment; None and '' are ignored."""
        config = InstallerConfig.from_env(
            {"DOCKER_URL": "https://env", "CHANNEL": "test"},
            docker_url="https://cli",
            channel="",
            version=None,
            dry_run=True,
        )
        assert config.docker_url == "https://cli"
        assert config.channel == "test"
        assert config.dry_run is True

    def test_malformed_version(self) -> None:
        """A version without numeric YY.MM raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            InstallerConfig.from_env({"DOCKER_URL": "https://x", "VERSION": "latest"})

    def test_unsearchable_version(self) -> None:
        """A version that cannot become a search pattern is rejected up front."""
        with pytest.raises(ConfigurationError, match="cannot be searched for"):
            InstallerConfig.from_env({"DOCKER_URL": "https://x", "VERSION": "20.10.12["})

    def test_padded_version_is_stripped(self) -> None:
        """Surrounding whitespace is removed from the version."""
        config = InstallerConfig.from_env({"DOCKER_URL": "https://x", "VERSION": " 20.10.12\n"})
        assert config.version == "20.10.12"


class TestInstallerConfig:
    """Tests for InstallerConfig model behavior."""

    def test_is_frozen(self) -> None:
        """Configuration cannot be modified after creation."""
        config = InstallerConfig(docker_url="https://x")
        with pytest.raises(ValidationError):
            config.channel = "stable"  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            InstallerConfig(docker_url="https://x", colour="blue")  # type: ignore[call-arg]

    def test_containerd_default(self) -> None:
        """Without a containerd version the plain package name is used."""
        config = InstallerConfig(docker_url="https://x")
        for backend in Backend:
            assert config.containerd_package(backend) == "containerd.io"

    def test_containerd_pinned_per_backend(self) -> None:
        """Pinned containerd uses each backend's version syntax."""
        config = InstallerConfig(docker_url="https://x", containerd_version="1.6.10")
        assert config.containerd_package(Backend.APT) == "containerd.io=1.6.10*"
        assert config.containerd_package(Backend.YUM) == "containerd.io-1.6.10*"
        assert config.containerd_package(Backend.ZYPPER) == "containerd.io=1.6.10*"
