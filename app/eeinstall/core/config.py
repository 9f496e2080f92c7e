"""Installer configuration.

All inputs are read once at process start into an immutable
InstallerConfig that is passed explicitly to every component.
"""

import os
import re
from collections.abc import Mapping
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from eeinstall.core.errors import ConfigurationError
from eeinstall.core.patterns import compile_pattern
from eeinstall.models.package import CONTAINERD_PACKAGE, Backend
from eeinstall.models.version import CalendarVersion

DEFAULT_CHANNEL = "test"

# Environment variables mapped to config fields
ENV_VARS: dict[str, str] = {
    "DOCKER_URL": "docker_url",
    "VERSION": "version",
    "CHANNEL": "channel",
    "CONTAINERD_VERSION": "containerd_version",
}


class InstallerConfig(BaseModel):
    """Immutable installer settings.

    Attributes:
        docker_url: Base repository URL, without trailing slash.
        version: Requested Docker EE version, or None for latest.
        channel: Repository channel (e.g., 'test', 'stable-20.10').
        containerd_version: Requested containerd.io version prefix, if any.
        dry_run: Echo mutating commands instead of running them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    docker_url: Annotated[str, Field(min_length=1, description="Base repository URL")]
    version: Annotated[
        str | None,
        Field(description="Docker EE version (None = latest)"),
    ] = None
    channel: Annotated[str, Field(min_length=1, description="Repository channel")] = (
        DEFAULT_CHANNEL
    )
    containerd_version: Annotated[
        str | None,
        Field(description="containerd.io version prefix"),
    ] = None
    dry_run: bool = False

    @field_validator("docker_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove a single trailing slash from the repository URL."""
        return v.removesuffix("/")

    @field_validator("version", "containerd_version", mode="before")
    @classmethod
    def empty_as_unset(cls, v: object) -> object:
        """Strip surrounding whitespace and treat empty strings as unset."""
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str | None) -> str | None:
        """Require a numeric ``YY.MM`` prefix and a usable search pattern."""
        if v is None:
            return v
        CalendarVersion.parse(v)
        for backend in Backend:
            try:
                re.compile(compile_pattern(v, backend))
            except re.error as e:
                msg = f"Version '{v}' cannot be searched for: {e}"
                raise ValueError(msg) from None
        return v

    def containerd_package(self, backend: Backend) -> str:
        """Return the containerd.io install argument for a backend.

        Args:
            backend: Package manager family.

        Returns:
            Plain package name, or a version glob in the backend's syntax.
        """
        if not self.containerd_version:
            return CONTAINERD_PACKAGE
        separator = "-" if backend is Backend.YUM else "="
        return f"{CONTAINERD_PACKAGE}{separator}{self.containerd_version}*"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "InstallerConfig":
        """Build the configuration from environment variables.

        Args:
            environ: Environment mapping. If None, uses os.environ.
            **overrides: Field values that take precedence over the environment.
                None and empty values are ignored.

        Returns:
            Validated InstallerConfig.

        Raises:
            ConfigurationError: If DOCKER_URL is missing or a value is invalid.
        """
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}
        for var, field in ENV_VARS.items():
            value = env.get(var)
            if value:
                data[field] = value
        data.update({k: v for k, v in overrides.items() if v is not None and v != ""})

        if not data.get("docker_url"):
            raise ConfigurationError("DOCKER_URL must be set, exiting...")

        try:
            return cls.model_validate(data)
        except (ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
