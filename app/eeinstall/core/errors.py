"""Installer error taxonomy.

Every fatal condition raises a subclass of InstallerError. The dispatcher
turns them into an ``ERROR:`` message and a process exit code.
"""


class InstallerError(Exception):
    """Base exception for fatal installer errors."""

    exit_code: int = 1


class ConfigurationError(InstallerError):
    """Raised when a required input is missing or malformed."""


class UnsupportedDistributionError(InstallerError):
    """Raised when the host distribution is not in the support table."""

    def __init__(self, dist_id: str, dist_version: str) -> None:
        self.dist_id = dist_id
        self.dist_version = dist_version
        super().__init__(
            f"Unsupported distribution / distribution version '{dist_id}:{dist_version}'"
        )


class VersionNotFoundError(InstallerError):
    """Raised when no main package version matches the requested version.

    Attributes:
        version: The requested version string.
        search: The package manager invocation that was searched.
        source: Human-readable name of the listing that was searched.
    """

    def __init__(self, version: str, search: str, source: str) -> None:
        self.version = version
        self.search = search
        self.source = source
        super().__init__(f"'{version}' not found amongst {source} results")


class PrivilegeError(InstallerError):
    """Raised when commands cannot be run as root."""


class CommandFailedError(InstallerError):
    """Raised when a package manager or helper command exits non-zero.

    The tool's own exit status becomes the installer's exit status.
    """

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
        super().__init__(f"Command failed with exit code {returncode}: {command}")
