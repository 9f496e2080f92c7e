"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest
from eeinstall.core.config import InstallerConfig
from eeinstall.core.privilege import CommandRunner
from eeinstall.utils.shell import CommandResult


class RecordingRunner(CommandRunner):
    """CommandRunner that records commands instead of executing them.

    Queries are answered from ``responses``, keyed by command prefix;
    the longest matching prefix wins and unknown queries succeed with
    empty output.
    """

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        super().__init__([])
        self.responses = responses or {}
        self.queries: list[list[str]] = []
        self.commands: list[list[str]] = []

    def query(self, args: list[str]) -> CommandResult:
        self.queries.append(args)
        for prefix in sorted(self.responses, key=len, reverse=True):
            if tuple(args[: len(prefix)]) == prefix:
                return self.responses[prefix]
        return CommandResult(stdout="", stderr="", returncode=0)

    def run(self, args: list[str], *, check: bool = True) -> int:
        self.commands.append(args)
        return 0


def ok(stdout: str = "") -> CommandResult:
    """Build a successful CommandResult."""
    return CommandResult(stdout=stdout, stderr="", returncode=0)


def failed(returncode: int = 1) -> CommandResult:
    """Build a failed CommandResult."""
    return CommandResult(stdout="", stderr="", returncode=returncode)


@pytest.fixture
def make_runner() -> type[RecordingRunner]:
    """Return the RecordingRunner class for building runners in tests."""
    return RecordingRunner


@pytest.fixture
def result_ok():
    """Return a factory for successful CommandResults."""
    return ok


@pytest.fixture
def result_failed():
    """Return a factory for failed CommandResults."""
    return failed


@pytest.fixture
def config() -> InstallerConfig:
    """Configuration for the latest release."""
    return InstallerConfig(docker_url="https://repo.example.com")


@pytest.fixture
def pinned_config() -> InstallerConfig:
    """Configuration pinning Docker EE 20.10.12."""
    return InstallerConfig(docker_url="https://repo.example.com", version="20.10.12")


@pytest.fixture
def mock_madison_output() -> str:
    """Sample apt-cache madison output for docker-ee (newest first)."""
    return """ docker-ee | 5:20.10.13~1-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages
 docker-ee | 5:20.10.12~3-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages
 docker-ee | 5:20.10.12~2-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages
 docker-ee | 5:19.03.14~3-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages"""


@pytest.fixture
def mock_madison_cli_output() -> str:
    """Sample apt-cache madison output for docker-ee-cli."""
    return """ docker-ee-cli | 5:20.10.13~1-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages
 docker-ee-cli | 5:20.10.12~3-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages"""


@pytest.fixture
def mock_madison_rootless_output() -> str:
    """Sample apt-cache madison output for docker-ee-rootless-extras."""
    return """ docker-ee-rootless-extras | 5:20.10.12~3-0~ubuntu-focal | https://repo.example.com/ubuntu focal/test amd64 Packages"""


@pytest.fixture
def mock_yum_list_output() -> str:
    """Sample yum list --showduplicates output for docker-ee (oldest first)."""
    return """Loaded plugins: fastestmirror
Available Packages
docker-ee.x86_64            3:19.03.14-3.el8            docker-ee-test
docker-ee.x86_64            3:20.10.12-2.el8            docker-ee-test
docker-ee.x86_64            3:20.10.12-3.el8            docker-ee-test
docker-ee.x86_64            3:20.10.13-1.el8            docker-ee-test"""


@pytest.fixture
def mock_yum_cli_output() -> str:
    """Sample yum list --showduplicates output for docker-ee-cli."""
    return """Available Packages
docker-ee-cli.x86_64        1:20.10.12-2.el8            docker-ee-test
docker-ee-cli.x86_64        1:20.10.12-3.el8            docker-ee-test"""


@pytest.fixture
def mock_zypper_output() -> str:
    """Sample zypper search -s output for docker-ee (oldest first)."""
    return """Loading repository data...
Reading installed packages...

S | Name          | Type    | Version    | Arch   | Repository
--+---------------+---------+------------+--------+---------------
  | docker-ee     | package | 19.03.14-3 | x86_64 | docker-ee-test
  | docker-ee     | package | 20.10.12-2 | x86_64 | docker-ee-test
  | docker-ee     | package | 20.10.12-3 | x86_64 | docker-ee-test
  | docker-ee-cli | package | 20.10.12-3 | x86_64 | docker-ee-test"""


@pytest.fixture
def mock_zypper_cli_output() -> str:
    """Sample zypper search -s output for docker-ee-cli."""
    return """S | Name          | Type    | Version    | Arch   | Repository
--+---------------+---------+------------+--------+---------------
i | docker-ee-cli | package | 20.10.12-2 | x86_64 | docker-ee-test
  | docker-ee-cli | package | 20.10.12-3 | x86_64 | docker-ee-test"""
