"""Subprocess helpers for package manager and download tools.

Package managers are driven in two ways: listings and probes whose output
is parsed (run_command), and transactions whose progress output belongs to
the operator (run_interactive).
"""

import os
import shutil
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a finished process.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Process exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """True when the process exited with status 0."""
        return self.returncode == 0


def _environment(extra: dict[str, str] | None) -> dict[str, str]:
    return {**os.environ, **(extra or {})}


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = 60.0,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run a command and capture its output.

    Args:
        args: Command and arguments.
        check: If True, raise CalledProcessError on a non-zero exit.
        timeout: Seconds to wait, or None to wait for as long as it takes.
            Repository metadata downloads can be slow, so callers querying
            a package manager pass None.
        env: Variables added to the inherited environment.

    Returns:
        CommandResult of the finished process.

    Raises:
        subprocess.CalledProcessError: If check=True and the command fails.
        subprocess.TimeoutExpired: If the timeout elapses.
        FileNotFoundError: If the executable does not exist.
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=check,
        timeout=timeout,
        env=_environment(env) if env else None,
    )
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def run_interactive(
    args: list[str],
    *,
    env: dict[str, str] | None = None,
) -> int:
    """Run a command attached to the operator's terminal.

    Nothing is captured, so apt/yum/zypper progress and prompts reach
    the terminal unchanged.

    Args:
        args: Command and arguments.
        env: Variables added to the inherited environment.

    Returns:
        Exit status of the command.

    Raises:
        FileNotFoundError: If the executable does not exist.
        OSError: If the command cannot be started.
    """
    completed = subprocess.run(args, check=False, env=_environment(env))
    return completed.returncode


def command_exists(name: str) -> bool:
    """Check whether ``name`` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def probe_url(url: str) -> bool:
    """Check whether a URL can be fetched.

    Uses ``curl -fsSL`` so redirects are followed and HTTP errors
    count as failures.

    Args:
        url: URL to fetch.

    Returns:
        True if curl fetched the URL successfully, False otherwise.
    """
    try:
        result = run_command(["curl", "-fsSL", url], timeout=None)
    except (FileNotFoundError, OSError):
        return False
    return result.success
