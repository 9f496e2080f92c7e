"""Root privilege elevation and privileged command execution."""

import getpass
import logging
import shlex

from eeinstall.core.errors import CommandFailedError, PrivilegeError
from eeinstall.utils.formatting import print_command
from eeinstall.utils.shell import CommandResult, command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)


def current_user() -> str:
    """Return the login name of the current user, or '' if unknown."""
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def privilege_prefix(user: str | None = None) -> list[str]:
    """Determine how to run commands as root.

    Args:
        user: Current user name. If None, it is looked up.

    Returns:
        Empty list when already root, ``["sudo", "-E"]`` when sudo exists,
        else ``["su", "-c"]`` (the command must then be a single string).

    Raises:
        PrivilegeError: If neither sudo nor su is available.
    """
    if user is None:
        user = current_user()

    if user == "root":
        return []
    if command_exists("sudo"):
        return ["sudo", "-E"]
    if command_exists("su"):
        return ["su", "-c"]

    msg = (
        "this installer needs the ability to run commands as root. "
        'We are unable to find either "sudo" or "su" available to make this happen.'
    )
    raise PrivilegeError(msg)


class CommandRunner:
    """Runs commands as root through a privilege prefix.

    Queries capture their output and always run, also in dry-run mode.
    Mutating commands are echoed, inherit the terminal, and are skipped
    in dry-run mode.

    Attributes:
        prefix: Privilege prefix from privilege_prefix().
        dry_run: If True, mutating commands are only echoed.
        env: Extra environment variables passed to every command.
    """

    def __init__(
        self,
        prefix: list[str],
        *,
        dry_run: bool = False,
        env: dict[str, str] | None = None,
    ) -> None:
        self.prefix = list(prefix)
        self.dry_run = dry_run
        self.env = dict(env or {})

    def wrap(self, args: list[str]) -> list[str]:
        """Prepend the privilege prefix to a command."""
        if self.prefix[:1] == ["su"]:
            return [*self.prefix, shlex.join(args)]
        return [*self.prefix, *args]

    def query(self, args: list[str]) -> CommandResult:
        """Run a read-only command and capture its output.

        Args:
            args: Command and arguments.

        Returns:
            CommandResult of the command.
        """
        logger.debug("Query: %s", shlex.join(args))
        return run_command(self.wrap(args), timeout=None, env=self.env)

    def run(self, args: list[str], *, check: bool = True) -> int:
        """Run a mutating command with the terminal attached.

        Args:
            args: Command and arguments.
            check: If True, raise on non-zero exit.

        Returns:
            Exit code of the command (0 in dry-run mode).

        Raises:
            CommandFailedError: If check=True and the command fails.
        """
        command = shlex.join(args)
        print_command(command)
        if self.dry_run:
            return 0

        returncode = run_interactive(self.wrap(args), env=self.env)
        if returncode != 0:
            logger.debug("Command exited with %d: %s", returncode, command)
            if check:
                raise CommandFailedError(command, returncode)
        return returncode

    def shell(self, script: str, *, check: bool = True) -> int:
        """Run a shell snippet (pipes, redirects) as root.

        Args:
            script: Shell code passed to ``sh -c``.
            check: If True, raise on non-zero exit.

        Returns:
            Exit code of the shell.
        """
        return self.run(["sh", "-c", script], check=check)
