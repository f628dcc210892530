# _utils/commands.py

import logging
import shlex
import subprocess
from collections.abc import Sequence

from ..models import CommandOutput, QueryResult

logger = logging.getLogger(__name__)


def run_command(args: Sequence[str]) -> QueryResult[CommandOutput]:
    """
    Run an external command to completion and capture its output.

    The command's own exit status is carried in the returned CommandOutput;
    the result is only unavailable when the command could not be started at
    all (missing executable, permission denied).

    Args:
        args: Command and arguments, never passed through a shell.

    Returns:
        QueryResult[CommandOutput]: Captured output, or the launch failure.
    """
    logger.debug("Running command: %s", shlex.join(args))

    try:
        completed = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as error:
        logger.debug("Command %s could not be started: %s", args[0], error)
        return QueryResult.unavailable(f"{args[0]}: {error}")

    return QueryResult.available(
        CommandOutput(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        ),
    )


def command_output(args: Sequence[str]) -> QueryResult[str]:
    """
    Run an external command and return its standard output on success.

    A non-zero exit status is reported as unavailable, using the first line
    of standard error as the reason.

    Args:
        args: Command and arguments.

    Returns:
        QueryResult[str]: Stripped standard output, or the failure reason.
    """
    result = run_command(args)
    if not result.ok:
        return QueryResult.unavailable(result.error)

    output = result.value
    if not output.succeeded:
        return QueryResult.unavailable(_describe_failure(output))

    return QueryResult.available(output.stdout.strip())


def _describe_failure(output: CommandOutput) -> str:
    """
    Summarise why a command failed.

    Returns:
        str: First non-empty stderr line, or the exit status.
    """
    for line in output.stderr.splitlines():
        if line.strip():
            return line.strip()
    return f"exit status {output.returncode}"
