# adapters/docker_cli.py

import logging

from ._utils import command_output
from .models import QueryResult

logger = logging.getLogger(__name__)


def runtime_version(command: str) -> QueryResult[str]:
    """
    Report the version banner of the runtime's command-line tool.

    Returns:
        QueryResult[str]: Output of ``docker --version``.
    """
    return command_output([command, "--version"])


def list_containers(command: str, *, privileged: bool = False) -> QueryResult[str]:
    """
    List running containers, optionally through sudo.

    The privileged variant runs ``sudo -n`` so that a missing sudo ticket
    fails immediately instead of prompting for a password.

    Args:
        command: Runtime command-line tool.
        privileged: Whether to elevate with sudo.

    Returns:
        QueryResult[str]: Output of ``docker ps``, or why it failed.
    """
    args = [command, "ps"]
    if privileged:
        args = ["sudo", "-n", *args]
    return command_output(args)


def run_disposable_container(command: str, image: str) -> QueryResult[str]:
    """
    Run a single container from ``image`` and remove it when it exits.

    Pulls the image first when it is not cached locally, which is why this
    can fail on a host without registry access.

    Args:
        command: Runtime command-line tool.
        image: Reference image, e.g. ``hello-world``.

    Returns:
        QueryResult[str]: Container output, or why the run failed.
    """
    logger.info("Running disposable %s container", image)
    return command_output([command, "run", "--rm", image])
