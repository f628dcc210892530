# adapters/system.py

import getpass
import grp
import logging
import os
import pwd
import shutil
import stat
from pathlib import Path

from ._utils import command_output, run_command
from .models import QueryResult, SocketStatus, UserGroups

logger = logging.getLogger(__name__)

PROC_SYS_ROOT = Path("/proc/sys")


def find_executable(command: str) -> QueryResult[str]:
    """
    Locate a command on the search path.

    Args:
        command: Name of the executable, e.g. ``docker``.

    Returns:
        QueryResult[str]: Absolute path of the executable, or why it is missing.
    """
    path = shutil.which(command)
    if path is None:
        return QueryResult.unavailable(f"{command} not found on PATH")
    return QueryResult.available(path)


def service_active(service: str) -> QueryResult[bool]:
    """
    Ask systemd whether a service unit is active.

    ``systemctl is-active`` exits zero only for an active unit, so any other
    exit status is reported as an inactive service rather than an error.

    Args:
        service: Unit name, e.g. ``docker``.

    Returns:
        QueryResult[bool]: Whether the unit is active, or why systemctl could
            not be queried.
    """
    result = run_command(["systemctl", "is-active", service])
    if not result.ok:
        return QueryResult.unavailable(result.error)

    state = result.value.stdout.strip() or "unknown"
    logger.debug("Service %s state: %s", service, state)
    return QueryResult.available(result.value.succeeded)


def socket_status(path: str) -> QueryResult[SocketStatus]:
    """
    Inspect ownership and permission bits of a unix socket.

    Args:
        path: Filesystem path of the socket.

    Returns:
        QueryResult[SocketStatus]: Owner, group and mode bits, or unavailable
            when the path is missing or is not a socket.
    """
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return QueryResult.unavailable(f"{path} does not exist")
    except OSError as error:
        return QueryResult.unavailable(f"cannot stat {path}: {error.strerror}")

    if not stat.S_ISSOCK(info.st_mode):
        return QueryResult.unavailable(f"{path} is not a socket")

    return QueryResult.available(
        SocketStatus(
            path=path,
            owner=_user_name(info.st_uid),
            group=_group_name(info.st_gid),
            mode=stat.S_IMODE(info.st_mode),
        ),
    )


def group_members(name: str) -> QueryResult[tuple[str, ...]]:
    """
    List the supplementary members of a group.

    Args:
        name: Group name.

    Returns:
        QueryResult[tuple[str, ...]]: Member user names (possibly empty), or
            unavailable when the group does not exist.
    """
    try:
        entry = grp.getgrnam(name)
    except KeyError:
        return QueryResult.unavailable(f"group {name!r} does not exist")

    return QueryResult.available(tuple(entry.gr_mem))


def current_user_groups() -> QueryResult[UserGroups]:
    """
    Resolve the invoking user and every group they are configured into.

    Uses the group database rather than the current process credentials, so
    a membership added after login is already reported.

    Returns:
        QueryResult[UserGroups]: User name and group names.
    """
    try:
        user = getpass.getuser()
        primary_gid = pwd.getpwnam(user).pw_gid
        gids = os.getgrouplist(user, primary_gid)
    except (KeyError, OSError) as error:
        return QueryResult.unavailable(f"cannot resolve current user: {error}")

    groups = tuple(dict.fromkeys(_group_name(gid) for gid in gids))
    return QueryResult.available(UserGroups(user=user, groups=groups))


def kernel_parameter(
    name: str,
    *,
    proc_root: Path = PROC_SYS_ROOT,
) -> QueryResult[str]:
    """
    Read a kernel parameter such as ``net.ipv4.ip_forward``.

    Reads the value from procfs and falls back to ``sysctl -n`` when the
    procfs entry is not readable.

    Args:
        name: Dotted parameter name.
        proc_root: Root of the sysctl tree in procfs.

    Returns:
        QueryResult[str]: Stripped parameter value.
    """
    entry = proc_root / name.replace(".", "/")

    try:
        return QueryResult.available(entry.read_text().strip())
    except OSError as error:
        logger.debug("Cannot read %s (%s), falling back to sysctl", entry, error)

    return command_output(["sysctl", "-n", name])


def read_optional_file(path: str) -> QueryResult[str | None]:
    """
    Read a text file that is allowed to be absent.

    Args:
        path: File to read.

    Returns:
        QueryResult[str | None]: File contents, None when no regular file
            exists at the path, or unavailable when it exists but cannot be
            read.
    """
    target = Path(path)
    if not target.is_file():
        return QueryResult.available(None)

    try:
        return QueryResult.available(target.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as error:
        return QueryResult.unavailable(f"cannot read {path}: {error}")


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)
