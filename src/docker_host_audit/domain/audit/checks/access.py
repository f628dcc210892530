# checks/access.py

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings

from ..formatters import format_mode
from ..models import Outcome, Severity


def check_control_socket(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the control socket exists with the expected permission bits.

    A missing socket means the CLI cannot reach the daemon at all and is a
    failure; unexpected bits only warn.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS for the expected mode, WARN for any other mode, FAIL
            when the socket is absent.
    """
    status = host.socket_status()
    if not status.ok:
        return Outcome(
            Severity.FAIL,
            f"Docker socket not found at {settings.socket_path}",
            details=(status.error,),
        )

    socket = status.value
    found = format_mode(socket.mode)
    expected = format_mode(settings.expected_socket_mode)
    details = (
        f"Socket owner: {socket.owner}:{socket.group}",
        f"Socket permissions: {found}",
    )

    if socket.mode != settings.expected_socket_mode:
        return Outcome(
            Severity.WARN,
            f"Socket permissions may be incorrect (found: {found}, "
            f"expected: {expected})",
            details=details,
        )

    return Outcome(
        Severity.PASS,
        f"Socket permissions are correct ({expected})",
        details=details,
    )


def check_group_members(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the privileged group exists and has at least one member.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS listing members, WARN when the group is empty, FAIL
            when it does not exist.
    """
    group = settings.group_name
    members = host.group_members()

    if not members.ok:
        return Outcome(
            Severity.FAIL,
            f"Docker group '{group}' does not exist",
            details=(members.error,),
            hint=f"Create with: sudo groupadd {group}",
        )

    if not members.value:
        return Outcome(
            Severity.WARN,
            f"Docker group '{group}' exists but has no members",
        )

    return Outcome(
        Severity.PASS,
        f"Docker group members: {','.join(members.value)}",
    )


def check_user_access(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the invoking user belongs to the privileged group.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS when a member, otherwise WARN with the command to add
            the user.
    """
    group = settings.group_name
    resolved = host.current_user_groups()

    if not resolved.ok:
        return Outcome(
            Severity.WARN,
            f"Could not determine whether current user is in {group} group",
            details=(resolved.error,),
        )

    user = resolved.value.user
    if group not in resolved.value.groups:
        return Outcome(
            Severity.WARN,
            f"Current user '{user}' is not in {group} group",
            hint=f"Add with: sudo usermod -aG {group} {user}",
        )

    return Outcome(Severity.PASS, f"Current user '{user}' is in {group} group")


def check_command_access(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify containers can be listed, first unprivileged and then with sudo.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS without sudo, WARN when only sudo works, FAIL when
            neither does.
    """
    command = f"{settings.runtime_command} ps"

    unprivileged = host.list_containers()
    if unprivileged.ok:
        return Outcome(Severity.PASS, f"Can run '{command}' without sudo")

    privileged = host.list_containers(privileged=True)
    if privileged.ok:
        return Outcome(
            Severity.WARN,
            f"Can run '{command}' only with sudo",
            details=(f"Without sudo: {unprivileged.error}",),
        )

    return Outcome(
        Severity.FAIL,
        f"Cannot run '{command}' even with sudo",
        details=(
            f"Without sudo: {unprivileged.error}",
            f"With sudo: {privileged.error}",
        ),
    )
