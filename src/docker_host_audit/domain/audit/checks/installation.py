# checks/installation.py

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings

from ..models import Outcome, Severity


def check_runtime_installed(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the runtime's command-line tool is on the search path.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS with the version banner, or FAIL when not installed.
    """
    located = host.runtime_path()
    if not located.ok:
        return Outcome(
            Severity.FAIL,
            "Docker is not installed",
            details=(located.error,),
        )

    version = host.runtime_version()
    if version.ok:
        version_line = f"Version: {version.value}"
    else:
        version_line = f"Version unknown: {version.error}"

    return Outcome(
        Severity.PASS,
        "Docker is installed",
        details=(version_line, f"Path: {located.value}"),
    )


def check_daemon_running(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the daemon's service unit is active.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS when active, otherwise FAIL with a start command.
    """
    active = host.service_active()
    hint = f"Start with: sudo systemctl start {settings.service_name}"

    if not active.ok:
        return Outcome(
            Severity.FAIL,
            "Docker daemon is not running",
            details=(f"Service state unavailable: {active.error}",),
            hint=hint,
        )

    if not active.value:
        return Outcome(Severity.FAIL, "Docker daemon is not running", hint=hint)

    return Outcome(Severity.PASS, "Docker daemon is running")
