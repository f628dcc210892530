# docker_host_audit/config.py

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuditSettings:
    """
    Immutable description of the container host being audited.

    Centralises every path, name and reference value the checks rely on, so a
    host with a non-standard layout can be audited by overriding a field
    rather than editing a check.
    """

    # Runtime command-line entry point looked up on PATH
    runtime_command: str = "docker"
    # systemd unit running the daemon
    service_name: str = "docker"
    # Daemon control socket; also carries Engine API requests
    socket_path: str = "/var/run/docker.sock"
    # Permission bits expected on the control socket (rw for owner and group)
    expected_socket_mode: int = 0o660
    # Group granting unprivileged access to the socket
    group_name: str = "docker"
    # Optional daemon configuration file
    daemon_config_path: str = "/etc/docker/daemon.json"
    # Kernel flag that must be 1 for container networking
    forwarding_parameter: str = "net.ipv4.ip_forward"
    # Small, universally available image used by the smoke test
    smoke_image: str = "hello-world"


# Environment variables overriding AuditSettings fields
ENV_OVERRIDES: dict[str, str] = {
    "runtime_command": "DOCKER_AUDIT_COMMAND",
    "service_name": "DOCKER_AUDIT_SERVICE",
    "socket_path": "DOCKER_AUDIT_SOCKET",
    "group_name": "DOCKER_AUDIT_GROUP",
    "daemon_config_path": "DOCKER_AUDIT_DAEMON_CONFIG",
    "smoke_image": "DOCKER_AUDIT_SMOKE_IMAGE",
}


def settings_from_env(environ: dict[str, str] | None = None) -> AuditSettings:
    """
    Build settings from defaults overridden by ``DOCKER_AUDIT_*`` variables.

    Empty variables are ignored.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        AuditSettings: Settings with any environment overrides applied.
    """
    source = os.environ if environ is None else environ

    overrides = {
        name: source[variable]
        for name, variable in ENV_OVERRIDES.items()
        if source.get(variable)
    }
    return AuditSettings(**overrides)
