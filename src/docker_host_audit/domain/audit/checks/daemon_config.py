# checks/daemon_config.py

from pydantic import ValidationError

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings
from docker_host_audit.schemas.daemon_config import (
    describe_invalid_config,
    parse_daemon_config,
)

from ..models import Outcome, Severity


def check_daemon_config(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Validate the optional daemon configuration file.

    Distinguishes three cases: no file (the daemon uses its defaults), a file
    that cannot be read or parsed, and a valid file whose log and storage
    drivers are reported.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: WARN when absent, FAIL when invalid, PASS when valid.
    """
    path = settings.daemon_config_path
    contents = host.daemon_config_text()

    if not contents.ok:
        return Outcome(
            Severity.FAIL,
            "daemon.json is invalid: file could not be read",
            details=(contents.error,),
        )

    if contents.value is None:
        return Outcome(Severity.WARN, "daemon.json not found (using defaults)")

    try:
        config = parse_daemon_config(contents.value)
    except ValidationError as error:
        return Outcome(
            Severity.FAIL,
            f"daemon.json is invalid: {describe_invalid_config(error)}",
            details=(f"Path: {path}",),
        )

    return Outcome(
        Severity.PASS,
        "daemon.json is valid JSON",
        details=(
            f"Log driver: {config.log_driver}",
            f"Storage driver: {config.storage_driver}",
        ),
    )
