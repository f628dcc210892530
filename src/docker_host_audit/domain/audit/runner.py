# audit/runner.py

import logging
from collections.abc import Callable, Sequence

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings, settings_from_env

from .checks import (
    check_cgroup_driver,
    check_command_access,
    check_control_socket,
    check_daemon_config,
    check_daemon_running,
    check_disk_usage,
    check_group_members,
    check_ip_forwarding,
    check_networks,
    check_runtime_installed,
    check_smoke_test,
    check_storage_driver,
    check_system_info,
    check_user_access,
)
from .models import AuditReport, CheckRecord, CheckSpec, Outcome, Severity

logger = logging.getLogger(__name__)

# Fixed execution order; later checks assume the blocking ones passed
AUDIT_CHECKS: tuple[CheckSpec, ...] = (
    CheckSpec("installation", check_runtime_installed, blocking=True),
    CheckSpec("daemon", check_daemon_running, blocking=True),
    CheckSpec("socket", check_control_socket),
    CheckSpec("group", check_group_members),
    CheckSpec("user", check_user_access),
    CheckSpec("command", check_command_access),
    CheckSpec("forwarding", check_ip_forwarding),
    CheckSpec("daemon-config", check_daemon_config),
    CheckSpec("networks", check_networks),
    CheckSpec("storage-driver", check_storage_driver),
    CheckSpec("cgroup-driver", check_cgroup_driver),
    CheckSpec("smoke-test", check_smoke_test),
    CheckSpec("disk-usage", check_disk_usage),
    CheckSpec("system-info", check_system_info),
)


def run_audit(
    host: DockerHost | None = None,
    settings: AuditSettings | None = None,
    *,
    checks: Sequence[CheckSpec] = AUDIT_CHECKS,
    on_record: Callable[[CheckRecord], None] | None = None,
) -> AuditReport:
    """
    Run the audit battery against a host, one check at a time and in order.

    Each outcome is folded into the report as soon as its check returns. A
    failed blocking check halts the run and no later check executes; every
    other outcome is recorded and the run continues.

    Args:
        host: Host to query (defaults to the live host described by settings).
        settings: Audit configuration (defaults to environment overrides).
        checks: Ordered battery to run.
        on_record: Optional callback invoked with each record as it is made.

    Returns:
        AuditReport: The completed, or halted, audit report.
    """
    active_settings = settings or settings_from_env()
    active_host = host or DockerHost(active_settings)

    report = AuditReport()

    for spec in checks:
        outcome = _execute(spec, active_host, active_settings)
        report = report.record(spec.label, outcome)

        if on_record is not None:
            on_record(report.records[-1])

        if spec.blocking and outcome.severity is Severity.FAIL:
            logger.warning("Blocking check %r failed, halting audit", spec.label)
            return report.halt()

    logger.info(
        "Audit complete: %d passed, %d warnings, %d failed",
        report.passed,
        report.warned,
        report.failed,
    )
    return report


def _execute(spec: CheckSpec, host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Run one check, converting an unexpected exception into a FAIL outcome.

    Returns:
        Outcome: The check's single outcome.
    """
    logger.debug("Running check %r", spec.label)

    try:
        return spec.procedure(host, settings)
    except Exception as error:
        logger.exception("Check %r raised unexpectedly", spec.label)
        return Outcome(
            Severity.FAIL,
            f"Check {spec.label} raised {type(error).__name__}: {error}",
        )
