# checks/engine.py

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings

from ..formatters import format_bytes, limit_items
from ..models import Outcome, Severity

# Maximum networks listed in the network check's details
NETWORK_SAMPLE_LIMIT = 10


def check_networks(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the daemon has at least one virtual network configured.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS listing networks, FAIL when none exist or the inventory
            cannot be queried.
    """
    networks = host.networks()
    if not networks.ok:
        return Outcome(
            Severity.FAIL,
            "No Docker networks found",
            details=(networks.error,),
        )

    if not networks.value:
        return Outcome(Severity.FAIL, "No Docker networks found")

    lines = (f"{network.name} ({network.driver})" for network in networks.value)
    return Outcome(
        Severity.PASS,
        f"Docker networks available ({len(networks.value)} found)",
        details=limit_items(lines, NETWORK_SAMPLE_LIMIT),
    )


def check_storage_driver(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Resolve the storage backend from the ``Driver`` field of ``GET /info``.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS naming the driver, FAIL when unresolvable.
    """
    driver = _info_field(host, "Driver")
    if driver is None:
        return Outcome(Severity.FAIL, "Could not determine storage driver")
    return Outcome(Severity.PASS, f"Storage driver: {driver}")


def check_cgroup_driver(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Resolve the process isolation backend from the ``CgroupDriver`` field of
    ``GET /info``.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS naming the driver, WARN when unresolvable.
    """
    driver = _info_field(host, "CgroupDriver")
    if driver is None:
        return Outcome(Severity.WARN, "Could not determine cgroup driver")
    return Outcome(Severity.PASS, f"Cgroup driver: {driver}")


def check_disk_usage(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Report disk space consumed by images, containers, volumes and build cache.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS with the total and per-category usage, WARN when the
            accounting is unavailable.
    """
    usage = host.disk_usage()
    if not usage.ok:
        return Outcome(
            Severity.WARN,
            "Could not determine Docker disk usage",
            details=(usage.error,),
        )

    totals = usage.value
    return Outcome(
        Severity.PASS,
        f"Docker disk usage: {format_bytes(totals.total)}",
        details=(
            f"Images: {format_bytes(totals.images)}",
            f"Containers: {format_bytes(totals.containers)}",
            f"Local volumes: {format_bytes(totals.volumes)}",
            f"Build cache: {format_bytes(totals.build_cache)}",
        ),
    )


def check_system_info(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Summarise the operating system, kernel and memory the daemon reports.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS with the summary fields, WARN when unavailable.
    """
    info = host.engine_info()
    if not info.ok:
        return Outcome(
            Severity.WARN,
            "Could not retrieve Docker info",
            details=(info.error,),
        )

    memory = info.value.get("MemTotal")
    details = (
        f"Operating System: {info.value.get('OperatingSystem') or 'unknown'}",
        f"Kernel Version: {info.value.get('KernelVersion') or 'unknown'}",
        f"Total Memory: {_describe_memory(memory)}",
    )
    return Outcome(Severity.PASS, "Docker information retrieved", details=details)


def _info_field(host: DockerHost, field: str) -> str | None:
    """
    Read one non-empty string field from the daemon information document.

    Returns:
        str | None: Field value, or None when unavailable or empty.
    """
    info = host.engine_info()
    if not info.ok:
        return None

    value = info.value.get(field)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _describe_memory(memory: object) -> str:
    if isinstance(memory, int) and not isinstance(memory, bool):
        return format_bytes(memory)
    return "unknown"
