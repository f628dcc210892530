# checks/kernel.py

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings

from ..models import Outcome, Severity


def check_ip_forwarding(host: DockerHost, settings: AuditSettings) -> Outcome:
    """
    Verify the kernel forwards IPv4 packets, which bridge networking needs.

    Args:
        host: Host to query.
        settings: Audit configuration.

    Returns:
        Outcome: PASS when the flag is 1, otherwise WARN.
    """
    parameter = settings.forwarding_parameter
    hint = f"Enable with: sudo sysctl -w {parameter}=1"
    flag = host.forwarding_flag()

    if not flag.ok:
        return Outcome(
            Severity.WARN,
            f"Could not read {parameter}",
            details=(flag.error,),
            hint=hint,
        )

    if flag.value != "1":
        return Outcome(
            Severity.WARN,
            "IPv4 forwarding is disabled",
            details=(f"{parameter} = {flag.value}",),
            hint=hint,
        )

    return Outcome(Severity.PASS, "IPv4 forwarding is enabled")
