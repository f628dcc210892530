# checks/test_kernel.py

import pytest

from docker_host_audit.adapters import QueryResult
from docker_host_audit.domain.audit.checks import check_ip_forwarding
from docker_host_audit.domain.audit.models import Severity

pytestmark = pytest.mark.unit


def test_forwarding_enabled_passes(make_host, settings) -> None:
    """
    ARRANGE: net.ipv4.ip_forward = 1
    ACT:     check_ip_forwarding
    ASSERT:  PASS
    """
    actual = check_ip_forwarding(make_host(), settings)

    assert actual.severity is Severity.PASS


def test_forwarding_disabled_warns(make_host, settings) -> None:
    """
    ARRANGE: net.ipv4.ip_forward = 0
    ACT:     check_ip_forwarding
    ASSERT:  WARN "disabled"
    """
    host = make_host(forwarding_flag=QueryResult.available("0"))

    actual = check_ip_forwarding(host, settings)

    assert (actual.severity, actual.message) == (
        Severity.WARN,
        "IPv4 forwarding is disabled",
    )


def test_forwarding_disabled_hints_sysctl(make_host, settings) -> None:
    """
    ARRANGE: net.ipv4.ip_forward = 0
    ACT:     check_ip_forwarding
    ASSERT:  hint is the sysctl command
    """
    host = make_host(forwarding_flag=QueryResult.available("0"))

    actual = check_ip_forwarding(host, settings)

    assert actual.hint == "Enable with: sudo sysctl -w net.ipv4.ip_forward=1"


def test_forwarding_unreadable_warns(make_host, settings) -> None:
    """
    ARRANGE: flag cannot be read
    ACT:     check_ip_forwarding
    ASSERT:  WARN, not FAIL
    """
    host = make_host(forwarding_flag=QueryResult.unavailable("sysctl: not found"))

    actual = check_ip_forwarding(host, settings)

    assert actual.severity is Severity.WARN
