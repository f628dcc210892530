# checks/test_installation.py

import pytest

from docker_host_audit.adapters import QueryResult
from docker_host_audit.domain.audit.checks import (
    check_daemon_running,
    check_runtime_installed,
)
from docker_host_audit.domain.audit.models import Severity

pytestmark = pytest.mark.unit


def test_runtime_installed_passes_when_on_path(make_host, settings) -> None:
    """
    ARRANGE: docker resolvable on PATH
    ACT:     check_runtime_installed
    ASSERT:  PASS
    """
    actual = check_runtime_installed(make_host(), settings)

    assert actual.severity is Severity.PASS


def test_runtime_installed_reports_version(make_host, settings) -> None:
    """
    ARRANGE: docker --version succeeds
    ACT:     check_runtime_installed
    ASSERT:  version banner in details
    """
    actual = check_runtime_installed(make_host(), settings)

    assert "Version: Docker version 27.3.1, build ce12230" in actual.details


def test_runtime_installed_passes_without_version(make_host, settings) -> None:
    """
    ARRANGE: docker on PATH but --version fails
    ACT:     check_runtime_installed
    ASSERT:  still PASS
    """
    host = make_host(runtime_version=QueryResult.unavailable("exit status 1"))

    actual = check_runtime_installed(host, settings)

    assert actual.severity is Severity.PASS


def test_runtime_installed_fails_when_missing(make_host, settings) -> None:
    """
    ARRANGE: docker not on PATH
    ACT:     check_runtime_installed
    ASSERT:  FAIL with "not installed"
    """
    host = make_host(runtime_path=QueryResult.unavailable("docker not found on PATH"))

    actual = check_runtime_installed(host, settings)

    assert (actual.severity, actual.message) == (
        Severity.FAIL,
        "Docker is not installed",
    )


def test_runtime_missing_skips_version_query(make_host, settings) -> None:
    """
    ARRANGE: docker not on PATH
    ACT:     check_runtime_installed
    ASSERT:  --version never attempted
    """
    host = make_host(runtime_path=QueryResult.unavailable("docker not found on PATH"))

    check_runtime_installed(host, settings)

    assert host.calls == ["runtime_path"]


def test_daemon_running_passes_when_active(make_host, settings) -> None:
    """
    ARRANGE: service active
    ACT:     check_daemon_running
    ASSERT:  PASS
    """
    actual = check_daemon_running(make_host(), settings)

    assert actual.severity is Severity.PASS


def test_daemon_running_fails_when_inactive(make_host, settings) -> None:
    """
    ARRANGE: service inactive
    ACT:     check_daemon_running
    ASSERT:  FAIL
    """
    host = make_host(service_active=QueryResult.available(False))

    actual = check_daemon_running(host, settings)

    assert actual.severity is Severity.FAIL


def test_daemon_running_hints_start_command(make_host, settings) -> None:
    """
    ARRANGE: service inactive
    ACT:     check_daemon_running
    ASSERT:  hint names systemctl start
    """
    host = make_host(service_active=QueryResult.available(False))

    actual = check_daemon_running(host, settings)

    assert actual.hint == "Start with: sudo systemctl start docker"


def test_daemon_running_fails_when_systemctl_unavailable(make_host, settings) -> None:
    """
    ARRANGE: systemctl cannot be executed
    ACT:     check_daemon_running
    ASSERT:  FAIL
    """
    host = make_host(service_active=QueryResult.unavailable("systemctl: not found"))

    actual = check_daemon_running(host, settings)

    assert actual.severity is Severity.FAIL
