# unit/conftest.py

from collections.abc import Callable

import httpx
import pytest

from docker_host_audit.adapters import (
    DiskUsage,
    NetworkSummary,
    QueryResult,
    SocketStatus,
    UserGroups,
)
from docker_host_audit.config import AuditSettings


def _healthy_results() -> dict[str, QueryResult]:
    """
    Query results of a correctly prepared container host.

    Returns:
        dict[str, QueryResult]: Result per FakeHost query name.
    """
    return {
        "runtime_path": QueryResult.available("/usr/bin/docker"),
        "runtime_version": QueryResult.available(
            "Docker version 27.3.1, build ce12230",
        ),
        "service_active": QueryResult.available(True),
        "socket_status": QueryResult.available(
            SocketStatus(
                path="/var/run/docker.sock",
                owner="root",
                group="docker",
                mode=0o660,
            ),
        ),
        "group_members": QueryResult.available(("alice",)),
        "current_user_groups": QueryResult.available(
            UserGroups(user="alice", groups=("alice", "sudo", "docker")),
        ),
        "list_containers": QueryResult.available("CONTAINER ID   IMAGE"),
        "list_containers_privileged": QueryResult.available("CONTAINER ID   IMAGE"),
        "forwarding_flag": QueryResult.available("1"),
        "daemon_config_text": QueryResult.available(
            '{"log-driver": "json-file", "storage-driver": "overlay2"}',
        ),
        "networks": QueryResult.available(
            (
                NetworkSummary(name="bridge", driver="bridge"),
                NetworkSummary(name="host", driver="host"),
                NetworkSummary(name="none", driver="null"),
            ),
        ),
        "engine_info": QueryResult.available(
            {
                "Driver": "overlay2",
                "CgroupDriver": "systemd",
                "OperatingSystem": "Ubuntu 24.04.1 LTS",
                "KernelVersion": "6.8.0-45-generic",
                "MemTotal": 8 * 1024**3,
            },
        ),
        "run_smoke_container": QueryResult.available("Hello from Docker!"),
        "disk_usage": QueryResult.available(
            DiskUsage(images=1024**3, containers=0, volumes=0, build_cache=0),
        ),
    }


class FakeHost:
    """
    In-memory stand-in for DockerHost.

    Answers every query from a table of canned results (healthy by default)
    and records the order in which queries were made.
    """

    def __init__(self, **overrides: QueryResult) -> None:
        unknown = set(overrides) - set(_healthy_results())
        if unknown:
            raise TypeError(f"unknown FakeHost queries: {sorted(unknown)}")

        self.calls: list[str] = []
        self._results = {**_healthy_results(), **overrides}

    def _answer(self, name: str) -> QueryResult:
        self.calls.append(name)
        return self._results[name]

    def runtime_path(self) -> QueryResult:
        return self._answer("runtime_path")

    def runtime_version(self) -> QueryResult:
        return self._answer("runtime_version")

    def service_active(self) -> QueryResult:
        return self._answer("service_active")

    def socket_status(self) -> QueryResult:
        return self._answer("socket_status")

    def group_members(self) -> QueryResult:
        return self._answer("group_members")

    def current_user_groups(self) -> QueryResult:
        return self._answer("current_user_groups")

    def list_containers(self, *, privileged: bool = False) -> QueryResult:
        if privileged:
            return self._answer("list_containers_privileged")
        return self._answer("list_containers")

    def forwarding_flag(self) -> QueryResult:
        return self._answer("forwarding_flag")

    def daemon_config_text(self) -> QueryResult:
        return self._answer("daemon_config_text")

    def networks(self) -> QueryResult:
        return self._answer("networks")

    def engine_info(self) -> QueryResult:
        return self._answer("engine_info")

    def run_smoke_container(self) -> QueryResult:
        return self._answer("run_smoke_container")

    def disk_usage(self) -> QueryResult:
        return self._answer("disk_usage")


@pytest.fixture
def make_host() -> Callable[..., FakeHost]:
    """
    Factory for FakeHost instances with selected query results overridden.
    """
    return FakeHost


@pytest.fixture
def settings() -> AuditSettings:
    return AuditSettings()


@pytest.fixture
def make_client_factory() -> Callable[..., Callable[[], httpx.Client]]:
    """
    Build Engine API client factories served by an in-process handler.
    """

    def build(handler: Callable[[httpx.Request], httpx.Response]):
        return lambda: httpx.Client(
            transport=httpx.MockTransport(handler),
            base_url="http://docker",
        )

    return build
