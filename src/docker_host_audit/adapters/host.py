# adapters/host.py

from functools import partial

from docker_host_audit.config import AuditSettings

from . import docker_cli, engine_api, system
from ._utils import make_client
from .engine_api import ClientFactory
from .models import (
    DiskUsage,
    NetworkSummary,
    QueryResult,
    SocketStatus,
    UserGroups,
)


class DockerHost:
    """
    Read-only view of a live container host.

    Bundles every query the audit needs behind one object so that checks can
    be exercised against a substitute host. Each method performs at most one
    query and returns a QueryResult; nothing here mutates the host apart from
    the disposable smoke-test container, which is removed after it exits.
    """

    def __init__(
        self,
        settings: AuditSettings,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.settings = settings
        self._client_factory = client_factory or partial(
            make_client,
            settings.socket_path,
        )
        self._engine_info: QueryResult[dict[str, object]] | None = None

    def runtime_path(self) -> QueryResult[str]:
        return system.find_executable(self.settings.runtime_command)

    def runtime_version(self) -> QueryResult[str]:
        return docker_cli.runtime_version(self.settings.runtime_command)

    def service_active(self) -> QueryResult[bool]:
        return system.service_active(self.settings.service_name)

    def socket_status(self) -> QueryResult[SocketStatus]:
        return system.socket_status(self.settings.socket_path)

    def group_members(self) -> QueryResult[tuple[str, ...]]:
        return system.group_members(self.settings.group_name)

    def current_user_groups(self) -> QueryResult[UserGroups]:
        return system.current_user_groups()

    def list_containers(self, *, privileged: bool = False) -> QueryResult[str]:
        return docker_cli.list_containers(
            self.settings.runtime_command,
            privileged=privileged,
        )

    def forwarding_flag(self) -> QueryResult[str]:
        return system.kernel_parameter(self.settings.forwarding_parameter)

    def daemon_config_text(self) -> QueryResult[str | None]:
        return system.read_optional_file(self.settings.daemon_config_path)

    def networks(self) -> QueryResult[tuple[NetworkSummary, ...]]:
        return engine_api.fetch_networks(self._client_factory)

    def engine_info(self) -> QueryResult[dict[str, object]]:
        """
        Fetch the daemon information document once and reuse it for the
        lifetime of this host.
        """
        if self._engine_info is None:
            self._engine_info = engine_api.fetch_info(self._client_factory)
        return self._engine_info

    def run_smoke_container(self) -> QueryResult[str]:
        return docker_cli.run_disposable_container(
            self.settings.runtime_command,
            self.settings.smoke_image,
        )

    def disk_usage(self) -> QueryResult[DiskUsage]:
        return engine_api.fetch_disk_usage(self._client_factory)
