# checks/__init__.py

from .access import (
    check_command_access,
    check_control_socket,
    check_group_members,
    check_user_access,
)
from .daemon_config import check_daemon_config
from .engine import (
    check_cgroup_driver,
    check_disk_usage,
    check_networks,
    check_storage_driver,
    check_system_info,
)
from .installation import check_daemon_running, check_runtime_installed
from .kernel import check_ip_forwarding
from .smoke_test import check_smoke_test

__all__ = [
    "check_cgroup_driver",
    "check_command_access",
    "check_control_socket",
    "check_daemon_config",
    "check_daemon_running",
    "check_disk_usage",
    "check_group_members",
    "check_ip_forwarding",
    "check_networks",
    "check_runtime_installed",
    "check_smoke_test",
    "check_storage_driver",
    "check_system_info",
    "check_user_access",
]
