# adapters/__init__.py

from .host import DockerHost
from .models import (
    CommandOutput,
    DiskUsage,
    NetworkSummary,
    QueryResult,
    SocketStatus,
    UserGroups,
)

__all__ = [
    "CommandOutput",
    "DiskUsage",
    "DockerHost",
    "NetworkSummary",
    "QueryResult",
    "SocketStatus",
    "UserGroups",
]
