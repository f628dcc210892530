# adapters/models.py

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class QueryResult(Generic[T]):
    """
    Typed outcome of a single read-only query against the host.

    A query either produced a value (``ok`` is True) or failed with a short,
    human-readable reason. Callers branch on ``ok`` rather than on raw exit
    codes or scraped tool output.
    """

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def available(cls, value: T) -> "QueryResult[T]":
        """
        Wrap a successfully queried value.

        Returns:
            QueryResult[T]: Result carrying the value.
        """
        return cls(value=value)

    @classmethod
    def unavailable(cls, error: str) -> "QueryResult[T]":
        """
        Wrap a failed query.

        Returns:
            QueryResult[T]: Result carrying the failure reason.
        """
        return cls(error=error or "unknown error")


@dataclass(frozen=True, slots=True)
class CommandOutput:
    """
    Captured result of an external command.
    """

    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class SocketStatus:
    """
    Ownership and permission bits of the daemon control socket.
    """

    path: str
    owner: str
    group: str
    mode: int


@dataclass(frozen=True, slots=True)
class UserGroups:
    """
    The invoking user and the names of every group they belong to.
    """

    user: str
    groups: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NetworkSummary:
    name: str
    driver: str


@dataclass(frozen=True, slots=True)
class DiskUsage:
    """
    Bytes on disk attributable to the container runtime, by category.
    """

    images: int = 0
    containers: int = 0
    volumes: int = 0
    build_cache: int = 0

    @property
    def total(self) -> int:
        return self.images + self.containers + self.volumes + self.build_cache
