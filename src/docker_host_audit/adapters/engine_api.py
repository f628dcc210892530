# adapters/engine_api.py

import logging
from collections.abc import Callable

import httpx

from .models import DiskUsage, NetworkSummary, QueryResult, T

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.Client]

INFO_PATH = "/info"
NETWORKS_PATH = "/networks"
DISK_USAGE_PATH = "/system/df"


def fetch_info(client_factory: ClientFactory) -> QueryResult[dict[str, object]]:
    """
    Fetch the daemon's system-wide information document.

    The fields this package relies on are ``Driver`` (storage backend),
    ``CgroupDriver`` (process isolation backend), ``OperatingSystem``,
    ``KernelVersion`` and ``MemTotal``.

    Args:
        client_factory: Callable returning an Engine API client.

    Returns:
        QueryResult[dict[str, object]]: Decoded ``GET /info`` payload.
    """
    result = _get_json(client_factory, INFO_PATH)
    if result.ok and not isinstance(result.value, dict):
        return QueryResult.unavailable("unexpected /info payload")
    return result


def fetch_networks(
    client_factory: ClientFactory,
) -> QueryResult[tuple[NetworkSummary, ...]]:
    """
    Enumerate the virtual networks known to the daemon.

    Args:
        client_factory: Callable returning an Engine API client.

    Returns:
        QueryResult[tuple[NetworkSummary, ...]]: Name and driver of each
            network, possibly empty.
    """
    result = _get_json(client_factory, NETWORKS_PATH)
    if not result.ok:
        return QueryResult.unavailable(result.error)

    return _parse(result.value, _parse_networks)


def fetch_disk_usage(client_factory: ClientFactory) -> QueryResult[DiskUsage]:
    """
    Fetch the disk space consumed by images, containers, volumes and build
    cache.

    Args:
        client_factory: Callable returning an Engine API client.

    Returns:
        QueryResult[DiskUsage]: Bytes used per category.
    """
    result = _get_json(client_factory, DISK_USAGE_PATH)
    if not result.ok:
        return QueryResult.unavailable(result.error)

    return _parse(result.value, _parse_disk_usage)


def _get_json(client_factory: ClientFactory, path: str) -> QueryResult[object]:
    """
    Perform a single GET against the Engine API and decode the JSON body.

    Transport errors, error statuses and undecodable bodies are all reported
    as unavailable. There are no retries.

    Returns:
        QueryResult[object]: Decoded JSON payload.
    """
    logger.debug("Engine API request: GET %s", path)

    try:
        with client_factory() as client:
            response = client.get(path)
            response.raise_for_status()
            return QueryResult.available(response.json())
    except httpx.HTTPStatusError as error:
        status = error.response.status_code
        logger.debug("Engine API %s returned HTTP %d", path, status)
        return QueryResult.unavailable(f"Engine API {path} returned HTTP {status}")
    except httpx.HTTPError as error:
        logger.debug("Engine API %s request failed: %s", path, error)
        return QueryResult.unavailable(f"Engine API unreachable: {error}")
    except ValueError as error:
        return QueryResult.unavailable(
            f"Engine API {path} returned invalid JSON: {error}",
        )


def _parse(payload: object, parser: Callable[[object], T]) -> QueryResult[T]:
    """
    Apply a payload parser, reporting malformed payloads as unavailable.

    Returns:
        QueryResult[T]: Parsed value.
    """
    try:
        return QueryResult.available(parser(payload))
    except (AttributeError, KeyError, TypeError, ValueError) as error:
        logger.debug("Malformed Engine API payload: %s", error)
        return QueryResult.unavailable(f"malformed Engine API payload: {error}")


def _parse_networks(payload: object) -> tuple[NetworkSummary, ...]:
    """
    Extract name and driver from a ``GET /networks`` response.

    Returns:
        tuple[NetworkSummary, ...]: One summary per network.
    """
    if not isinstance(payload, list):
        raise TypeError("expected a list of networks")

    return tuple(
        NetworkSummary(
            name=str(item["Name"]),
            driver=str(item.get("Driver") or ""),
        )
        for item in payload
    )


def _parse_disk_usage(payload: object) -> DiskUsage:
    """
    Sum the per-object sizes of a ``GET /system/df`` response.

    Volumes report a size of -1 when usage has not been computed; those are
    left out of the total.

    Returns:
        DiskUsage: Bytes used per category.
    """
    if not isinstance(payload, dict):
        raise TypeError("expected a disk usage object")

    volumes = payload.get("Volumes") or []
    containers = payload.get("Containers") or []
    build_cache = payload.get("BuildCache") or []

    return DiskUsage(
        images=int(payload.get("LayersSize") or 0),
        containers=sum(int(item.get("SizeRw") or 0) for item in containers),
        volumes=sum(
            max(int((item.get("UsageData") or {}).get("Size", 0)), 0)
            for item in volumes
        ),
        build_cache=sum(int(item.get("Size") or 0) for item in build_cache),
    )
