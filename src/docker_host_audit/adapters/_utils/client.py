# _utils/client.py

import httpx

# Host part of Engine API URLs; ignored by the unix socket transport
ENGINE_BASE_URL = "http://docker"


def make_client(socket_path: str) -> httpx.Client:
    """
    Create an HTTP client bound to the Docker Engine API unix socket.

    No timeout is applied.

    Args:
        socket_path: Filesystem path of the daemon control socket.

    Returns:
        httpx.Client: Client whose requests travel over the socket.
    """
    return httpx.Client(
        transport=httpx.HTTPTransport(uds=socket_path),
        base_url=ENGINE_BASE_URL,
        timeout=None,
        headers={"Accept": "application/json"},
    )
