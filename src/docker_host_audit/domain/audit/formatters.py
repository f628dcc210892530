# audit/formatters.py

from collections.abc import Iterable

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def format_bytes(size: int) -> str:
    """
    Render a byte count with binary units, as the docker CLI does.

    Args:
        size: Number of bytes.

    Returns:
        str: e.g. ``0B``, ``512B``, ``1.5GiB``.
    """
    value = float(max(size, 0))
    for unit in _BINARY_UNITS:
        if value < 1024 or unit == _BINARY_UNITS[-1]:
            break
        value /= 1024

    if unit == "B":
        return f"{int(value)}B"
    return f"{value:.1f}{unit}"


def format_mode(mode: int) -> str:
    """
    Render permission bits in the octal form ``stat -c %a`` prints.

    Returns:
        str: e.g. ``660``.
    """
    return f"{mode:o}"


def limit_items(items: Iterable[str], limit: int) -> tuple[str, ...]:
    """
    Take at most ``limit`` items, noting how many were left out.

    Args:
        items: Lines to limit.
        limit: Maximum number of lines kept.

    Returns:
        tuple[str, ...]: Kept lines, plus a trailing ``... and N more`` line
            when anything was dropped.
    """
    collected = tuple(items)
    if len(collected) <= limit:
        return collected

    remaining = len(collected) - limit
    return (*collected[:limit], f"... and {remaining:,} more")
