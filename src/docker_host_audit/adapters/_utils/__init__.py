# _utils/__init__.py

from .client import ENGINE_BASE_URL, make_client
from .commands import command_output, run_command

__all__ = [
    "ENGINE_BASE_URL",
    "command_output",
    "make_client",
    "run_command",
]
