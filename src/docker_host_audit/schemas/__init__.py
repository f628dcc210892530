# schemas/__init__.py

from .daemon_config import (
    DEFAULT_LOG_DRIVER,
    DEFAULT_STORAGE_DRIVER,
    DaemonConfig,
    describe_invalid_config,
    parse_daemon_config,
)
from .report import AuditReportOutput, CheckOutput

__all__ = [
    # daemon configuration
    "DEFAULT_LOG_DRIVER",
    "DEFAULT_STORAGE_DRIVER",
    "DaemonConfig",
    "describe_invalid_config",
    "parse_daemon_config",
    # report
    "AuditReportOutput",
    "CheckOutput",
]
