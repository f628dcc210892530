# docker_host_audit/__init__.py

from .config import AuditSettings, settings_from_env
from .domain import (
    AuditReport,
    CheckSpec,
    Outcome,
    Severity,
    build_report_output,
    run_audit,
)
from .schemas import AuditReportOutput

__all__ = [
    "AuditReport",
    "AuditReportOutput",
    "AuditSettings",
    "CheckSpec",
    "Outcome",
    "Severity",
    "build_report_output",
    "run_audit",
    "settings_from_env",
]
