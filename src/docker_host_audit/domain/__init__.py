# domain/__init__.py

from .audit import (
    AUDIT_CHECKS,
    AuditReport,
    CheckRecord,
    CheckSpec,
    Outcome,
    Severity,
    build_report_output,
    run_audit,
    save_report,
)

__all__ = [
    "AUDIT_CHECKS",
    "AuditReport",
    "CheckRecord",
    "CheckSpec",
    "Outcome",
    "Severity",
    "build_report_output",
    "run_audit",
    "save_report",
]
