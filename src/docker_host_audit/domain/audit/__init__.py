# audit/__init__.py

from .models import AuditReport, CheckRecord, CheckSpec, Outcome, Severity
from .report import build_report_output, report_to_json, save_report
from .runner import AUDIT_CHECKS, run_audit

__all__ = [
    "AUDIT_CHECKS",
    "AuditReport",
    "CheckRecord",
    "CheckSpec",
    "Outcome",
    "Severity",
    "build_report_output",
    "report_to_json",
    "run_audit",
    "save_report",
]
