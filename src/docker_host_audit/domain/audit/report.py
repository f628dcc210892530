# audit/report.py

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from docker_host_audit.schemas.report import AuditReportOutput, CheckOutput

from .models import AuditReport, CheckRecord

logger = logging.getLogger(__name__)


def build_report_output(report: AuditReport) -> AuditReportOutput:
    """
    Convert an internal AuditReport into its Pydantic JSON envelope.

    Args:
        report: Completed or halted audit report.

    Returns:
        AuditReportOutput: Machine-readable report envelope.
    """
    return AuditReportOutput(
        generated_at=datetime.now(UTC).isoformat(),
        checks_executed=report.checks_executed,
        passed=report.passed,
        warned=report.warned,
        failed=report.failed,
        healthy=report.healthy,
        halted=report.halted,
        halted_on=report.halted_on,
        exit_code=report.exit_code,
        checks=tuple(_convert_record(record) for record in report.records),
    )


def report_to_json(output: AuditReportOutput) -> str:
    """
    Serialise a report envelope as indented JSON.

    Returns:
        str: JSON document terminated by a newline.
    """
    return json.dumps(output.model_dump(), indent=2, ensure_ascii=False) + "\n"


def save_report(output: AuditReportOutput, dest: Path) -> Path:
    """
    Write the report envelope as JSON.

    Args:
        output: The report envelope to persist.
        dest: Destination file; parent directories are created.

    Returns:
        Path: Path to the written JSON file.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(report_to_json(output))

    logger.info("Audit report saved to %s", dest)
    return dest


def _convert_record(record: CheckRecord) -> CheckOutput:
    """
    Convert an internal CheckRecord to a Pydantic CheckOutput.

    Returns:
        CheckOutput: Pydantic-serialisable check output.
    """
    outcome = record.outcome
    return CheckOutput(
        label=record.label,
        severity=outcome.severity.value,
        message=outcome.message,
        details=outcome.details,
        hint=outcome.hint,
    )
