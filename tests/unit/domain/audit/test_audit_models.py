# domain/audit/test_audit_models.py

import pytest

from docker_host_audit.domain.audit.models import AuditReport, Outcome, Severity

pytestmark = pytest.mark.unit


def _folded(*severities: Severity) -> AuditReport:
    """
    Fold one outcome per severity into an empty report.

    Returns:
        AuditReport: Report holding the outcomes in order.
    """
    report = AuditReport()
    for index, severity in enumerate(severities):
        report = report.record(f"check-{index}", Outcome(severity, "message"))
    return report


def test_empty_report_is_healthy() -> None:
    """
    ARRANGE: no outcomes
    ACT:     build AuditReport
    ASSERT:  healthy with exit code 0
    """
    actual = AuditReport()

    assert (actual.healthy, actual.exit_code) == (True, 0)


def test_record_returns_new_report() -> None:
    """
    ARRANGE: empty report
    ACT:     record an outcome
    ASSERT:  original report unchanged
    """
    original = AuditReport()

    original.record("socket", Outcome(Severity.PASS, "ok"))

    assert original.checks_executed == 0


def test_record_tallies_each_severity() -> None:
    """
    ARRANGE: two passes, one warning, one failure
    ACT:     fold outcomes
    ASSERT:  counters (2, 1, 1)
    """
    actual = _folded(Severity.PASS, Severity.WARN, Severity.PASS, Severity.FAIL)

    assert (actual.passed, actual.warned, actual.failed) == (2, 1, 1)


def test_record_preserves_order() -> None:
    """
    ARRANGE: three outcomes
    ACT:     fold outcomes
    ASSERT:  labels in insertion order
    """
    actual = _folded(Severity.FAIL, Severity.PASS, Severity.WARN)

    assert [record.label for record in actual.records] == [
        "check-0",
        "check-1",
        "check-2",
    ]


def test_warnings_keep_report_healthy() -> None:
    """
    ARRANGE: only warnings
    ACT:     fold outcomes
    ASSERT:  exit code 0
    """
    actual = _folded(Severity.WARN, Severity.WARN)

    assert actual.exit_code == 0


def test_any_failure_makes_report_unhealthy() -> None:
    """
    ARRANGE: one failure among passes
    ACT:     fold outcomes
    ASSERT:  healthy False, exit code 1
    """
    actual = _folded(Severity.PASS, Severity.FAIL, Severity.PASS)

    assert (actual.healthy, actual.exit_code) == (False, 1)


def test_halt_marks_last_label() -> None:
    """
    ARRANGE: report whose last outcome failed
    ACT:     halt
    ASSERT:  halted_on names the last check
    """
    actual = _folded(Severity.PASS, Severity.FAIL).halt()

    assert (actual.halted, actual.halted_on) == (True, "check-1")


def test_halted_on_is_none_when_not_halted() -> None:
    """
    ARRANGE: completed report with a failure
    ACT:     read halted_on
    ASSERT:  None
    """
    actual = _folded(Severity.FAIL)

    assert actual.halted_on is None
