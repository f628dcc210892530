# audit/models.py

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import AuditSettings


class Severity(Enum):
    """
    Classification of a single check outcome.

    Attributes:
        PASS: The check completed and found nothing wrong.
        WARN: Non-essential misconfiguration; does not affect the exit status.
        FAIL: The host cannot be considered healthy.
    """

    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


@dataclass(frozen=True)
class Outcome:
    """
    The single result a check produces in one run.

    ``details`` carries informational lines (versions, field values) and
    ``hint`` an optional remediation command for the operator.
    """

    severity: Severity
    message: str
    details: tuple[str, ...] = ()
    hint: str | None = None


CheckProcedure = Callable[[DockerHost, AuditSettings], Outcome]


@dataclass(frozen=True)
class CheckSpec:
    """
    A named unit of verification in the audit battery.

    A blocking check halts the run when it fails, since every later check
    assumes what it verified.
    """

    label: str
    procedure: CheckProcedure
    blocking: bool = False


@dataclass(frozen=True)
class CheckRecord:
    label: str
    outcome: Outcome


@dataclass(frozen=True)
class AuditReport:
    """
    Ordered outcomes of one audit run and the tallies derived from them.

    Reports are immutable: ``record`` returns a new report with one more
    outcome, so the counters can never drift from the outcome sequence.
    """

    records: tuple[CheckRecord, ...] = ()
    passed: int = 0
    warned: int = 0
    failed: int = 0
    halted: bool = False

    def record(self, label: str, outcome: Outcome) -> "AuditReport":
        """
        Fold one more check outcome into the report.

        Args:
            label: Label of the check that produced the outcome.
            outcome: The check's outcome.

        Returns:
            AuditReport: New report including the outcome.
        """
        severity = outcome.severity
        return replace(
            self,
            records=(*self.records, CheckRecord(label, outcome)),
            passed=self.passed + int(severity is Severity.PASS),
            warned=self.warned + int(severity is Severity.WARN),
            failed=self.failed + int(severity is Severity.FAIL),
        )

    def halt(self) -> "AuditReport":
        """
        Mark the run as stopped by a failed blocking check.

        Returns:
            AuditReport: Copy of the report flagged as halted.
        """
        return replace(self, halted=True)

    @property
    def checks_executed(self) -> int:
        return len(self.records)

    @property
    def healthy(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.healthy and not self.halted else 1

    @property
    def halted_on(self) -> str | None:
        """
        Label of the blocking check that stopped the run, if any.

        Returns:
            str | None: The last recorded label when halted, otherwise None.
        """
        if not self.halted or not self.records:
            return None
        return self.records[-1].label
