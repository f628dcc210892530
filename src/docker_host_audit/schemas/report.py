# schemas/report.py

from pydantic import BaseModel, ConfigDict


class CheckOutput(BaseModel):
    """
    Outcome of one check in an audit run.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    label: str
    severity: str
    message: str
    details: tuple[str, ...]
    hint: str | None


class AuditReportOutput(BaseModel):
    """
    Machine-readable envelope for a complete audit run.

    Contains the tallies, the overall verdict and every check outcome in
    execution order, serialisable as JSON for downstream consumers.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    generated_at: str
    checks_executed: int
    passed: int
    warned: int
    failed: int
    healthy: bool
    halted: bool
    halted_on: str | None
    exit_code: int
    checks: tuple[CheckOutput, ...]
