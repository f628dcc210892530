# docker_host_audit/render.py

import click

from docker_host_audit.domain.audit.models import AuditReport, CheckRecord, Severity

_DIVIDER = "=" * 40
_INDENT = " " * 7

_SEVERITY_COLOURS: dict[Severity, str] = {
    Severity.PASS: "green",
    Severity.WARN: "yellow",
    Severity.FAIL: "red",
}


def render_banner(title: str) -> tuple[str, ...]:
    return (_DIVIDER, title, _DIVIDER)


def render_record(record: CheckRecord) -> tuple[str, ...]:
    """
    Render one check as a tagged line followed by untagged detail lines.

    Returns:
        tuple[str, ...]: ``[TAG] message``, then indented details and hint.
    """
    outcome = record.outcome
    tag = click.style(
        f"[{outcome.severity.value}]",
        fg=_SEVERITY_COLOURS[outcome.severity],
        bold=outcome.severity is Severity.FAIL,
    )

    lines = [f"{tag} {outcome.message}"]
    lines.extend(f"{_INDENT}{detail}" for detail in outcome.details)
    if outcome.hint:
        lines.append(f"{_INDENT}{outcome.hint}")
    return tuple(lines)


def render_summary(report: AuditReport) -> tuple[str, ...]:
    """
    Render the tallies and the plain-language verdict.

    Warning and failure counts only appear when non-zero.

    Returns:
        tuple[str, ...]: Summary block lines.
    """
    lines: list[str] = []

    if report.halted:
        lines.append(
            click.style(f"Audit halted: {report.halted_on} check failed.", fg="red"),
        )
        lines.append("")

    lines.extend(render_banner("Verification Summary"))
    lines.append(click.style(f"Passed: {report.passed}", fg="green"))
    if report.warned:
        lines.append(click.style(f"Warnings: {report.warned}", fg="yellow"))
    if report.failed:
        lines.append(click.style(f"Failed: {report.failed}", fg="red"))
    lines.append("")

    if report.exit_code == 0:
        lines.append(click.style("All critical checks passed!", fg="green"))
        if not report.warned:
            lines.append(click.style("No warnings!", fg="green"))
    else:
        lines.append(click.style("Some checks failed. Please review above.", fg="red"))

    return tuple(lines)

