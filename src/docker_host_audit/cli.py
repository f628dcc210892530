# docker_host_audit/cli.py

import logging
import os
from pathlib import Path

import click

from docker_host_audit.adapters import DockerHost
from docker_host_audit.config import settings_from_env
from docker_host_audit.domain.audit.models import CheckRecord
from docker_host_audit.domain.audit.report import (
    build_report_output,
    report_to_json,
    save_report,
)
from docker_host_audit.domain.audit.runner import run_audit
from docker_host_audit.logging_config import setup_logging
from docker_host_audit.render import render_banner, render_record, render_summary


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option(
    "--report",
    "report_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Also write the JSON report to this file.",
)
@click.option("--no-color", is_flag=True, help="Disable coloured output.")
@click.option("-v", "--verbose", is_flag=True, help="Log every query to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    as_json: bool,
    report_path: Path | None,
    no_color: bool,
    verbose: bool,
) -> None:
    """Audit this host's readiness to run Docker containers.

    Exits 0 when no check failed and 1 otherwise, or when the --report file
    could not be written.
    """
    setup_logging(logging.DEBUG if verbose else None)

    color = False if no_color or os.getenv("NO_COLOR") else None
    settings = settings_from_env()

    def echo_record(record: CheckRecord) -> None:
        for line in render_record(record):
            click.echo(line, color=color)

    if not as_json:
        for line in render_banner("Docker Server Verification"):
            click.echo(line, color=color)

    report = run_audit(
        DockerHost(settings),
        settings,
        on_record=None if as_json else echo_record,
    )

    exit_code = report.exit_code
    output = build_report_output(report)
    if report_path is not None:
        try:
            save_report(output, report_path)
        except OSError as error:
            click.echo(
                f"Error: could not write report to {report_path}: {error}",
                err=True,
            )
            exit_code = 1

    if as_json:
        click.echo(report_to_json(output), nl=False)
    else:
        click.echo("")
        for line in render_summary(report):
            click.echo(line, color=color)

    ctx.exit(exit_code)
