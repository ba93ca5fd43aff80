"""CLI commands for report building."""

from __future__ import annotations

import click

from creational.application.build_report import BuildReportHandler
from creational.domain.model.report import Report
from creational.infrastructure.bootstrap import REPORT_FORMATS, report_builder


def display_report(report: Report) -> None:
    click.echo(report.header)
    click.echo(report.content)
    click.echo(report.footer)
    click.echo("-" * 20)


@click.command("build")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(list(REPORT_FORMATS), case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
def report_build(fmt: str) -> None:
    """Build the daily report."""
    handler = BuildReportHandler(report_builder(fmt))
    display_report(handler.handle())
