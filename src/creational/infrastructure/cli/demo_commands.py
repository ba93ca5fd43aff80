"""CLI command that walks through all three patterns in one run."""

from __future__ import annotations

import click

from creational.application.build_report import BuildReportHandler
from creational.domain.exceptions import DomainException
from creational.infrastructure.bootstrap import (
    configuration_repository,
    report_builder,
)
from creational.infrastructure.cli.order_commands import order_demo
from creational.infrastructure.cli.report_commands import display_report


@click.command("demo")
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Run the settings, report and order demos."""
    repo = configuration_repository(ctx.obj["config_file"])
    config = repo.load()
    config.set("theme", "dark")

    try:
        theme = config.get("theme")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Config theme: {theme}")
    if not repo.save(config):
        click.echo("Settings could not be saved.")
    click.echo()

    for fmt in ("text", "html"):
        display_report(BuildReportHandler(report_builder(fmt)).handle())
    click.echo()

    ctx.invoke(order_demo)
