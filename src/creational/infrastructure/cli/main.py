import logging
from pathlib import Path

import click

from creational.infrastructure.bootstrap import DEFAULT_CONFIG_FILE
from creational.infrastructure.cli.config_commands import (
    config_get,
    config_set,
    config_show,
)
from creational.infrastructure.cli.demo_commands import demo
from creational.infrastructure.cli.order_commands import order_demo
from creational.infrastructure.cli.report_commands import report_build


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="Settings file (key=value per line).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_file: Path, verbose: bool) -> None:
    """Creational patterns workbench: settings, reports and order copies."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_file": config_file}


@cli.group()
def config() -> None:
    """Manage settings."""


@cli.group()
def report() -> None:
    """Build reports."""


@cli.group()
def order() -> None:
    """Work with orders."""


# Register subcommands
config.add_command(config_get)
config.add_command(config_set)
config.add_command(config_show)
report.add_command(report_build)
order.add_command(order_demo)
cli.add_command(demo)
