"""CLI commands for the settings store."""

from __future__ import annotations

import click

from creational.application.get_setting import GetSettingHandler
from creational.application.list_settings import ListSettingsHandler
from creational.application.set_setting import SetSettingHandler
from creational.domain.exceptions import DomainException
from creational.infrastructure.bootstrap import configuration_repository


@click.command("get")
@click.option("--key", required=True, help="Setting name.")
@click.pass_obj
def config_get(obj: dict, key: str) -> None:
    """Print the value of a setting."""
    handler = GetSettingHandler(configuration_repository(obj["config_file"]))

    try:
        value = handler.handle(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(value)


@click.command("set")
@click.option("--key", required=True, help="Setting name.")
@click.option("--value", required=True, help="Setting value.")
@click.pass_obj
def config_set(obj: dict, key: str, value: str) -> None:
    """Store a setting and save the settings file."""
    handler = SetSettingHandler(configuration_repository(obj["config_file"]))

    try:
        saved = handler.handle(key, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if saved:
        click.echo(f"Setting '{key}' set to '{value}'")
    else:
        click.echo(f"Setting '{key}' set to '{value}' but could not be saved.")


@click.command("show")
@click.pass_obj
def config_show(obj: dict) -> None:
    """List all settings."""
    handler = ListSettingsHandler(configuration_repository(obj["config_file"]))
    settings = handler.handle()

    if not settings:
        click.echo("No settings found.")
        return

    click.echo(f"{'Key':<20} {'Value':<30}")
    click.echo("-" * 51)
    for s in settings:
        click.echo(f"{s.key:<20} {s.value:<30}")
