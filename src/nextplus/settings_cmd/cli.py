"""Click commands for the default location and the configuration file."""

import functools
import sys

import click

from nextplus.config import SETTINGS
from nextplus.errors import NextPlusError
from nextplus.settings_cmd.settings import SettingsManager


def _reports_errors(fn):
    """Turn NextPlusError into an ``Error:`` line and exit code 1."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except NextPlusError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    return wrapper


@click.group("location", invoke_without_command=True)
@click.pass_context
@_reports_errors
def location_group(ctx):
    """Select or clear the default project location."""
    if ctx.invoked_subcommand is None:
        SettingsManager(ctx.obj).choose_default_location()


@location_group.command("set")
@click.argument("folder", type=click.Path(exists=True, file_okay=False, resolve_path=True))
@click.pass_obj
@_reports_errors
def location_set_cmd(store, folder):
    """Use FOLDER for every new project."""
    SettingsManager(store).set_default_location(folder)


@location_group.command("clear")
@click.pass_obj
@_reports_errors
def location_clear_cmd(store):
    """Ask for a folder on every new project again."""
    SettingsManager(store).clear_default_location()


@location_group.command("show")
@click.pass_obj
@_reports_errors
def location_show_cmd(store):
    """Print the default project location."""
    current = SettingsManager(store).current_default_location()
    click.echo(current if current else "No default project location set")


@click.group("config")
def config_group():
    """Inspect and change stored project defaults."""


@config_group.command("show")
@click.pass_obj
@_reports_errors
def config_show_cmd(store):
    """Print every setting with its effective value."""
    for key, value in store.snapshot().as_dict().items():
        click.echo(f"{key}: {value!r}")


@config_group.command("path")
@click.pass_obj
def config_path_cmd(store):
    """Print the configuration file location."""
    click.echo(str(store.path))


@config_group.command("set")
@click.argument("key", type=click.Choice(sorted(SETTINGS)))
@click.argument("value")
@click.pass_obj
@_reports_errors
def config_set_cmd(store, key, value):
    """Store VALUE for KEY."""
    SettingsManager(store).update(key, value)
