"""Top-level Click group for the nextplus CLI."""

import click

from nextplus.config import CONFIG_ENV_VAR, ConfigStore, default_config_path
from nextplus.create_cmd.cli import create_cmd
from nextplus.settings_cmd.cli import config_group, location_group


@click.group()
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False), envvar=CONFIG_ENV_VAR,
    help="Configuration file to read and update.",
)
@click.pass_context
def main(ctx, config_path):
    """nextplus - create Next.js projects with remembered defaults."""
    ctx.obj = ConfigStore(config_path or default_config_path())


main.add_command(create_cmd)
main.add_command(location_group)
main.add_command(config_group)
