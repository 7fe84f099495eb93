"""svg-ticket command group and shared options."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from svg_ticket import __version__
from svg_ticket.cli.commands import parse, profiles, render
from svg_ticket.config import Config
from svg_ticket.exceptions import ConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(__version__, prog_name="svg-ticket")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--profile",
    help="Built-in canvas profile (ticket, compact); base for --config overrides",
)
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str,
    config_path: Path | None,
    profile: str | None,
) -> None:
    """Render bullet lists as ticket-style SVG and parse them back."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )

    try:
        config = Config.load(config_path, profile=profile)
    except ConfigError as e:
        raise click.BadParameter(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = log_level.upper()


cli.add_command(render)
cli.add_command(parse)
cli.add_command(profiles)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
