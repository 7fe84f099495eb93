"""Profiles command - list built-in canvas profiles."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_ticket.config import PROFILES

console = Console()


@click.command()
def profiles() -> None:
    """List built-in canvas profiles."""
    table = Table(title="Canvas Profiles")
    table.add_column("Name", style="cyan")
    table.add_column("Canvas", style="green")
    table.add_column("Height mode", style="yellow")
    table.add_column("Fonts (header/body)")
    table.add_column("Bullet", style="dim")

    for name, config in sorted(PROFILES.items()):
        table.add_row(
            name,
            f"{config.canvas_width:g} x {config.canvas_height:g}",
            config.height_mode.value,
            f"{config.header_font_size:g} / {config.body_font_size:g}",
            f"{config.bullet_size:g} {config.bullet_color}",
        )

    console.print(table)
