"""Render command - raw text to ticket SVG."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_ticket import RenderOptions, TicketRenderer
from svg_ticket.config import Config

console = Console(stderr=True)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output SVG file (default: stdout)")
@click.option("--header-font-size", type=float, help="Header font size")
@click.option("--body-font-size", type=float, help="Bullet item font size")
@click.option("--max-line-width", type=float, help="Maximum bullet text block width")
@click.pass_context
def render(
    ctx: click.Context,
    input_path: Path,
    output: Path | None,
    header_font_size: float | None,
    body_font_size: float | None,
    max_line_width: float | None,
) -> None:
    """Render a text file to SVG.

    INPUT: Text file whose first non-blank line is the header and whose
    remaining non-blank lines ("- item" or "item") are the bullet items.
    """
    config = ctx.obj.get("config", Config.load())
    renderer = TicketRenderer(config=config, log_level=ctx.obj.get("log_level"))
    options = RenderOptions(
        header_font_size=header_font_size,
        body_font_size=body_font_size,
        max_line_width=max_line_width,
    )

    if output is None:
        svg = renderer.render_text(input_path.read_text(encoding="utf-8"), options)
        if svg is None:
            console.print(f"[red]Error:[/red] Input file is empty: {input_path}")
            raise SystemExit(1)
        click.echo(svg)
        return

    result = renderer.render_file(input_path, output, options)
    if not result.success:
        for error in result.errors:
            console.print(f"[red]Error:[/red] {error}")
        raise SystemExit(1)

    console.print(
        f"[green]Generated[/green] {output} "
        f"({result.item_count} items, height {result.canvas_height:g})"
    )
