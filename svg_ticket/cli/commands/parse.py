"""Parse command - ticket SVG back to editable text."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from svg_ticket import ParseError, TicketRenderer

console = Console(stderr=True)


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output text file (default: stdout)")
def parse(input_path: Path, output: Path | None) -> None:
    """Extract the header and items from a generated SVG.

    INPUT: SVG file previously written by ``svg-ticket render``.
    """
    try:
        document = TicketRenderer().parse_file(input_path)
    except ParseError as e:
        console.print(f"[red]Error parsing {input_path}:[/red] {e}")
        raise SystemExit(1) from None

    if not document.header.strip():
        console.print(
            f"[red]Error:[/red] {input_path} has an empty header, "
            "which the text form cannot represent"
        )
        raise SystemExit(1)

    text = document.to_raw_text()
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output}")
