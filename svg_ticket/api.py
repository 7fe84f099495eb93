"""Public API: render ticket documents to SVG and parse them back."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from svg_ticket.config import Config
from svg_ticket.document import Document, split_raw_text
from svg_ticket.layout import RenderOptions, TicketLayout, compute_layout
from svg_ticket.svg.parser import parse_ticket_svg
from svg_ticket.svg.writer import render_layout

logger = logging.getLogger(__name__)


def _as_options(options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.from_mapping(options)


def render(
    header: str,
    items: Sequence[str],
    options: RenderOptions | Mapping[str, Any] | None = None,
    config: Config | None = None,
) -> str:
    """Render a header and bullet items to SVG markup.

    Args:
        header: Title line.
        items: Bullet item texts, top to bottom.
        options: ``RenderOptions`` or a mapping with ``headerFontSize``,
            ``bodyFontSize`` and ``maxLineWidth`` (or snake_case) keys.
        config: Canvas profile; defaults to the ``ticket`` profile.

    Returns:
        The SVG document as a string.
    """
    config = config or Config()
    layout = compute_layout(header, items, _as_options(options), config)
    return render_layout(layout, config)


def parse(markup: str | bytes) -> Document:
    """Recover the header and items from markup produced by :func:`render`.

    Raises:
        ParseError: If the markup is malformed or contains no text.
    """
    return parse_ticket_svg(markup)


@dataclass
class RenderResult:
    """Outcome of rendering one input file."""

    success: bool
    input: Path | None = None
    output: Path | None = None
    header_lines: int = 0
    item_count: int = 0
    canvas_height: float = 0
    errors: list[str] = field(default_factory=list)


class TicketRenderer:
    """Render and parse tickets with one fixed canvas profile.

    Example:
        >>> renderer = TicketRenderer(Config.profile("compact"))
        >>> svg = renderer.render("Day Pass", ["Valid today"])
    """

    def __init__(
        self,
        config: Config | None = None,
        log_level: str | int | None = None,
    ) -> None:
        self.config = config or Config()
        if log_level is not None:
            logging.getLogger("svg_ticket").setLevel(log_level)

    def layout(
        self,
        header: str,
        items: Sequence[str],
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> TicketLayout:
        """Return the positioned layout without serializing it."""
        return compute_layout(header, items, _as_options(options), self.config)

    def render(
        self,
        header: str,
        items: Sequence[str],
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Render ``header`` and ``items`` to SVG markup."""
        return render_layout(self.layout(header, items, options), self.config)

    def render_document(
        self,
        document: Document,
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> str:
        return self.render(document.header, document.items, options)

    def render_text(
        self,
        raw: str,
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> str | None:
        """Render editor text, or return ``None`` if it has no non-blank lines."""
        document = split_raw_text(raw)
        if document is None:
            return None
        return self.render_document(document, options)

    def render_file(
        self,
        input_path: Path,
        output_path: Path,
        options: RenderOptions | Mapping[str, Any] | None = None,
    ) -> RenderResult:
        """Render a raw text file to an SVG file.

        Nothing is written when the input has no non-blank lines.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)
        result = RenderResult(success=False, input=input_path, output=output_path)

        document = split_raw_text(input_path.read_text(encoding="utf-8"))
        if document is None:
            result.errors.append(f"Input file is empty: {input_path}")
            logger.warning("Input file is empty: %s", input_path)
            return result

        layout = self.layout(document.header, document.items, options)
        output_path.write_text(render_layout(layout, self.config), encoding="utf-8")
        logger.debug("Wrote %s", output_path)

        result.success = True
        result.header_lines = len(layout.header.lines)
        result.item_count = len(layout.items)
        result.canvas_height = layout.canvas_height
        return result

    def parse(self, markup: str | bytes) -> Document:
        return parse_ticket_svg(markup)

    def parse_file(self, path: Path) -> Document:
        """Parse a generated SVG file.

        Raises:
            ParseError: If the file is not generated ticket markup.
        """
        return parse_ticket_svg(Path(path).read_bytes())
