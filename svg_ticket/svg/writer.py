"""Serialize a :class:`~svg_ticket.layout.TicketLayout` to SVG markup.

Output shape (the parser in :mod:`svg_ticket.svg.parser` depends on it):

- root ``<svg>`` with width, height and a matching viewBox
- a full-canvas background ``<rect>`` first
- one ``<text>`` for the header
- per item, one bullet ``<rect>`` directly followed by one ``<text>``
- one ``<tspan>`` per wrapped line; the first has ``dy="0"``, later ones
  carry the block's line spacing
"""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from svg_ticket.config import Config
from svg_ticket.layout import HeaderBlock, ItemBlock, TicketLayout

SVG_NS = "http://www.w3.org/2000/svg"

_QUOTE_ENTITIES = {"'": "&apos;", '"': "&quot;"}

# Characters XML 1.0 does not allow anywhere in a document
_XML_FORBIDDEN = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def escape_xml(text: str) -> str:
    """Escape ``< > & ' "`` for use in text content or attribute values.

    Characters that XML 1.0 forbids (most C0 controls, lone surrogates,
    U+FFFE and U+FFFF) are dropped.
    """
    return escape(_XML_FORBIDDEN.sub("", text), _QUOTE_ENTITIES)


def format_number(value: float, precision: int = 4) -> str:
    """Format a coordinate compactly: ``50``, ``33.6``, ``-16.8``."""
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _role(config: Config, role: str) -> str:
    return f' data-role="{role}"' if config.role_attributes else ""


def _text_element(
    lines: tuple[str, ...],
    x: float,
    y: float,
    font_size: float,
    line_spacing: float,
    role: str,
    config: Config,
) -> list[str]:
    fx = format_number(x)
    out = [
        f'<text x="{fx}" y="{format_number(y)}"{_role(config, role)} '
        f'font-family="{escape_xml(config.font_family)}" '
        f'font-size="{format_number(font_size)}" '
        f'fill="{escape_xml(config.text_color)}">'
    ]
    for i, line in enumerate(lines):
        dy = format_number(0 if i == 0 else line_spacing)
        out.append(f'    <tspan x="{fx}" dy="{dy}">{escape_xml(line)}</tspan>')
    out.append("</text>")
    return out


def _header(block: HeaderBlock, config: Config) -> list[str]:
    return ["<!-- Header -->"] + _text_element(
        block.lines,
        block.origin_x,
        block.start_y,
        block.font_size,
        block.line_spacing,
        "header",
        config,
    )


def _item(block: ItemBlock, config: Config) -> list[str]:
    b = block.bullet
    size = format_number(b.size)
    rect = (
        f'<rect x="{format_number(b.x)}" y="{format_number(b.y)}"{_role(config, "bullet")} '
        f'width="{size}" height="{size}" fill="{escape_xml(config.bullet_color)}" />'
    )
    return ["<!-- Bullet Item -->", rect] + _text_element(
        block.lines,
        block.text_origin_x,
        block.start_y,
        block.font_size,
        block.line_spacing,
        "item",
        config,
    )


def render_layout(layout: TicketLayout, config: Config | None = None) -> str:
    """Return the complete SVG document for ``layout``.

    Output is deterministic for identical inputs.
    """
    config = config or Config()
    width = format_number(layout.canvas_width)
    height = format_number(layout.canvas_height)

    body = _header(layout.header, config)
    for block in layout.items:
        body.extend(_item(block, config))

    lines = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="{SVG_NS}">',
        f'    <rect width="100%" height="100%" fill="{escape_xml(config.background_color)}" />',
    ]
    lines.extend(f"    {line}" for line in body)
    lines.append("</svg>")
    return "\n".join(lines)
