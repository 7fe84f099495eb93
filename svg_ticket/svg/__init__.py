"""SVG generation and parsing for svg-ticket.

This subpackage provides:
- Deterministic SVG serialization of a ticket layout
- Safe SVG parsing with XXE protection (defusedxml)
- Header and item recovery from generated markup
"""

from svg_ticket.svg.parser import (
    extract_element_text,
    find_text_elements,
    parse_svg_string,
    parse_ticket_svg,
)
from svg_ticket.svg.writer import escape_xml, format_number, render_layout

__all__ = [
    "escape_xml",
    "format_number",
    "render_layout",
    "parse_svg_string",
    "find_text_elements",
    "extract_element_text",
    "parse_ticket_svg",
]
