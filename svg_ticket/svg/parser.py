"""Recover a ticket document from SVG produced by :mod:`svg_ticket.svg.writer`.

Compatibility contract: the parser only inverts this package's own output.
When elements carry ``data-role`` attributes the roles decide which text
is the header and which are items. Without roles the order decides: the
first ``<text>`` in document order is the header and every later one is an
item. Wrapped lines (``<tspan>`` children) are joined with a single space,
so original line breaks are not preserved; the next render re-wraps them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from svg_ticket.document import Document
from svg_ticket.exceptions import ParseError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def parse_svg_string(markup: str | bytes) -> Element:
    """Parse SVG markup safely and return the root element.

    Raises:
        ParseError: If the markup is empty, malformed, or uses forbidden
            XML constructs (DTDs, entity declarations).
    """
    if not markup or not markup.strip():
        raise ParseError("Empty SVG markup")
    try:
        return ET.fromstring(markup)
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse SVG: {e}") from e
    except DefusedXmlException as e:
        raise ParseError(f"Rejected unsafe SVG: {e}") from e


def find_text_elements(root: Element) -> list[Element]:
    """Return all ``<text>`` elements in document order."""
    return [el for el in root.iter() if _local_name(el.tag) == "text"]


def extract_element_text(element: Element) -> str:
    """Return the text of a ``<text>`` element.

    Line ``<tspan>`` children are joined with single spaces; an element
    without them yields its raw text content.
    """
    spans = [child for child in element if _local_name(child.tag) == "tspan"]
    if spans:
        return " ".join("".join(span.itertext()) for span in spans)
    return "".join(element.itertext())


def parse_ticket_svg(markup: str | bytes) -> Document:
    """Extract the header and items from generated ticket SVG.

    Raises:
        ParseError: If the markup is not well-formed or contains no text.
    """
    root = parse_svg_string(markup)
    texts = find_text_elements(root)
    if not texts:
        raise ParseError("No text elements found in SVG")

    if any(el.get("data-role") for el in texts):
        headers = [el for el in texts if el.get("data-role") == "header"]
        if not headers:
            raise ParseError("SVG has role-tagged text but no header")
        header_el = headers[0]
        item_els = [el for el in texts if el.get("data-role") == "item"]
    else:
        header_el, item_els = texts[0], texts[1:]

    document = Document(
        header=extract_element_text(header_el),
        items=tuple(extract_element_text(el) for el in item_els),
    )
    logger.debug("Parsed header and %d item(s)", len(document.items))
    return document
