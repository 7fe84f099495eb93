"""svg-ticket: Render header and bullet lists as ticket-style SVG.

This library provides:
- Greedy word wrapping with an average-character-width estimator
- Vertical layout of a header and square-bulleted items on a fixed canvas
- Deterministic, escaped SVG output
- Parsing of generated SVG back into header and items

Example:
    >>> from svg_ticket import render, parse
    >>> svg = render("Day Pass", ["Valid today", "No refunds"])
    >>> parse(svg).items
    ('Valid today', 'No refunds')
"""

from svg_ticket.api import RenderResult, TicketRenderer, parse, render
from svg_ticket.config import CanvasHeightMode, Config
from svg_ticket.document import Document, split_raw_text
from svg_ticket.exceptions import ConfigError, ParseError, TicketSVGError
from svg_ticket.layout import RenderOptions, TicketLayout, compute_layout

__version__ = "0.1.0"

__all__ = [
    # Main API
    "render",
    "parse",
    "TicketRenderer",
    "RenderResult",
    "RenderOptions",
    # Model
    "Document",
    "split_raw_text",
    "TicketLayout",
    "compute_layout",
    # Configuration
    "Config",
    "CanvasHeightMode",
    # Exceptions
    "TicketSVGError",
    "ParseError",
    "ConfigError",
    # Metadata
    "__version__",
]
