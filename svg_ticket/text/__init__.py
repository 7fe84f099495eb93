"""Text measurement and wrapping for svg-ticket.

This subpackage provides:
- Average-character-width text width estimation
- Greedy word wrapping
"""

from svg_ticket.text.metrics import DEFAULT_CHAR_WIDTH_RATIO, estimate_text_width
from svg_ticket.text.wrap import wrap_text

__all__ = ["DEFAULT_CHAR_WIDTH_RATIO", "estimate_text_width", "wrap_text"]
