"""Approximate text width estimation.

No font files are consulted. Width is the character count scaled by the
font size and an average character width ratio, which is close enough
for sans-serif latin text and is stable for identical inputs.
"""

from __future__ import annotations

# Average glyph advance as a fraction of the em size
DEFAULT_CHAR_WIDTH_RATIO = 0.55


def estimate_text_width(
    text: str,
    font_size: float,
    char_width_ratio: float = DEFAULT_CHAR_WIDTH_RATIO,
) -> float:
    """Estimate the rendered width of ``text`` in user units.

    Args:
        text: String to measure.
        font_size: Font size in user units.
        char_width_ratio: Average character width relative to font size.

    Returns:
        ``len(text) * font_size * char_width_ratio``
    """
    return len(text) * font_size * char_width_ratio
