"""Greedy word wrapping on top of the width estimator."""

from __future__ import annotations

from svg_ticket.text.metrics import DEFAULT_CHAR_WIDTH_RATIO, estimate_text_width


def wrap_text(
    text: str,
    max_width: float,
    font_size: float,
    char_width_ratio: float = DEFAULT_CHAR_WIDTH_RATIO,
) -> list[str]:
    """Wrap ``text`` into lines no wider than ``max_width``.

    Words are split on any whitespace and packed greedily: a word joins the
    current line only while the estimated width of the candidate line stays
    strictly below ``max_width``. The first word always seeds the first line,
    so a single over-long word gets a line of its own and is never broken.

    Empty or whitespace-only text yields ``[""]``, a single empty line, so a
    block always has at least one line to render.

    Args:
        text: Text to wrap.
        max_width: Maximum line width in user units.
        font_size: Font size used for measuring.
        char_width_ratio: Passed through to :func:`estimate_text_width`.

    Returns:
        Wrapped lines in reading order.
    """
    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if estimate_text_width(candidate, font_size, char_width_ratio) < max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines
