"""Layout engine: wraps text and positions blocks on a vertical flow.

The layout is a pure function of its inputs. A single vertical cursor
starts at the top margin and is threaded through the header and then each
item in order; nothing is kept between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import reduce
from typing import Any

from svg_ticket.config import CanvasHeightMode, Config
from svg_ticket.text import wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Per-render overrides. ``None`` means use the profile default."""

    header_font_size: float | None = None
    body_font_size: float | None = None
    max_line_width: float | None = None

    _ALIASES = {
        "headerFontSize": "header_font_size",
        "bodyFontSize": "body_font_size",
        "maxLineWidth": "max_line_width",
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderOptions:
        """Build options from snake_case or camelCase keys."""
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name not in ("header_font_size", "body_font_size", "max_line_width"):
                raise TypeError(f"Unknown render option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def resolve(self, config: Config) -> tuple[float, float, float]:
        """Return (header_font_size, body_font_size, max_line_width)."""
        return (
            config.header_font_size
            if self.header_font_size is None
            else self.header_font_size,
            config.body_font_size if self.body_font_size is None else self.body_font_size,
            config.default_max_line_width
            if self.max_line_width is None
            else self.max_line_width,
        )


@dataclass(frozen=True)
class BulletRect:
    """Square bullet marker, top-left corner plus side length."""

    x: float
    y: float
    size: float


@dataclass(frozen=True)
class HeaderBlock:
    lines: tuple[str, ...]
    origin_x: float
    start_y: float
    font_size: float
    line_spacing: float


@dataclass(frozen=True)
class ItemBlock:
    lines: tuple[str, ...]
    bullet: BulletRect
    text_origin_x: float
    start_y: float
    font_size: float
    line_spacing: float


@dataclass(frozen=True)
class TicketLayout:
    """Positioned draw-list ready for serialization."""

    header: HeaderBlock
    items: tuple[ItemBlock, ...]
    canvas_width: float
    canvas_height: float


def _place_item(
    state: tuple[float, tuple[ItemBlock, ...]],
    text: str,
    *,
    config: Config,
    font_size: float,
    text_width: float,
) -> tuple[float, tuple[ItemBlock, ...]]:
    cursor, placed = state
    line_spacing = font_size * config.line_height
    text_x = config.margin_left + config.bullet_text_gap

    lines = tuple(wrap_text(text, text_width, font_size, config.char_width_ratio))
    block = ItemBlock(
        lines=lines,
        bullet=BulletRect(
            x=config.margin_left,
            y=cursor - font_size * config.bullet_offset_ratio,
            size=config.bullet_size,
        ),
        text_origin_x=text_x,
        start_y=cursor,
        font_size=font_size,
        line_spacing=line_spacing,
    )

    cursor += line_spacing * (len(lines) - 1)
    cursor += line_spacing + config.paragraph_gap
    return cursor, placed + (block,)


def compute_layout(
    header: str,
    items: Sequence[str],
    options: RenderOptions | None = None,
    config: Config | None = None,
) -> TicketLayout:
    """Wrap and position the header and items.

    The header wraps at the full text block width of the canvas
    (``canvas_width - 2 * margin_left``), independent of ``max_line_width``.
    Items wrap at ``max_line_width - bullet_text_gap`` with their text
    starting at ``margin_left + bullet_text_gap``.

    Args:
        header: Title text.
        items: Bullet item texts, rendered top to bottom.
        options: Font size and width overrides.
        config: Canvas profile, defaults to the ``ticket`` profile.

    Returns:
        The positioned layout including the resolved canvas height.
    """
    config = config or Config()
    options = options or RenderOptions()
    header_size, body_size, max_line_width = options.resolve(config)

    cursor = config.margin_top
    header_spacing = header_size * config.line_height
    header_lines = tuple(
        wrap_text(
            header, config.default_max_line_width, header_size, config.char_width_ratio
        )
    )
    header_block = HeaderBlock(
        lines=header_lines,
        origin_x=config.margin_left,
        start_y=cursor,
        font_size=header_size,
        line_spacing=header_spacing,
    )
    cursor += header_spacing * (len(header_lines) - 1)
    cursor += header_size * config.header_spacing

    def step(
        state: tuple[float, tuple[ItemBlock, ...]], text: str
    ) -> tuple[float, tuple[ItemBlock, ...]]:
        return _place_item(
            state,
            text,
            config=config,
            font_size=body_size,
            text_width=max_line_width - config.bullet_text_gap,
        )

    cursor, item_blocks = reduce(step, items, (cursor, ()))

    if config.height_mode is CanvasHeightMode.DYNAMIC:
        canvas_height = cursor + config.margin_bottom
    else:
        canvas_height = config.canvas_height

    logger.debug(
        "Laid out %d header line(s) and %d item(s), final cursor %.2f, height %s",
        len(header_lines),
        len(item_blocks),
        cursor,
        canvas_height,
    )

    return TicketLayout(
        header=header_block,
        items=item_blocks,
        canvas_width=config.canvas_width,
        canvas_height=canvas_height,
    )
