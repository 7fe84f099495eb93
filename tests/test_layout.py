"""Unit tests for svg_ticket.layout.

Coverage: cursor bookkeeping for header and items, bullet placement,
width reference frames, canvas height modes and degenerate input.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from svg_ticket import CanvasHeightMode, Config, RenderOptions, compute_layout

WORDS_30 = " ".join(["word"] * 30)


class TestRenderOptions:
    """Test RenderOptions defaults and key aliases."""

    def test_defaults_come_from_config(self) -> None:
        assert RenderOptions().resolve(Config()) == (60, 24, 925)

    def test_overrides_win(self) -> None:
        options = RenderOptions(header_font_size=40, body_font_size=18, max_line_width=500)
        assert options.resolve(Config()) == (40, 18, 500)

    def test_zero_is_not_replaced_by_default(self) -> None:
        """Non-positive values pass through unchanged."""
        assert RenderOptions(body_font_size=0).resolve(Config())[1] == 0

    def test_from_mapping_accepts_camel_case(self) -> None:
        options = RenderOptions.from_mapping(
            {"headerFontSize": 50, "bodyFontSize": 20, "maxLineWidth": 700}
        )
        assert options == RenderOptions(50, 20, 700)

    def test_from_mapping_accepts_snake_case(self) -> None:
        options = RenderOptions.from_mapping({"body_font_size": 30})
        assert options.body_font_size == 30
        assert options.header_font_size is None

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        with pytest.raises(TypeError, match="Unknown render option"):
            RenderOptions.from_mapping({"fontColor": "red"})


class TestComputeLayout:
    """Test compute_layout with the default ticket profile."""

    def test_header_block(self) -> None:
        layout = compute_layout("Day Pass", [])
        header = layout.header
        assert header.lines == ("Day Pass",)
        assert header.origin_x == 50
        assert header.start_y == 50
        assert header.font_size == 60
        assert header.line_spacing == pytest.approx(84)

    def test_items_follow_header_spacing(self) -> None:
        """First item sits 1.5 header font sizes below the last header line."""
        layout = compute_layout("Day Pass", ["Valid today", "No refunds"])
        first, second = layout.items

        assert first.start_y == pytest.approx(140)
        assert first.text_origin_x == 100
        assert first.lines == ("Valid today",)
        assert first.font_size == 24

        # one line height plus the paragraph gap
        assert second.start_y == pytest.approx(140 + 33.6 + 50)

    def test_bullet_geometry(self) -> None:
        layout = compute_layout("Day Pass", ["Valid today"])
        bullet = layout.items[0].bullet
        assert bullet.x == 50
        assert bullet.y == pytest.approx(140 - 24 * 0.7)
        assert bullet.size == 26

    def test_multi_line_item_advances_cursor_per_line(self) -> None:
        """30 short words wrap into three lines at the default width."""
        layout = compute_layout("Day Pass", [WORDS_30, "next"])
        first, second = layout.items

        assert len(first.lines) == 3
        assert " ".join(first.lines) == WORDS_30
        assert second.start_y == pytest.approx(140 + 3 * 33.6 + 50)
        assert second.bullet.y == pytest.approx(140 + 3 * 33.6 + 50 - 16.8)

    def test_multi_line_header_moves_items_down(self) -> None:
        header = " ".join(["word"] * 20)
        layout = compute_layout(header, ["item"])

        assert len(layout.header.lines) == 4
        assert layout.items[0].start_y == pytest.approx(50 + 3 * 84 + 90)

    def test_header_width_ignores_max_line_width(self) -> None:
        """The header wraps at canvas width minus margins, items at max_line_width."""
        header = " ".join(["word"] * 20)
        layout = compute_layout(
            header, ["word word word"], RenderOptions(max_line_width=200)
        )

        assert len(layout.header.lines) == 4
        # item text width is 200 - 50 = 150
        assert layout.items[0].lines == ("word word", "word")

    def test_item_order_is_preserved(self) -> None:
        items = ["first", "second", "third", "fourth"]
        layout = compute_layout("H", items)
        assert [block.lines[0] for block in layout.items] == items
        ys = [block.start_y for block in layout.items]
        assert ys == sorted(ys)

    def test_fixed_height_ignores_content(self) -> None:
        short = compute_layout("H", [])
        long = compute_layout("H", [WORDS_30] * 40)
        assert short.canvas_height == long.canvas_height == 1526
        assert short.canvas_width == 1025

    def test_dynamic_height_tracks_cursor(self) -> None:
        config = replace(Config(), height_mode=CanvasHeightMode.DYNAMIC)
        layout = compute_layout("Day Pass", ["Valid today", "No refunds"], config=config)
        assert layout.canvas_height == pytest.approx(140 + 2 * (33.6 + 50) + 50)

    def test_compact_profile(self, compact_config: Config) -> None:
        layout = compute_layout(
            "Day Pass", ["Valid today", "No refunds"], config=compact_config
        )
        assert layout.canvas_width == 800
        assert layout.items[0].start_y == pytest.approx(98)
        assert layout.items[0].bullet.y == pytest.approx(98 - 20 * 0.6)
        assert layout.items[0].bullet.size == 12
        assert layout.items[0].text_origin_x == 80
        assert layout.canvas_height == pytest.approx(98 + 2 * (28 + 24) + 50)

    def test_compact_profile_forced_fixed(self, compact_config: Config) -> None:
        config = replace(compact_config, height_mode=CanvasHeightMode.FIXED)
        layout = compute_layout("Day Pass", ["Valid today"] * 50, config=config)
        assert layout.canvas_height == config.canvas_height

    def test_layout_is_repeatable(self) -> None:
        items = ["Valid today", WORDS_30]
        assert compute_layout("Day Pass", items) == compute_layout("Day Pass", items)


class TestDegenerateInput:
    """Degenerate input produces minimal layouts, never errors."""

    def test_no_items(self) -> None:
        layout = compute_layout("Header Only", [])
        assert layout.items == ()
        assert layout.header.lines == ("Header Only",)

    def test_empty_header(self) -> None:
        layout = compute_layout("", ["x"])
        assert layout.header.lines == ("",)
        assert layout.items[0].lines == ("x",)

    def test_empty_item(self) -> None:
        layout = compute_layout("H", ["", "   "])
        assert [block.lines for block in layout.items] == [("",), ("",)]

    @pytest.mark.parametrize(
        "options",
        [
            RenderOptions(header_font_size=0, body_font_size=0),
            RenderOptions(header_font_size=-10, body_font_size=-5),
            RenderOptions(max_line_width=0),
            RenderOptions(max_line_width=-100),
        ],
    )
    def test_non_positive_options(self, options: RenderOptions) -> None:
        layout = compute_layout("Day Pass", ["Valid today", "No refunds"], options)
        assert len(layout.items) == 2
        assert " ".join(layout.items[0].lines) == "Valid today"
