"""Tests for the big clock font renderer."""

import pytest

from termclock.display.glyphs import FONT, GLYPH_ROWS, render_big_time, rendered_width


class TestRenderBigTime:
    def test_single_glyph_unscaled(self):
        assert render_big_time("1") == list(FONT["1"])

    def test_two_column_gap_between_glyphs(self):
        rows = render_big_time("11")
        assert rows[0] == "   █   " + "  " + "   █   "
        assert all(len(row) == 16 for row in rows)

    def test_no_gap_before_first_glyph(self):
        rows = render_big_time("8")
        assert rows[0] == "  ███  "

    def test_unknown_character_is_blank(self):
        assert render_big_time("a") == [" " * 7] * GLYPH_ROWS

    def test_horizontal_scale_repeats_each_column(self):
        rows = render_big_time("1", scale_x=2)
        assert rows[0] == "      ██      "
        assert len(rows) == GLYPH_ROWS

    def test_vertical_scale_repeats_each_row(self):
        rows = render_big_time("1", scale_y=3)
        assert len(rows) == 21
        assert rows[0] == rows[1] == rows[2] == FONT["1"][0]
        assert rows[3] == FONT["1"][1]

    def test_colon_glyph(self):
        rows = render_big_time(":")
        assert rows[1] == "   ░   "
        assert rows[0].strip() == ""

    @pytest.mark.parametrize("sx,sy", [(1, 1), (2, 2), (3, 1), (1, 4), (4, 3)])
    def test_block_dimensions(self, sx, sy):
        text = "12:34:56"
        rows = render_big_time(text, sx, sy)
        assert len(rows) == GLYPH_ROWS * sy
        expected = (7 * sx + 2 * sx) * len(text) - 2 * sx
        assert {len(row) for row in rows} == {expected}
        assert rendered_width(len(text), sx) == expected

    def test_scale_below_one_is_treated_as_one(self):
        assert render_big_time("7", 0, 0) == render_big_time("7")


def test_rendered_width_of_nothing():
    assert rendered_width(0, 3) == 0
