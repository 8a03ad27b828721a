"""Large bitmap-font clock digits."""

from typing import Dict, List, Tuple

GLYPH_ROWS = 7
GLYPH_WIDTH = 7
GLYPH_GAP = 2

Glyph = Tuple[str, ...]

FONT: Dict[str, Glyph] = {
    "0": (
        "  ███  ",
        " █   █ ",
        " █  ██ ",
        " █ █ █ ",
        " ██  █ ",
        " █   █ ",
        "  ███  ",
    ),
    "1": (
        "   █   ",
        "  ██   ",
        "   █   ",
        "   █   ",
        "   █   ",
        "   █   ",
        "  ███  ",
    ),
    "2": (
        "  ███  ",
        " █   █ ",
        "     █ ",
        "   ██  ",
        "  █    ",
        " █     ",
        " █████ ",
    ),
    "3": (
        " █████ ",
        "     █ ",
        "    ██ ",
        "   ███ ",
        "     █ ",
        " █   █ ",
        "  ███  ",
    ),
    "4": (
        "    ██ ",
        "   █ █ ",
        "  █  █ ",
        " █   █ ",
        " ██████",
        "     █ ",
        "     █ ",
    ),
    "5": (
        " █████ ",
        " █     ",
        " ████  ",
        "     █ ",
        "     █ ",
        " █   █ ",
        "  ███  ",
    ),
    "6": (
        "  ███  ",
        " █     ",
        " █     ",
        " ████  ",
        " █   █ ",
        " █   █ ",
        "  ███  ",
    ),
    "7": (
        " █████ ",
        "     █ ",
        "    █  ",
        "   █   ",
        "  █    ",
        "  █    ",
        "  █    ",
    ),
    "8": (
        "  ███  ",
        " █   █ ",
        " █   █ ",
        "  ███  ",
        " █   █ ",
        " █   █ ",
        "  ███  ",
    ),
    "9": (
        "  ███  ",
        " █   █ ",
        " █   █ ",
        "  ████ ",
        "     █ ",
        "     █ ",
        "  ███  ",
    ),
    ":": (
        "       ",
        "   ░   ",
        "       ",
        "       ",
        "       ",
        "   ░   ",
        "       ",
    ),
}

BLANK: Glyph = (" " * GLYPH_WIDTH,) * GLYPH_ROWS


def render_big_time(text: str, scale_x: int = 1, scale_y: int = 1) -> List[str]:
    """Render digits and colons as a block of large text rows.

    Glyphs are joined left to right with a two-column gap. Every character of
    the joined rows, gaps included, is then repeated scale_x times and every
    row scale_y times. Characters outside the font render blank.

    Returns:
        7 * scale_y rows of equal length.
    """
    sx = max(scale_x, 1)
    sy = max(scale_y, 1)
    gap = " " * GLYPH_GAP

    base_rows = [
        gap.join(FONT.get(ch, BLANK)[row] for ch in text)
        for row in range(GLYPH_ROWS)
    ]

    scaled_rows: List[str] = []
    for row in base_rows:
        wide = "".join(ch * sx for ch in row)
        scaled_rows.extend([wide] * sy)
    return scaled_rows


def rendered_width(char_count: int, scale_x: int = 1) -> int:
    """Width of render_big_time output for char_count characters."""
    if char_count <= 0:
        return 0
    return (GLYPH_WIDTH * char_count + GLYPH_GAP * (char_count - 1)) * max(scale_x, 1)
