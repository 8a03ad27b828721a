"""Linear thermometer gauge: a label row, a tick row and a bar row."""

import math
from typing import NamedTuple, Optional

from termclock.shared.models import CELSIUS

MIN_C = -10
MAX_C = 50
TICKS = (-10, 0, 10, 20, 30, 40, 50)
MIN_USABLE_WIDTH = 30
DEFAULT_WIDTH_RATIO = 0.9

BASELINE = "─"
TICK = "┴"
BAR = "━"


class GaugeRows(NamedTuple):
    labels: str
    ticks: str
    bar: str


def round_half_up(value: float) -> int:
    """Round to nearest, halves away from zero (round() rounds to even)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def parse_temp_celsius(text: Optional[str]) -> Optional[int]:
    """Pull a whole-degree reading out of a display string.

    Accepts "29℃", "29°C", "24.5℃", "+5°C" or a bare number.
    """
    if not text:
        return None
    trimmed = text.strip().rstrip("C").rstrip("°").rstrip(CELSIUS).strip()
    try:
        value = float(trimmed)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return round_half_up(value)


def usable_width(width: int, ratio: float = DEFAULT_WIDTH_RATIO) -> int:
    usable = min(round_half_up(width * ratio), width)
    if usable < MIN_USABLE_WIDTH:
        usable = min(MIN_USABLE_WIDTH, width)
    return max(usable, 0)


def position(reading: Optional[float]) -> float:
    """Normalized 0..1 position of a reading on the -10..50 scale."""
    if reading is None:
        return 0.0
    t = (reading - MIN_C) / (MAX_C - MIN_C)
    return min(max(t, 0.0), 1.0)


def _overlay(cells: list, start: int, text: str) -> None:
    for i, ch in enumerate(text):
        if 0 <= start + i < len(cells):
            cells[start + i] = ch


def render_gauge(
    reading: Optional[int],
    width: int,
    ratio: float = DEFAULT_WIDTH_RATIO,
) -> GaugeRows:
    """Render a reading as three rows, centered within width columns.

    Args:
        reading: Whole degrees Celsius, or None when no value resolved.
        width: Columns available.
        ratio: Share of the width the gauge itself uses.
    """
    usable = usable_width(width, ratio)
    pad = " " * (max(width - usable, 0) // 2)
    bar_len = round_half_up(position(reading) * usable)

    ticks = [BASELINE] * usable
    labels = [" "] * usable
    for deg in TICKS:
        idx = round_half_up(position(deg) * usable)
        if idx >= usable:
            continue
        ticks[idx] = TICK
        label = str(deg)
        start = min(max(idx - len(label) // 2, 0), max(usable - len(label), 0))
        _overlay(labels, start, label)

    bar = [BAR if i < bar_len else " " for i in range(usable)]
    value_label = f" {reading}{CELSIUS}" if reading is not None else " --"
    _overlay(bar, min(bar_len, max(usable - len(value_label), 0)), value_label)

    return GaugeRows(
        labels=pad + "".join(labels),
        ticks=pad + "".join(ticks),
        bar=pad + "".join(bar),
    )
