"""
Terminal Monitor for the clock dashboard.
Full-screen terminal interface using Rich: big clock and date on top,
thermometer gauge and todo list below.
"""

import logging
import time
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from termclock.config.settings import Config
from .gauge import parse_temp_celsius, render_gauge, round_half_up
from .glyphs import render_big_time, rendered_width
from .keyboard import CTRL_C, ESC, KeyReader
from .scheduler import RefreshScheduler

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.2  # seconds between redraws
GAUGE_HEIGHT = 4
TODO_WIDTH_RATIO = 0.8
NO_TODOS = "(no todos)"

# Chime: each pulse is a burst of terminal bells
PULSE_SECONDS = 1.0
BELL_STEP = 0.05
PULSE_GAP = 0.2

QUIT_KEYS = {"q", ESC, CTRL_C}
RELOAD_KEY = "r"

WEEKDAYS_CN = ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日")


def format_date_cn(now: datetime) -> str:
    """Date line under the clock, e.g. "03/07/2025 星期五"."""
    return f"{now:%m}/{now:%d}/{now:%Y} {WEEKDAYS_CN[now.weekday()]}"


def fit_scale_x(text: str, scale_x: int, width: int) -> int:
    """Largest horizontal scale <= scale_x at which text fits in width."""
    sx = max(scale_x, 1)
    while sx > 1 and rendered_width(len(text), sx) > width:
        sx -= 1
    return sx


def split_heights(height: int, percent: int) -> Tuple[int, int]:
    """Rows for the clock region and the sidebar."""
    clock = height * percent // 100
    return clock, height - clock


def todo_lines(todos: List[str], width: int) -> List[str]:
    """Todo rows as a left-aligned block centered in 80% of the width."""
    usable = min(round_half_up(width * TODO_WIDTH_RATIO), width)
    pad = " " * (max(width - usable, 0) // 2)
    if not todos:
        return [pad + NO_TODOS]
    return [pad + todo for todo in todos]


class TerminalMonitor:
    """Terminal dashboard driven by a RefreshScheduler."""

    def __init__(
        self,
        config: Config,
        scheduler: RefreshScheduler,
        config_loader: Optional[Callable[[], Config]] = None,
        console: Optional[Console] = None,
    ):
        self.config = config
        self.scheduler = scheduler
        self.config_loader = config_loader
        self.console = console or Console()

    def _create_clock(self, now: datetime, width: int) -> Align:
        """Big time, a gap that grows with the font, then the date."""
        time_str = now.strftime("%H:%M:%S")
        scale_x = fit_scale_x(time_str, self.config.time_scale_x, width)
        rows = render_big_time(time_str, scale_x, self.config.time_scale_y)

        text = Text(justify="center", no_wrap=True, overflow="crop")
        for row in rows:
            text.append(row + "\n", style=f"bold {self.config.time_color}")
        text.append("\n" * ((self.config.time_scale_y + 1) // 2))
        text.append(format_date_cn(now), style=self.config.date_color)

        return Align.center(text, vertical="middle")

    def _create_gauge(self, width: int) -> Text:
        reading = parse_temp_celsius(self.scheduler.temperature_text)
        rows = render_gauge(reading, width)

        text = Text(no_wrap=True, overflow="crop")
        text.append(rows.labels + "\n", style="bright_red")
        text.append(rows.ticks + "\n", style="bright_red")
        text.append(rows.bar, style="bold yellow")
        return text

    def _create_todos(self, width: int) -> Text:
        todos = self.scheduler.todo_lines
        style = self.config.todos_color if todos else ""
        return Text("\n".join(todo_lines(todos, width)), style=style, no_wrap=True, overflow="crop")

    def render(self, now: Optional[datetime] = None) -> Layout:
        """Build the full-screen layout from the current cache."""
        now = now or datetime.now()
        width, height = self.console.size
        clock_height, _ = split_heights(height, self.config.main_window_percent)

        layout = Layout()
        layout.split_column(
            Layout(name="clock", size=clock_height),
            Layout(name="sidebar"),
        )
        layout["sidebar"].split_column(
            Layout(name="temperature", size=GAUGE_HEIGHT),
            Layout(name="todos"),
        )

        layout["clock"].update(self._create_clock(now, width))
        layout["temperature"].update(self._create_gauge(width))
        layout["todos"].update(self._create_todos(width))
        return layout

    def _error_display(self, error_msg: str) -> Panel:
        """Shown in place of the dashboard when rendering fails."""
        return Panel(
            Align.center(Text(f"DISPLAY ERROR\n\n{error_msg}", style="bold red"), vertical="middle"),
            title="termclock",
            style="red",
        )

    def handle_key(self, key: str) -> bool:
        """Act on one key press. Returns False when the dashboard should exit."""
        if key in QUIT_KEYS:
            return False
        if key.lower() == RELOAD_KEY:
            if self.config_loader is not None:
                self.config = self.config_loader()
                self.scheduler.reload(self.config)
            else:
                self.scheduler.request_refresh()
            logger.info("Manual refresh requested")
        return True

    def ring(self, pulses: int) -> None:
        """Ring the hourly chime: one long bell burst per pulse."""
        logger.info(f"Chime: {pulses} pulse(s)")
        for i in range(pulses):
            end = time.monotonic() + PULSE_SECONDS
            while time.monotonic() < end:
                self.console.bell()
                time.sleep(BELL_STEP)
            if i + 1 < pulses:
                time.sleep(PULSE_GAP)

    def update_display(self, live: Live) -> None:
        try:
            live.update(self.render(), refresh=True)
        except Exception as e:
            logger.exception("Display update failed")
            live.update(self._error_display(str(e)), refresh=True)

    def run(self) -> None:
        """Redraw, chime, refresh, then wait for a key until the tick ends."""
        with KeyReader() as keys, Live(
            console=self.console, screen=True, auto_refresh=False, transient=True
        ) as live:
            last_tick = time.monotonic()
            while True:
                self.update_display(live)

                pulses = self.scheduler.check_chime()
                if pulses:
                    self.ring(pulses)

                self.scheduler.poll()

                remaining = TICK_INTERVAL - (time.monotonic() - last_tick)
                key = keys.read_key(remaining)
                if key is not None and not self.handle_key(key):
                    break

                if time.monotonic() - last_tick >= TICK_INTERVAL:
                    last_tick = time.monotonic()
