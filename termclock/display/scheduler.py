"""Refresh scheduling for cached provider values and the hourly chime."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Generic, List, Optional, TypeVar

from termclock.config.settings import TODO_REFRESH_INTERVAL, Config
from termclock.providers.base import ProviderChain

logger = logging.getLogger(__name__)

T = TypeVar("T")

TEMPERATURE_SENTINEL = "--"


class CachedReading(Generic[T]):
    """A provider chain's last result and when it was fetched.

    Never fetched counts as stale. Any completed attempt, including one where
    the whole chain failed, restarts the interval, so a dead upstream is
    retried once per interval rather than on every tick.
    """

    def __init__(self, name: str, chain: ProviderChain[T], interval: float):
        self.name = name
        self.chain = chain
        self.interval = interval
        self.value: Optional[T] = chain.default
        self.last_fetch: Optional[float] = None

    def is_stale(self, now: float) -> bool:
        if self.last_fetch is None:
            return True
        return now - self.last_fetch >= self.interval

    def refresh(self, config: Config, now: float) -> Optional[T]:
        self.value = self.chain.resolve(config)
        self.last_fetch = now
        return self.value

    def invalidate(self) -> None:
        self.last_fetch = None


@dataclass
class ChimeState:
    """Hour the chime last fired, so it fires at most once per hour."""

    last_hour: Optional[int] = None

    def check(self, now: datetime, enabled: bool = True) -> int:
        """Return the number of pulses to ring now (0 when not due).

        Due at minute 0, second 0 of an hour not yet chimed: two pulses at
        noon, one otherwise. The tick runs several times per second, so
        second 0 is seen more than once; the recorded hour stops repeats.
        """
        if not enabled or now.minute != 0 or now.second != 0:
            return 0
        if self.last_hour == now.hour:
            return 0
        self.last_hour = now.hour
        return 2 if now.hour == 12 else 1


class RefreshScheduler:
    """Owns the cached temperature and todo values.

    The display loop calls poll() every tick and reads the cached values;
    only poll() and request_refresh() change them.
    """

    def __init__(
        self,
        config: Config,
        temperature_chain: ProviderChain[str],
        todo_chain: ProviderChain[List[str]],
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config
        self.clock = clock
        self.temperature: CachedReading[str] = CachedReading(
            "temperature", temperature_chain, config.temp_refresh_interval
        )
        self.todos: CachedReading[List[str]] = CachedReading(
            "todos", todo_chain, TODO_REFRESH_INTERVAL
        )
        self.chime = ChimeState()

    @property
    def readings(self) -> List[CachedReading]:
        return [self.temperature, self.todos]

    def poll(self, now: Optional[float] = None) -> List[str]:
        """Refresh every stale value.

        Returns:
            Names of the values that were refreshed.
        """
        if now is None:
            now = self.clock()
        refreshed = []
        for reading in self.readings:
            if reading.is_stale(now):
                reading.refresh(self.config, now)
                refreshed.append(reading.name)
        if refreshed:
            logger.debug(f"Refreshed {', '.join(refreshed)}")
        return refreshed

    def request_refresh(self) -> None:
        """Mark every value stale so the next poll fetches it."""
        for reading in self.readings:
            reading.invalidate()

    def reload(self, config: Config) -> None:
        """Swap in a new settings snapshot and refetch everything."""
        self.config = config
        self.temperature.interval = config.temp_refresh_interval
        self.request_refresh()

    def check_chime(self, now: Optional[datetime] = None) -> int:
        return self.chime.check(now or datetime.now(), self.config.chime_enabled)

    @property
    def temperature_text(self) -> str:
        return self.temperature.value or TEMPERATURE_SENTINEL

    @property
    def todo_lines(self) -> List[str]:
        return self.todos.value or []
