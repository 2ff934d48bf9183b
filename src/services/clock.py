"""Elapsed-time clock for the adapter's timer display. Reads the time source on demand, so no background timer is needed."""

import time
from typing import Callable, Optional

TimeSource = Callable[[], float]


class GameClock:
    def __init__(self, time_source: TimeSource = time.monotonic) -> None:
        self._time_source = time_source
        self._started_at: Optional[float] = None
        self._stopped_elapsed = 0.0

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """(Re)start counting from zero"""
        self._stopped_elapsed = 0.0
        self._started_at = self._time_source()

    def stop(self) -> None:
        """Freeze the elapsed time (game over / stop)"""
        if self._started_at is None:
            return
        self._stopped_elapsed = self._time_source() - self._started_at
        self._started_at = None

    def resume(self) -> None:
        """Continue counting from the frozen elapsed time"""
        if self._started_at is not None:
            return
        self._started_at = self._time_source() - self._stopped_elapsed

    def reset(self) -> None:
        self._started_at = None
        self._stopped_elapsed = 0.0

    def elapsed_seconds(self) -> int:
        if self._started_at is None:
            return int(self._stopped_elapsed)
        return int(self._time_source() - self._started_at)

    def format_elapsed(self) -> str:
        """MM:SS (minutes keep counting past 99)"""
        minutes, seconds = divmod(self.elapsed_seconds(), 60)
        return f"{minutes:02d}:{seconds:02d}"
