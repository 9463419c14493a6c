"""Speed decorators based on a moving average or the average since start."""

from __future__ import annotations

import math
import time
from datetime import timedelta
from typing import Any, Callable, Optional

from mpbar.decor.decorator import WC, Decorator, Statistics
from mpbar.decor.formatting import SizeB1000, SizeB1024, fmt_as_speed, sprintf
from mpbar.decor.moving_average import MovingAverage, new_moving_average

_MICROSECOND = timedelta(microseconds=1)


def _to_ns(duration: timedelta) -> int:
    return duration // _MICROSECOND * 1000


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def choose_speed_producer(unit: Any, fmt: str = "") -> Callable[[float], str]:
    """Return the function rendering a speed in bytes (or items) per second."""
    if isinstance(unit, SizeB1024):
        fmt = fmt or "% d"
        return lambda speed: sprintf(fmt, fmt_as_speed(SizeB1024(_round_half_away(speed))))
    if isinstance(unit, SizeB1000):
        fmt = fmt or "% d"
        return lambda speed: sprintf(fmt, fmt_as_speed(SizeB1000(_round_half_away(speed))))
    fmt = fmt or "%f"
    return lambda speed: sprintf(fmt, speed)


class MovingAverageSpeed(Decorator):
    """Speed from a moving average of per-byte durations."""

    def __init__(
        self, unit: Any, fmt: str, average: MovingAverage, wc: Optional[WC] = None
    ) -> None:
        super().__init__(wc)
        self.producer = choose_speed_producer(unit, fmt)
        self.average = average
        self._pending_ns = 0

    def decor(self, stats: Statistics) -> tuple[str, int]:
        # some averages report zero until they have seen enough samples
        value = self.average.value()
        text = self.producer(1e9 / value) if value != 0 else self.producer(0)
        return self.format(text)

    def ewma_update(self, n: int, duration: timedelta) -> None:
        """Record that ``n`` bytes took ``duration``."""
        spent = self._pending_ns + _to_ns(duration)
        if n <= 0:
            self._pending_ns = spent
            return
        per_byte = spent / n
        if not math.isfinite(per_byte):
            self._pending_ns = spent
            return
        self._pending_ns = 0
        self.average.add(per_byte)


class AverageSpeed(Decorator):
    """Speed averaged over the time since ``start``."""

    def __init__(
        self, unit: Any, fmt: str, start: Optional[float] = None, wc: Optional[WC] = None
    ) -> None:
        super().__init__(wc)
        self.start = time.monotonic() if start is None else start
        self.producer = choose_speed_producer(unit, fmt)
        self.message = ""

    def decor(self, stats: Statistics) -> tuple[str, int]:
        if not stats.completed:
            spent = time.monotonic() - self.start
            speed = stats.current / spent if spent > 0 else 0.0
            self.message = self.producer(speed)
        return self.format(self.message)

    def average_adjust(self, start: float) -> None:
        """Move the start time, for resumed tasks."""
        self.start = start


def moving_average_speed(
    unit: Any, fmt: str, average: MovingAverage, wc: Optional[WC] = None
) -> Decorator:
    """Speed decorator driven by ``average``; feed it through ``ewma_update``."""
    return MovingAverageSpeed(unit, fmt, average, wc)


def ewma_speed(unit: Any, fmt: str = "", age: float = 0, wc: Optional[WC] = None) -> Decorator:
    """EWMA based speed decorator."""
    average = new_moving_average() if age == 0 else new_moving_average(age)
    return moving_average_speed(unit, fmt, average, wc)


def new_average_speed(
    unit: Any, fmt: str = "", start: Optional[float] = None, wc: Optional[WC] = None
) -> Decorator:
    """Average speed from a given :func:`time.monotonic` start."""
    return AverageSpeed(unit, fmt, start, wc)


def average_speed(unit: Any, fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Average speed starting now."""
    return new_average_speed(unit, fmt, time.monotonic(), wc)