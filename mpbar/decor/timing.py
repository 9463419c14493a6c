"""Elapsed time and ETA decorators, time formatting and normalizers."""

from __future__ import annotations

import math
import time
from datetime import timedelta
from typing import Callable, Optional

from mpbar.decor.decorator import WC, Decorator, Statistics, TimeStyle, func_decorator
from mpbar.decor.moving_average import MovingAverage, new_median, new_moving_average

TimeNormalizer = Callable[[timedelta], timedelta]

_SECOND = 10**9
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_MICROSECOND = timedelta(microseconds=1)


def _to_ns(duration: timedelta) -> int:
    return duration // _MICROSECOND * 1000


def _from_ns(ns: int) -> timedelta:
    return timedelta(microseconds=_quo(ns, 1000))


def _quo(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def _rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _quo(a, b)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _duration_string(ns: int) -> str:
    seconds = _quo(ns, _SECOND)
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def _parts(ns: int) -> tuple[int, int, int]:
    hours = _rem(_quo(ns, _HOUR), 60)
    minutes = _rem(_quo(ns, _MINUTE), 60)
    seconds = _rem(_quo(ns, _SECOND), 60)
    return hours, minutes, seconds


def _hhmmss(remaining: timedelta) -> str:
    hours, minutes, seconds = _parts(_to_ns(remaining))
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _hhmm(remaining: timedelta) -> str:
    hours, minutes, _ = _parts(_to_ns(remaining))
    return f"{hours:02d}:{minutes:02d}"


def _mmss(remaining: timedelta) -> str:
    hours, minutes, seconds = _parts(_to_ns(remaining))
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def _go_style(remaining: timedelta) -> str:
    return _duration_string(_to_ns(remaining))


def choose_time_producer(style: TimeStyle) -> Callable[[timedelta], str]:
    """Return the function rendering a duration in ``style``."""
    if style == TimeStyle.HHMMSS:
        return _hhmmss
    if style == TimeStyle.HHMM:
        return _hhmm
    if style == TimeStyle.MMSS:
        return _mmss
    return _go_style


def new_elapsed(
    style: TimeStyle, start: Optional[float] = None, wc: Optional[WC] = None
) -> Decorator:
    """Elapsed time since ``start`` (a :func:`time.monotonic` reading)."""
    begin = time.monotonic() if start is None else start
    producer = choose_time_producer(style)
    message = ""

    def render(stats: Statistics) -> str:
        nonlocal message
        if not stats.completed and not stats.aborted:
            message = producer(timedelta(seconds=time.monotonic() - begin))
        return message

    return func_decorator(render, wc)


def elapsed(style: TimeStyle, wc: Optional[WC] = None) -> Decorator:
    """Elapsed time since now."""
    return new_elapsed(style, time.monotonic(), wc)


class MovingAverageETA(Decorator):
    """ETA computed from a moving average of per-item durations."""

    def __init__(
        self,
        style: TimeStyle,
        average: MovingAverage,
        normalizer: Optional[TimeNormalizer] = None,
        wc: Optional[WC] = None,
    ) -> None:
        super().__init__(wc)
        self.producer = choose_time_producer(style)
        self.average = average
        self.normalizer = normalizer
        self._pending_ns = 0

    def decor(self, stats: Statistics) -> tuple[str, int]:
        per_item = _round_half_away(self.average.value())
        remaining = _from_ns((stats.total - stats.current) * per_item)
        if self.normalizer is not None:
            remaining = self.normalizer(remaining)
        return self.format(self.producer(remaining))

    def ewma_update(self, n: int, duration: timedelta) -> None:
        """Record that ``n`` items took ``duration``."""
        spent = self._pending_ns + _to_ns(duration)
        if n <= 0:
            self._pending_ns = spent
            return
        per_item = spent / n
        if not math.isfinite(per_item):
            self._pending_ns = spent
            return
        self._pending_ns = 0
        self.average.add(per_item)


class AverageETA(Decorator):
    """ETA computed from the average speed since ``start``."""

    def __init__(
        self,
        style: TimeStyle,
        start: Optional[float] = None,
        normalizer: Optional[TimeNormalizer] = None,
        wc: Optional[WC] = None,
    ) -> None:
        super().__init__(wc)
        self.start = time.monotonic() if start is None else start
        self.normalizer = normalizer
        self.producer = choose_time_producer(style)

    def decor(self, stats: Statistics) -> tuple[str, int]:
        remaining = timedelta(0)
        if stats.current != 0:
            spent_ns = (time.monotonic() - self.start) * 1e9
            per_item = _round_half_away(spent_ns / stats.current)
            remaining = _from_ns((stats.total - stats.current) * per_item)
            if self.normalizer is not None:
                remaining = self.normalizer(remaining)
        return self.format(self.producer(remaining))

    def average_adjust(self, start: float) -> None:
        """Move the start time, for resumed tasks."""
        self.start = start


def moving_average_eta(
    style: TimeStyle,
    average: Optional[MovingAverage] = None,
    normalizer: Optional[TimeNormalizer] = None,
    wc: Optional[WC] = None,
) -> Decorator:
    """ETA based on ``average``; a three-sample median when none is given."""
    if average is None:
        average = new_median()
    return MovingAverageETA(style, average, normalizer, wc)


def ewma_normalized_eta(
    style: TimeStyle,
    age: float = 0,
    normalizer: Optional[TimeNormalizer] = None,
    wc: Optional[WC] = None,
) -> Decorator:
    """EWMA based ETA with a normalizer."""
    average = new_moving_average() if age == 0 else new_moving_average(age)
    return moving_average_eta(style, average, normalizer, wc)


def ewma_eta(style: TimeStyle, age: float = 0, wc: Optional[WC] = None) -> Decorator:
    """EWMA based ETA; feed it through ``ewma_update``."""
    return ewma_normalized_eta(style, age, None, wc)


def new_average_eta(
    style: TimeStyle,
    start: Optional[float] = None,
    normalizer: Optional[TimeNormalizer] = None,
    wc: Optional[WC] = None,
) -> Decorator:
    """Average ETA from a given :func:`time.monotonic` start."""
    return AverageETA(style, start, normalizer, wc)


def average_eta(style: TimeStyle, wc: Optional[WC] = None) -> Decorator:
    """Average ETA starting now."""
    return new_average_eta(style, time.monotonic(), None, wc)


def max_tolerate_time_normalizer(max_tolerate: timedelta) -> TimeNormalizer:
    """Keep counting down unless the estimate jumps by more than ``max_tolerate``."""
    normalized = timedelta(0)
    last_call = time.monotonic()

    def normalize(remaining: timedelta) -> timedelta:
        nonlocal normalized, last_call
        diff = normalized - remaining
        if diff <= timedelta(0) or diff > max_tolerate or remaining < timedelta(minutes=1):
            normalized = remaining
            last_call = time.monotonic()
            return remaining
        now = time.monotonic()
        normalized -= timedelta(seconds=now - last_call)
        last_call = now
        if normalized > timedelta(0):
            return normalized
        return remaining

    return normalize


def fixed_interval_time_normalizer(upd_interval: int) -> TimeNormalizer:
    """Take a fresh estimate only every ``upd_interval`` calls, counting down between."""
    normalized = timedelta(0)
    last_call = time.monotonic()
    count = 0

    def normalize(remaining: timedelta) -> timedelta:
        nonlocal normalized, last_call, count
        if count == 0 or remaining < timedelta(minutes=1):
            count = upd_interval
            normalized = remaining
            last_call = time.monotonic()
            return remaining
        count -= 1
        now = time.monotonic()
        normalized -= timedelta(seconds=now - last_call)
        last_call = now
        if normalized > timedelta(0):
            return normalized
        return remaining

    return normalize