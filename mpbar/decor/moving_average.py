"""Moving averages used by EWMA based decorators."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional

AVG_METRIC_AGE = 30.0
DECAY = 2 / (AVG_METRIC_AGE + 1)
WARMUP_SAMPLES = 10


class MovingAverage(ABC):
    """A running average of float samples."""

    @abstractmethod
    def add(self, value: float) -> None:
        """Add a sample."""

    @abstractmethod
    def value(self) -> float:
        """Return the current average."""

    @abstractmethod
    def set(self, value: float) -> None:
        """Force the average to ``value``."""


class SimpleEWMA(MovingAverage):
    """Exponentially weighted average with the default age of 30 samples."""

    def __init__(self) -> None:
        self._value = 0.0

    def add(self, value: float) -> None:
        # a zero value stands for "no sample seen yet"
        if self._value == 0:
            self._value = value
        else:
            self._value = value * DECAY + self._value * (1 - DECAY)

    def value(self) -> float:
        return self._value

    def set(self, value: float) -> None:
        self._value = value


class VariableEWMA(MovingAverage):
    """Exponentially weighted average with a custom age and a warm-up period."""

    def __init__(self, age: float) -> None:
        self.decay = 2 / (age + 1)
        self._value = 0.0
        self._count = 0

    def add(self, value: float) -> None:
        if self._count < WARMUP_SAMPLES:
            self._count += 1
            self._value += value
        elif self._count == WARMUP_SAMPLES:
            self._count += 1
            self._value /= WARMUP_SAMPLES
            self._value = value * self.decay + self._value * (1 - self.decay)
        else:
            self._value = value * self.decay + self._value * (1 - self.decay)

    def value(self) -> float:
        if self._count <= WARMUP_SAMPLES:
            return 0.0
        return self._value

    def set(self, value: float) -> None:
        self._value = value
        if self._count <= WARMUP_SAMPLES:
            self._count = WARMUP_SAMPLES + 1


class MedianWindow(MovingAverage):
    """Median of the last three samples."""

    def __init__(self) -> None:
        self._window = [0.0, 0.0, 0.0]

    def add(self, value: float) -> None:
        self._window = [*self._window[1:], value]

    def value(self) -> float:
        return sorted(self._window)[1]

    def set(self, value: float) -> None:
        self._window = [value] * len(self._window)


class ThreadSafeMovingAverage(MovingAverage):
    """Guards another moving average with a lock."""

    def __init__(self, average: MovingAverage) -> None:
        self.average = average
        self._lock = threading.Lock()

    def add(self, value: float) -> None:
        with self._lock:
            self.average.add(value)

    def value(self) -> float:
        with self._lock:
            return self.average.value()

    def set(self, value: float) -> None:
        with self._lock:
            self.average.set(value)


def new_moving_average(age: Optional[float] = None) -> MovingAverage:
    """Return an EWMA; the default age gives a :class:`SimpleEWMA`."""
    if age is None or age == AVG_METRIC_AGE:
        return SimpleEWMA()
    return VariableEWMA(age)


def new_median() -> MovingAverage:
    """Return a median of the last three samples."""
    return MedianWindow()


def new_thread_safe_moving_average(average: MovingAverage) -> MovingAverage:
    """Wrap ``average`` so it can be used from several threads."""
    if isinstance(average, ThreadSafeMovingAverage):
        return average
    return ThreadSafeMovingAverage(average)