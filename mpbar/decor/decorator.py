"""Decorator base types, width configuration and statistics.

Decorators render text around a progress bar. Some keep state between
calls, so a decorator should not be shared between bars.
"""

from __future__ import annotations

import dataclasses
import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

from wcwidth import wcswidth, wcwidth

DINDENT_RIGHT = 1
DEXTRA_SPACE = 2
DSYNC_WIDTH = 4
DSYNC_WIDTH_R = DSYNC_WIDTH | DINDENT_RIGHT
DSYNC_SPACE = DSYNC_WIDTH | DEXTRA_SPACE
DSYNC_SPACE_R = DSYNC_WIDTH | DEXTRA_SPACE | DINDENT_RIGHT


class TimeStyle(IntEnum):
    """Ways to render a duration."""

    GO = 0
    HHMMSS = 1
    HHMM = 2
    MMSS = 3


@dataclass
class Statistics:
    """Bar state passed to decorators and fillers."""

    available_width: int = 0
    requested_width: int = 0
    id: int = 0
    total: int = 0
    current: int = 0
    refill: int = 0
    completed: bool = False
    aborted: bool = False


def string_width(text: str) -> int:
    """Display width of ``text`` in terminal cells."""
    width = wcswidth(text)
    if width < 0:
        width = sum(max(wcwidth(ch), 0) for ch in text)
    return width


def _fill_left(text: str, width: int) -> str:
    return " " * max(width - string_width(text), 0) + text


def _fill_right(text: str, width: int) -> str:
    return text + " " * max(width - string_width(text), 0)


class WidthChannel:
    """Two-way hand-off of a width between a decorator and a distributor."""

    def __init__(self) -> None:
        self._up: queue.Queue[int] = queue.Queue()
        self._down: queue.Queue[int] = queue.Queue()

    def exchange(self, width: int) -> int:
        """Offer ``width`` and block until the synchronised width comes back."""
        self._up.put(width)
        return self._down.get()

    def receive(self, drop: Optional[threading.Event] = None) -> Optional[int]:
        """Take an offered width; ``None`` if ``drop`` is set first."""
        if drop is None:
            return self._up.get()
        while True:
            if drop.is_set():
                return None
            try:
                return self._up.get(timeout=0.01)
            except queue.Empty:
                continue

    def reply(self, width: int) -> None:
        """Send the synchronised width back."""
        self._down.put(width)


@dataclass
class WC:
    """Width ``w`` and config bits ``c`` for a decorator."""

    w: int = 0
    c: int = 0
    _fill: Optional[Callable[[str, int], str]] = field(
        default=None, init=False, repr=False, compare=False
    )
    _wsync: Optional[WidthChannel] = field(
        default=None, init=False, repr=False, compare=False
    )

    def init(self) -> "WC":
        """Set up fill direction and, with sync on, a fresh width channel."""
        self._fill = _fill_right if self.c & DINDENT_RIGHT else _fill_left
        if self.c & DSYNC_WIDTH:
            self._wsync = WidthChannel()
        return self

    def format(self, text: str) -> tuple[str, int]:
        """Pad ``text`` as configured; return it with its view width."""
        width = string_width(text)
        if self.w > width:
            width = self.w
        elif self.c & DEXTRA_SPACE:
            width += 1
        if self.c & DSYNC_WIDTH:
            channel, _ = self.sync()
            width = channel.exchange(width)
        fill = self._fill or (_fill_right if self.c & DINDENT_RIGHT else _fill_left)
        return fill(text, width), width

    def sync(self) -> tuple[Optional[WidthChannel], bool]:
        """Return the width channel and whether sync is enabled."""
        enabled = bool(self.c & DSYNC_WIDTH)
        if enabled and self._wsync is None:
            raise RuntimeError(f"{type(self).__name__} is not initialized")
        return self._wsync, enabled


WC_SYNC_WIDTH = WC(c=DSYNC_WIDTH)
WC_SYNC_WIDTH_R = WC(c=DSYNC_WIDTH_R)
WC_SYNC_SPACE = WC(c=DSYNC_SPACE)
WC_SYNC_SPACE_R = WC(c=DSYNC_SPACE_R)


def init_wc(wc: Optional[WC] = None) -> WC:
    """Return an initialised copy of ``wc`` (or of a default WC)."""
    base = dataclasses.replace(wc) if wc is not None else WC()
    return base.init()


class Decorator(ABC):
    """Something that renders a piece of text for a bar."""

    def __init__(self, wc: Optional[WC] = None) -> None:
        self.wc = init_wc(wc)

    @abstractmethod
    def decor(self, stats: Statistics) -> tuple[str, int]:
        """Return the rendered text and its view width."""

    def format(self, text: str) -> tuple[str, int]:
        return self.wc.format(text)

    def sync(self) -> tuple[Optional[WidthChannel], bool]:
        return self.wc.sync()


class FuncDecorator(Decorator):
    """Decorator whose text comes from a function of the statistics."""

    def __init__(self, fn: Callable[[Statistics], str], wc: Optional[WC] = None) -> None:
        super().__init__(wc)
        self.fn = fn

    def decor(self, stats: Statistics) -> tuple[str, int]:
        return self.format(self.fn(stats))


def func_decorator(fn: Callable[[Statistics], str], wc: Optional[WC] = None) -> Decorator:
    """Turn a function of the statistics into a decorator."""
    return FuncDecorator(fn, wc)