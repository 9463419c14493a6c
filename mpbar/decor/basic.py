"""Name, spinner and percentage decorators."""

from __future__ import annotations

import itertools
from typing import Optional, Sequence

from mpbar import calc
from mpbar.decor.decorator import WC, Decorator, Statistics, func_decorator
from mpbar.decor.formatting import PercentageValue, sprintf

DEFAULT_SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

_UINT64 = (1 << 64) - 1


def name(text: str, wc: Optional[WC] = None) -> Decorator:
    """Decorator that always shows ``text``."""
    return func_decorator(lambda _stats: text, wc)


def spinner(frames: Optional[Sequence[str]] = None, wc: Optional[WC] = None) -> Decorator:
    """Decorator cycling through ``frames`` (a default set if empty) on each render."""
    cycle = itertools.cycle(tuple(frames) if frames else DEFAULT_SPINNER_FRAMES)
    return func_decorator(lambda _stats: next(cycle), wc)


def new_percentage(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Percentage decorator with a printf-style format (default ``"% d"``)."""
    fmt = fmt or "% d"

    def render(stats: Statistics) -> str:
        value = calc.percentage(stats.total & _UINT64, stats.current & _UINT64, 100)
        return sprintf(fmt, PercentageValue(value))

    return func_decorator(render, wc)


def percentage(wc: Optional[WC] = None) -> Decorator:
    """Percentage decorator with the default format."""
    return new_percentage("% d", wc)