"""Counter decorators showing current, total or remaining amounts."""

from __future__ import annotations

from typing import Any, Callable, Optional

from mpbar.decor.decorator import WC, Decorator, Statistics, func_decorator
from mpbar.decor.formatting import SizeB1000, SizeB1024, sprintf

_Getter = Callable[[Statistics], int]


def _build(
    unit: Any,
    fmt: str,
    unit_default: str,
    plain_default: str,
    getters: tuple[_Getter, ...],
    wc: Optional[WC],
) -> Decorator:
    kind: Optional[type]
    if isinstance(unit, SizeB1024):
        kind, fmt = SizeB1024, fmt or unit_default
    elif isinstance(unit, SizeB1000):
        kind, fmt = SizeB1000, fmt or unit_default
    else:
        kind, fmt = None, fmt or plain_default

    def render(stats: Statistics) -> str:
        values = [getter(stats) for getter in getters]
        if kind is not None:
            values = [kind(v) for v in values]
        return sprintf(fmt, *values)

    return func_decorator(render, wc)


def _current(stats: Statistics) -> int:
    return stats.current


def _total(stats: Statistics) -> int:
    return stats.total


def _remaining(stats: Statistics) -> int:
    return stats.total - stats.current


def counters(unit: Any = 0, pair_fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Current and total, with ``unit`` one of 0, ``SizeB1024(0)``, ``SizeB1000(0)``."""
    return _build(unit, pair_fmt, "% d / % d", "%d / %d", (_current, _total), wc)


def counters_no_unit(pair_fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return counters(0, pair_fmt, wc)


def counters_kibibyte(pair_fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return counters(SizeB1024(0), pair_fmt, wc)


def counters_kilobyte(pair_fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return counters(SizeB1000(0), pair_fmt, wc)


def total(unit: Any = 0, fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Total amount, with unit adjustment."""
    return _build(unit, fmt, "% d", "%d", (_total,), wc)


def total_no_unit(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return total(0, fmt, wc)


def total_kibibyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return total(SizeB1024(0), fmt, wc)


def total_kilobyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return total(SizeB1000(0), fmt, wc)


def current(unit: Any = 0, fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Current amount, with unit adjustment."""
    return _build(unit, fmt, "% d", "%d", (_current,), wc)


def current_no_unit(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return current(0, fmt, wc)


def current_kibibyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return current(SizeB1024(0), fmt, wc)


def current_kilobyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return current(SizeB1000(0), fmt, wc)


def inverted_current(unit: Any = 0, fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    """Remaining amount (total minus current), with unit adjustment."""
    return _build(unit, fmt, "% d", "%d", (_remaining,), wc)


def inverted_current_no_unit(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return inverted_current(0, fmt, wc)


def inverted_current_kibibyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return inverted_current(SizeB1024(0), fmt, wc)


def inverted_current_kilobyte(fmt: str = "", wc: Optional[WC] = None) -> Decorator:
    return inverted_current(SizeB1000(0), fmt, wc)