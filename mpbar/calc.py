"""Percentage and width helpers shared by bars and decorators."""

from __future__ import annotations

import math


def percentage(total: int, current: int, width: int) -> float:
    """Return the share of ``width`` that ``current`` covers out of ``total``."""
    if total == 0:
        return 0.0
    if current >= total:
        return float(width)
    return float(width * current) / float(total)


def percentage_round(total: int, current: int, width: int) -> float:
    """Like :func:`percentage`, rounded half away from zero; negatives give 0."""
    if total < 0 or current < 0:
        return 0.0
    return float(math.floor(percentage(total, current, width) + 0.5))


def check_requested_width(requested: int, available: int) -> int:
    """Return ``requested`` unless it is below 1 or wider than ``available``."""
    if requested < 1 or requested > available:
        return available
    return requested