"""Width synchronisation of decorator columns across bars."""

from __future__ import annotations

import threading
from typing import Mapping, Optional, Sequence

from mpbar.decor.decorator import WidthChannel


def max_width_distributor(
    column: Sequence[WidthChannel], drop: Optional[threading.Event] = None
) -> None:
    """Collect widths from every channel, then send each the largest."""
    max_width = 0
    for channel in column:
        width = channel.receive(drop)
        if width is None:
            return
        max_width = max(max_width, width)
    for channel in column:
        channel.reply(max_width)


def sync_width(
    matrix: Mapping[int, Sequence[WidthChannel]], drop: Optional[threading.Event] = None
) -> None:
    """Start one distributor thread per column."""
    for column in matrix.values():
        threading.Thread(
            target=max_width_distributor, args=(column, drop), daemon=True
        ).start()