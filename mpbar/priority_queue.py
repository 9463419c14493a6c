"""Binary heap of bars ordered by priority, highest first."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List


class PriorityQueue:
    """Max-heap on ``item.priority`` that keeps ``item.index`` up to date.

    Items need writable ``priority`` and ``index`` attributes. A popped
    item has its index set to -1.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = list(items)
        for position, item in enumerate(self._items):
            item.index = position
        size = len(self._items)
        for position in reversed(range(size // 2)):
            self._down(position, size)

    def _less(self, i: int, j: int) -> bool:
        # greater priority pops first
        return self._items[i].priority > self._items[j].priority

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].index = i
        items[j].index = j

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, size: int) -> bool:
        i = start
        while True:
            left = 2 * i + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start

    def push(self, item: Any) -> None:
        """Add ``item`` to the queue."""
        item.index = len(self._items)
        self._items.append(item)
        self._up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the item with the greatest priority."""
        if not self._items:
            raise IndexError("pop from empty priority queue")
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        item = self._items.pop()
        item.index = -1
        return item

    def fix(self, index: int) -> None:
        """Restore heap order after the priority of the item at ``index`` changed."""
        if not 0 <= index < len(self._items):
            raise IndexError("priority queue index out of range")
        if not self._down(index, len(self._items)):
            self._up(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the items in heap (not priority) order."""
        return iter(list(self._items))