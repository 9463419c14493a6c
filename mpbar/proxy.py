"""Reader and writer wrappers that advance a bar by the bytes they move."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Any, Optional


def _elapsed(start: float) -> timedelta:
    return timedelta(seconds=time.monotonic() - start)


class _Proxy:
    def __init__(self, stream: Any, bar: Any, ewma: bool = False) -> None:
        self._stream = stream
        self.bar = bar
        self.ewma = ewma

    def _advance(self, n: int, start: float) -> None:
        if self.ewma:
            self.bar.ewma_incr_by(n, _elapsed(start))
        else:
            self.bar.incr_by(n)

    def _close_stream(self) -> None:
        closer = getattr(self._stream, "close", None)
        if closer is not None:
            closer()


class ProxyReader(_Proxy):
    """Reader that increments ``bar`` by every byte read."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        start = time.monotonic()
        data = self._stream.read(size)
        self._advance(len(data) if data else 0, start)
        return data

    def readinto(self, buffer: Any) -> Optional[int]:
        start = time.monotonic()
        into = getattr(self._stream, "readinto", None)
        if into is not None:
            n = into(buffer)
        else:
            view = memoryview(buffer).cast("B")
            data = self._stream.read(len(view))
            n = len(data) if data else 0
            view[:n] = data[:n] if n else b""
        self._advance(n or 0, start)
        return n

    def close(self) -> None:
        """Close the wrapped stream if it can be closed."""
        self._close_stream()

    def __enter__(self) -> "ProxyReader":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class ProxyWriter(_Proxy):
    """Writer that increments ``bar`` by every byte written."""

    def writable(self) -> bool:
        return True

    def write(self, data: Any) -> int:
        start = time.monotonic()
        n = self._stream.write(data)
        if n is None:
            n = len(data)
        self._advance(n, start)
        return n

    def flush(self) -> None:
        flusher = getattr(self._stream, "flush", None)
        if flusher is not None:
            flusher()

    def close(self) -> None:
        """Close the wrapped stream if it can be closed."""
        self._close_stream()

    def __enter__(self) -> "ProxyWriter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def new_proxy_reader(reader: Any, bar: Any, has_ewma: bool = False) -> ProxyReader:
    """Wrap ``reader`` so reads advance ``bar``; EWMA updates carry the read time."""
    return ProxyReader(reader, bar, has_ewma)


def new_proxy_writer(writer: Any, bar: Any, has_ewma: bool = False) -> ProxyWriter:
    """Wrap ``writer`` so writes advance ``bar``; EWMA updates carry the write time."""
    return ProxyWriter(writer, bar, has_ewma)