"""Exclusively owned destination buffer reused across encode iterations.

Usage:
    buf = DestinationBuffer(capacity)

    with buf.lease() as view:      # previous contents invalidated
        n = codec.encode(frame, samples, view).unwrap()
        buf.commit(n)

    encoded = buf.snapshot()       # independent copy of the committed bytes

The memoryview handed out by lease() is released when the block exits,
so no caller can hold on to the storage past its iteration. Leases do
not nest.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class DestinationBuffer:
    """Fixed-capacity byte buffer with scoped, single-holder access."""

    __slots__ = ("_storage", "_length", "_leased")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Buffer capacity must be positive, got {capacity}")
        self._storage = bytearray(capacity)
        self._length = 0
        self._leased = False

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def length(self) -> int:
        """Bytes committed by the most recent lease."""
        return self._length

    @property
    def leased(self) -> bool:
        return self._leased

    @contextmanager
    def lease(self) -> Iterator[memoryview]:
        """Hand out the storage for one iteration."""
        if self._leased:
            raise RuntimeError("Destination buffer is already leased")
        self._leased = True
        self._length = 0
        view = memoryview(self._storage)
        try:
            yield view
        finally:
            view.release()
            self._leased = False

    def commit(self, length: int) -> None:
        """Record how many leading bytes the current holder wrote."""
        if not self._leased:
            raise RuntimeError("commit() called outside of a lease")
        if not 0 <= length <= len(self._storage):
            raise ValueError(
                f"Committed length {length} outside buffer of {len(self._storage)} bytes"
            )
        self._length = length

    def snapshot(self) -> bytes:
        """Copy of the committed bytes."""
        if self._leased:
            raise RuntimeError("Cannot snapshot while the buffer is leased")
        return bytes(self._storage[:self._length])
