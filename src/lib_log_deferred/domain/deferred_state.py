"""Shared state of a deferred logger factory.

Purpose
-------
Hold everything a deferred facade needs until a backend is bound: the handles
still waiting for a real logger, the log calls buffered in global order, and
the remaining buffer capacity.

Contents
--------
* :class:`DeferredState` with capacity accounting and take-and-clear helpers.

System Role
-----------
One instance is owned by each :class:`lib_log_deferred.application.deferred.DeferredLoggerFactory`
and shared by reference with every buffering logger it hands out. The object
is not thread-safe; each worker owns its own facade.
"""

from __future__ import annotations

from typing import Any, Iterator

from .records import BufferedRecord, PendingLogger


class DeferredState:
    """Capacity counter plus ordered pending handles and buffered records.

    >>> state = DeferredState(capacity=2)
    >>> state.consume()
    1
    >>> state.consume()
    0
    >>> state.consume()
    0
    """

    def __init__(self, *, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._remaining = capacity
        self._records: list[BufferedRecord] = []
        self._pending: list[PendingLogger] = []
        self._fused = False

    @property
    def capacity(self) -> int:
        """Return the configured buffer size."""

        return self._capacity

    @property
    def remaining(self) -> int:
        """Return how many more calls may be consumed before fusing."""

        return self._remaining

    @property
    def fused(self) -> bool:
        """Return ``True`` once the buffer ran out before a backend was bound."""

        return self._fused

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def consume(self) -> int:
        """Use up one unit of capacity and return what is left.

        The counter never goes below zero.
        """
        if self._remaining > 0:
            self._remaining -= 1
        return self._remaining

    def register(self, logger: Any, label: str) -> None:
        """Remember ``logger`` so it can be rewired once a backend exists."""
        self._pending.append(PendingLogger(logger=logger, label=label))

    def append(self, record: BufferedRecord) -> None:
        """Buffer ``record`` after every previously buffered record."""
        self._records.append(record)

    def fuse(self) -> None:
        """Drop all buffered records and stop accepting new ones for good."""
        self._fused = True
        self._remaining = 0
        self._records.clear()

    def take_pending(self) -> list[PendingLogger]:
        """Return the pending handles in creation order and forget them."""
        pending = self._pending[:]
        self._pending.clear()
        return pending

    def take_records(self) -> list[BufferedRecord]:
        """Return the buffered records in insertion order and forget them."""
        records = self._records[:]
        self._records.clear()
        return records

    def __iter__(self) -> Iterator[BufferedRecord]:
        """Iterate over buffered records from oldest to newest."""
        return iter(self._records)

    def __len__(self) -> int:
        """Return the number of buffered records."""
        return len(self._records)


__all__ = ["DeferredState"]
