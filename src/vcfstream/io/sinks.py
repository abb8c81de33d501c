"""
Output sinks for the stream driver.

The driver pushes each result into a sink before reading the next line and
closes every sink once the input is exhausted.
"""

import queue
from collections.abc import Iterator
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")

_END_OF_STREAM = object()


class Sink(Protocol[T]):
    """Destination for parse results."""

    def put(self, item: T) -> None: ...

    def close(self) -> None: ...


class ListSink(Generic[T]):
    """Collects results in memory."""

    def __init__(self):
        self.items: list[T] = []
        self.closed = False

    def put(self, item: T) -> None:
        if self.closed:
            raise RuntimeError("put on closed sink")
        self.items.append(item)

    def close(self) -> None:
        self.closed = True

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class QueueSink(Generic[T]):
    """
    Bounded, thread-safe sink.

    ``put`` blocks while the queue is full. ``close`` enqueues an end marker;
    iterating the sink yields items until that marker is reached.
    """

    def __init__(self, maxsize: int = 0):
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: T, timeout: float | None = None) -> None:
        if self._closed:
            raise RuntimeError("put on closed sink")
        self._queue.put(item, block=True, timeout=timeout)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put(_END_OF_STREAM)

    def get(self, timeout: float | None = None) -> T:
        """Next item; raises StopIteration once the sink is closed and drained."""
        item = self._queue.get(block=True, timeout=timeout)
        if item is _END_OF_STREAM:
            # Keep the marker visible to any other consumer
            self._queue.put(_END_OF_STREAM)
            raise StopIteration
        return item

    def qsize(self) -> int:
        return self._queue.qsize()

    def full(self) -> bool:
        return self._queue.full()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except StopIteration:
                return
