"""Collect values sent from several producer threads over one channel."""

from __future__ import annotations

import queue
import sys
import threading
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_BATCHES = (
    ("One", "two", "three", "four"),
    ("Five", "Six", "Seven", "eight"),
)

_DONE = object()


def gather(batches: Iterable[Sequence[T]]) -> list[T]:
    """Send each batch from its own thread and return values in arrival order.

    Values from one batch arrive in their original order; batches may interleave.
    """
    channel: queue.Queue = queue.Queue()

    def produce(batch: Sequence[T]) -> None:
        try:
            for item in batch:
                channel.put(item)
        finally:
            channel.put(_DONE)

    producers = [
        threading.Thread(target=produce, args=(list(batch),)) for batch in batches
    ]
    for producer in producers:
        producer.start()

    received: list[T] = []
    remaining = len(producers)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
        else:
            received.append(item)
    for producer in producers:
        producer.join()
    return received


def main(argv=None) -> int:
    """Print every value received from two producer threads."""
    for value in gather(DEFAULT_BATCHES):
        print(f"Received from thread: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())