"""Threads sharing a locked list, a bounded channel, and interleaved counting."""

from __future__ import annotations

import queue
import threading
import time
from typing import List

_CLOSED = object()
_CONSUMER_DELAY = 0.1
_COUNT_PAUSE = 0.005


def archer() -> List[int]:
    """Append to a shared list from a worker thread and the caller, then print it."""
    values = [10, 20, 30]
    lock = threading.Lock()
    print(f"v: {values}")

    def push() -> None:
        with lock:
            values.append(10)

    worker = threading.Thread(target=push)
    worker.start()
    with lock:
        values.append(1000)
    worker.join()

    print(f"v: {values}")
    return list(values)


def bounded_channel(capacity: int = 3, num_messages: int = 10) -> List[str]:
    """Send messages through a queue holding at most capacity items; return what arrived."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    channel: queue.Queue = queue.Queue(maxsize=capacity)

    def produce() -> None:
        name = threading.current_thread().name
        for i in range(num_messages):
            message = f"Message {i}"
            channel.put(message)
            print(f"{name}: sent {message}")
        print(f"{name}: done")
        channel.put(_CLOSED)

    producer = threading.Thread(target=produce)
    producer.start()
    time.sleep(_CONSUMER_DELAY)

    received = []
    for message in iter(channel.get, _CLOSED):
        print(f"Main: got {message}")
        received.append(message)
    producer.join()
    return received


def spawn_counts(thread_count: int = 10, main_count: int = 5) -> List[str]:
    """Count in a worker thread and the caller at once; return the lines in printed order."""
    lines: List[str] = []
    lock = threading.Lock()

    def record(line: str) -> None:
        with lock:
            lines.append(line)
            print(line)

    def count() -> None:
        for i in range(thread_count):
            record(f"Count in thread: {i}!")
            time.sleep(_COUNT_PAUSE)

    worker = threading.Thread(target=count)
    worker.start()
    for i in range(main_count):
        record(f"Main thread: {i}")
        time.sleep(_COUNT_PAUSE)
    worker.join()
    return lines