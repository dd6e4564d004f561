"""EventBus - in-process pub/sub for game events.

The engine publishes transitions (shots, kills, wave clears, game over) and
the terminal front end subscribes to turn them into log lines and HUD
messages.  Subscribers may pass a set of event types to receive only those;
with no filter every event is delivered.

Each subscriber gets a bounded queue.  When it fills up the oldest message is
dropped so the newest state change always gets through.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable

DEFAULT_QUEUE_SIZE = 256


class EventBus:
    """Pub/sub with per-subscriber type filters and drop-oldest overflow."""

    def __init__(self, maxsize: int = DEFAULT_QUEUE_SIZE) -> None:
        self._lock = threading.Lock()
        self._maxsize = maxsize
        self._subscribers: list[tuple[queue.Queue, frozenset[str] | None]] = []

    def subscribe(self, event_types: Iterable[str] | str | None = None) -> queue.Queue:
        """Subscribe to events.  Returns the Queue that receives them."""
        if isinstance(event_types, str):
            event_types = [event_types]
        wanted = frozenset(event_types) if event_types is not None else None
        q: queue.Queue = queue.Queue(maxsize=self._maxsize)
        with self._lock:
            self._subscribers.append((q, wanted))
        return q

    def unsubscribe(self, q: queue.Queue) -> None:
        with self._lock:
            self._subscribers = [(sq, w) for sq, w in self._subscribers if sq is not q]

    def publish(self, event_type: str, data: dict | None = None) -> None:
        msg = {"type": event_type}
        if data is not None:
            msg["data"] = data
        with self._lock:
            for q, wanted in self._subscribers:
                if wanted is not None and event_type not in wanted:
                    continue
                self._put_latest(q, msg)

    @staticmethod
    def _put_latest(q: queue.Queue, msg: dict) -> None:
        try:
            q.put_nowait(msg)
        except queue.Full:
            try:
                q.get_nowait()
            except queue.Empty:
                pass
            q.put_nowait(msg)

    @staticmethod
    def drain(q: queue.Queue) -> list[dict]:
        """Pop every message currently waiting on *q*."""
        msgs: list[dict] = []
        while True:
            try:
                msgs.append(q.get_nowait())
            except queue.Empty:
                return msgs
