"""
Record-change broadcast.

Every write to the record store publishes a `RecordChanged` event naming
what changed, never the new contents: subscribers re-read the store.
Delivery is best-effort. A subscriber that raises is logged and the
remaining subscribers still run.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordChanged:
    kind: str
    owner_id: str


Listener = Callable[[RecordChanged], None]


class EventBus:
    """In-process publish/subscribe bus for record-change events."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener`; returns a function that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: RecordChanged) -> int:
        """Deliver `event` to every current subscriber. Returns how many succeeded."""
        with self._lock:
            listeners = list(self._listeners)

        delivered = 0
        for listener in listeners:
            try:
                listener(event)
                delivered += 1
            except Exception:
                logger.exception("Listener %r failed on %s/%s", listener, event.kind, event.owner_id)
        return delivered


_bus = EventBus()


def get_event_bus() -> EventBus:
    """Process-wide bus shared by the stores the API creates."""
    return _bus
