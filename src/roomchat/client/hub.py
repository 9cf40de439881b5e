from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable

log = logging.getLogger(__name__)

FrameCallback = Callable[[str], object]


@dataclass(frozen=True)
class SubscriptionHandle:
    id: int


class EventBus:
    """In-process fan-out of inbound frames to every subscribed view."""

    def __init__(self) -> None:
        self._subscribers: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: FrameCallback) -> SubscriptionHandle:
        handle = SubscriptionHandle(next(self._ids))
        self._subscribers[handle.id] = callback
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        self._subscribers.pop(handle.id, None)

    def publish(self, frame: str) -> None:
        # Snapshot so a callback may unsubscribe itself mid-delivery.
        for sid, callback in list(self._subscribers.items()):
            try:
                callback(frame)
            except Exception:
                log.exception("subscriber %d failed on frame", sid)
