from __future__ import annotations

import logging

from engine.events.buffer import EventBuffer
from engine.events.models import DependencyEvent

log = logging.getLogger(__name__)


class EventPublisher:
    def __init__(self, buffer: EventBuffer) -> None:
        self._buffer = buffer

    def publish_dependency_event(self, source: str, target: str, latency_ms: int) -> DependencyEvent:
        event = DependencyEvent.dependency(source, target, latency_ms)
        self.publish_event(event)
        return event

    def publish_event(self, event: DependencyEvent) -> None:
        self._buffer.publish(event)
        log.debug("Published %s (queue size %d)", event, self._buffer.size())

    def get_queue_size(self) -> int:
        return self._buffer.size()

    def is_queue_empty(self) -> bool:
        return self._buffer.is_empty()
