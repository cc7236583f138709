"""
Event consumer that drains the event buffer into the dependency graph.

Only events of kind ``dependency`` mutate the graph. Events of any other kind
are consumed and counted as processed, but otherwise discarded.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Optional

from engine.events.buffer import EventBuffer
from engine.events.models import DependencyEvent
from engine.topology.graph import DependencyGraph

log = logging.getLogger(__name__)


class EventConsumer:
    def __init__(self, buffer: EventBuffer, graph: DependencyGraph) -> None:
        self._buffer = buffer
        self._graph = graph
        self._processed_event_count = 0

    def consume_event(self) -> Optional[DependencyEvent]:
        """Consume and apply a single event.

        Returns the consumed event, or ``None`` if the buffer was empty.
        """
        event = self._buffer.consume()
        if event is not None:
            self._apply(event)
        return event

    def process_all_events(self) -> int:
        """Drain the buffer synchronously and return how many events this call processed."""
        processed = 0
        while True:
            event = self._buffer.consume()
            if event is None:
                break
            self._apply(event)
            processed += 1
        log.info(
            "Drained %d events (total processed %d, %d services)",
            processed, self._processed_event_count, self._graph.service_count(),
        )
        return processed

    def _apply(self, event: DependencyEvent) -> None:
        if event.is_dependency:
            self._graph.add_dependency(event.source, event.target)
            log.debug("Applied edge %s -> %s", event.source, event.target)
        else:
            log.debug("Skipped event of kind %r", event.kind)
        self._processed_event_count += 1

    def get_processed_event_count(self) -> int:
        return self._processed_event_count

    def has_more_events(self) -> bool:
        return not self._buffer.is_empty()

    def reset_counter(self) -> None:
        self._processed_event_count = 0
