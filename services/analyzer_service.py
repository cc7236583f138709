"""
Facade coordinating the event buffer, the dependency graph, and the ingestion pipeline.

Adapters (CLI, interactive shell, HTTP routes) receive an explicitly
constructed :class:`DependencyAnalyzerService` instead of reaching for a
shared global instance.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Set

from engine.events import DependencyEvent, EventBuffer, EventPublisher
from engine.ingestion import EventConsumer
from engine.topology import DependencyGraph

log = logging.getLogger(__name__)


class DependencyAnalyzerService:
    def __init__(
        self,
        buffer: Optional[EventBuffer] = None,
        graph: Optional[DependencyGraph] = None,
    ) -> None:
        self._buffer = buffer if buffer is not None else EventBuffer()
        self._graph = graph if graph is not None else DependencyGraph()
        self._publisher = EventPublisher(self._buffer)
        self._consumer = EventConsumer(self._buffer, self._graph)

    def publish_dependency_event(self, source: str, target: str, latency_ms: int) -> DependencyEvent:
        return self._publisher.publish_dependency_event(source, target, latency_ms)

    def publish_event(self, event: DependencyEvent) -> None:
        self._publisher.publish_event(event)

    def process_all_queued_events(self) -> int:
        """Drain every queued event into the graph; blocks until the buffer is empty."""
        return self._consumer.process_all_events()

    def get_reachable_services(self, service: str) -> Set[str]:
        return self._graph.get_reachable_services(service)

    def get_all_services(self) -> Set[str]:
        return self._graph.get_all_services()

    def has_service(self, service: str) -> bool:
        return self._graph.has_service(service)

    def get_adjacency_list(self) -> Dict[str, Set[str]]:
        return self._graph.get_adjacency_list()

    def get_queue_size(self) -> int:
        return self._buffer.size()

    def get_processed_event_count(self) -> int:
        return self._consumer.get_processed_event_count()

    def clear_graph(self) -> None:
        """Clear the graph and reset the processed counter. Queued events are kept."""
        self._graph.clear()
        self._consumer.reset_counter()
        log.info("Graph cleared (%d events still queued)", self._buffer.size())

    @property
    def event_publisher(self) -> EventPublisher:
        return self._publisher

    @property
    def event_consumer(self) -> EventConsumer:
        return self._consumer

    @property
    def service_graph(self) -> DependencyGraph:
        return self._graph
