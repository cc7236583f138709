"""
Event routes for publishing dependency events and draining the event buffer into the dependency graph.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict

from fastapi import APIRouter, Depends

from api.requests import DependencyEventRequest
from api.responses import ProcessResult, PublishedEvent, QueueStatus
from api.routes.common import get_analyzer
from api.routes.exception import handle_exceptions
from services.analyzer_service import DependencyAnalyzerService
from services.sample_data import load_sample_dataset

router = APIRouter(tags=["Events"])


@router.post("/events/dependency", summary="Queue a dependency event", response_model=PublishedEvent)
@handle_exceptions
async def publish_dependency(
    req: DependencyEventRequest,
    analyzer: DependencyAnalyzerService = Depends(get_analyzer),
) -> PublishedEvent:
    event = analyzer.publish_dependency_event(req.source, req.target, req.latency_ms)
    return PublishedEvent(
        type=event.kind,
        source=event.source,
        target=event.target,
        latency_ms=event.latency_ms,
        queue_size=analyzer.get_queue_size(),
    )


@router.post("/events/process", summary="Drain queued events into the graph", response_model=ProcessResult)
@handle_exceptions
async def process_events(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> ProcessResult:
    processed = analyzer.process_all_queued_events()
    return ProcessResult(
        processed=processed,
        total_processed=analyzer.get_processed_event_count(),
        queue_size=analyzer.get_queue_size(),
    )


@router.get("/queue", summary="Queue size and processing totals", response_model=QueueStatus)
@handle_exceptions
async def queue_status(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> QueueStatus:
    return QueueStatus(
        queue_size=analyzer.get_queue_size(),
        total_processed=analyzer.get_processed_event_count(),
    )


@router.post("/demo", summary="Queue the sample dependency dataset")
@handle_exceptions
async def load_demo(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> Dict[str, int]:
    queued = load_sample_dataset(analyzer)
    return {"queued": queued, "queue_size": analyzer.get_queue_size()}
