"""
API event route tests for publishing and draining dependency events.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from pydantic import ValidationError

from api.requests import DependencyEventRequest
from api.routes import events as events_route


@pytest.mark.asyncio
async def test_publish_dependency_queues_event(analyzer):
    req = DependencyEventRequest(source="A", target="B", latency_ms=5)
    res = await events_route.publish_dependency(req, analyzer=analyzer)
    assert res.status == "queued"
    assert res.type == "dependency"
    assert res.queue_size == 1
    assert analyzer.get_queue_size() == 1
    assert analyzer.get_all_services() == set()


@pytest.mark.asyncio
async def test_process_events_reports_counts(analyzer):
    for target in ("B", "C"):
        await events_route.publish_dependency(
            DependencyEventRequest(source="A", target=target, latency_ms=1), analyzer=analyzer
        )
    res = await events_route.process_events(analyzer=analyzer)
    assert res.processed == 2
    assert res.total_processed == 2
    assert res.queue_size == 0

    again = await events_route.process_events(analyzer=analyzer)
    assert again.processed == 0
    assert again.total_processed == 2


@pytest.mark.asyncio
async def test_queue_status_and_demo(analyzer):
    res = await events_route.load_demo(analyzer=analyzer)
    assert res == {"queued": 10, "queue_size": 10}
    status = await events_route.queue_status(analyzer=analyzer)
    assert status.queue_size == 10
    assert status.total_processed == 0


def test_request_rejects_negative_latency_and_blank_names():
    with pytest.raises(ValidationError):
        DependencyEventRequest(source="A", target="B", latency_ms=-1)
    with pytest.raises(ValidationError):
        DependencyEventRequest(source="", target="B", latency_ms=1)


@pytest.mark.asyncio
async def test_unexpected_error_becomes_500(monkeypatch, analyzer):
    from fastapi import HTTPException

    def boom(*args, **kwargs):
        raise RuntimeError("queue exploded")

    monkeypatch.setattr(analyzer, "publish_dependency_event", boom)
    with pytest.raises(HTTPException) as exc_info:
        await events_route.publish_dependency(
            DependencyEventRequest(source="A", target="B"), analyzer=analyzer
        )
    assert exc_info.value.status_code == 500
    assert "queue exploded" in exc_info.value.detail
