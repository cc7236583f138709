"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class PublishedEvent(BaseModel):
    status: str = "queued"
    type: str
    source: str
    target: str
    latency_ms: int
    queue_size: int


class ProcessResult(BaseModel):
    processed: int
    total_processed: int
    queue_size: int


class QueueStatus(BaseModel):
    queue_size: int
    total_processed: int


class ServiceList(BaseModel):
    services: List[str] = Field(default_factory=list)
    count: int = 0


class ReachableServices(BaseModel):
    service: str
    reachable: List[str] = Field(default_factory=list)
    count: int = 0


class AdjacencySnapshot(BaseModel):
    adjacency: Dict[str, List[str]] = Field(default_factory=dict)
    services: int = 0
    edges: int = 0
