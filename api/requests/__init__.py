from __future__ import annotations

from pydantic import BaseModel, Field


class DependencyEventRequest(BaseModel):
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)
    latency_ms: int = Field(default=0, ge=0)
