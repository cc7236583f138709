"""
Dependency events carried through the event buffer. An event records that one service calls another, together with the observed latency of that call.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from engine.enums import EventKind


@dataclass(frozen=True)
class DependencyEvent:
    kind: str
    source: str
    target: str
    latency_ms: int = 0

    @classmethod
    def dependency(cls, source: str, target: str, latency_ms: int = 0) -> DependencyEvent:
        return cls(kind=EventKind.dependency.value, source=source, target=target, latency_ms=latency_ms)

    @property
    def is_dependency(self) -> bool:
        return EventKind.is_graph_affecting(self.kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "source": self.source,
            "target": self.target,
            "latency_ms": self.latency_ms,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict())
