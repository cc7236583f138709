"""
Enumerations for event kinds understood by the ingestion pipeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import DEPENDENCY_EVENT_KIND


class EventKind(str, Enum):
    dependency = DEPENDENCY_EVENT_KIND

    @classmethod
    def is_graph_affecting(cls, kind: str) -> bool:
        # any other kind is still accepted by the buffer, it is only dropped on ingestion
        return kind == cls.dependency.value
