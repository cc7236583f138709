"""
In-memory FIFO buffer decoupling event producers from the graph mutator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from engine.events.models import DependencyEvent


class EventBuffer:
    """Unbounded first-in first-out queue of :class:`DependencyEvent`.

    The buffer is owned by a single publisher/consumer pair and is not
    thread-safe. Duplicate events are stored as separate entries.
    """

    def __init__(self) -> None:
        self._events: Deque[DependencyEvent] = deque()

    def publish(self, event: DependencyEvent) -> None:
        self._events.append(event)

    def consume(self) -> Optional[DependencyEvent]:
        """Remove and return the oldest event, or ``None`` when the buffer is empty."""
        if not self._events:
            return None
        return self._events.popleft()

    def is_empty(self) -> bool:
        return not self._events

    def size(self) -> int:
        return len(self._events)

    def __len__(self) -> int:
        return len(self._events)
