"""
Event package exports.

Events flow from the publisher into the buffer, where the ingestion
pipeline picks them up and turns them into dependency graph edges.
"""

from engine.events.models import DependencyEvent
from engine.events.buffer import EventBuffer
from engine.events.publisher import EventPublisher

__all__ = ["DependencyEvent", "EventBuffer", "EventPublisher"]
