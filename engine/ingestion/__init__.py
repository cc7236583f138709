"""
Ingestion package exports.

The consumer drains the event buffer and applies dependency events to the graph.
"""

from engine.ingestion.consumer import EventConsumer

__all__ = ["EventConsumer"]
