"""
Topology analysis package exports.

This package provides the dependency-graph primitive the ingestion pipeline
mutates and the analyzer queries for transitive reachability.
"""

from engine.topology.graph import DependencyGraph

__all__ = ["DependencyGraph"]
