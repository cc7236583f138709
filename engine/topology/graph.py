"""
Graph representation of service dependencies, with incremental edge insertion and cycle-safe transitive reachability queries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

import logging
from typing import Dict, List, Set

log = logging.getLogger(__name__)


class DependencyGraph:
    """Directed graph keyed by service name.

    An edge ``source -> target`` means *source* depends on (calls) *target*.
    Cycles and self-loops are allowed. Successors are held in plain sets, so
    the order in which a traversal visits sibling branches is not guaranteed;
    reachability results are sets and carry no ordering either.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Set[str]] = {}

    def add_dependency(self, source: str, target: str) -> None:
        # the target is registered even without outgoing edges so sinks are visible
        self._adjacency.setdefault(source, set()).add(target)
        self._adjacency.setdefault(target, set())

    def get_reachable_services(self, service: str) -> Set[str]:
        """Return every service transitively depended upon by *service*.

        Unknown services yield an empty set. The starting service is never part
        of the result, even when a cycle leads back to it. Each node is visited
        at most once per query, so the walk is bounded by the reachable
        component rather than the whole graph.
        """
        if service not in self._adjacency:
            return set()

        visited: Set[str] = {service}
        stack: List[str] = [service]

        while stack:
            node = stack.pop()
            for neighbor in self._adjacency.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        visited.discard(service)
        log.debug("Reachable from %s: %d services", service, len(visited))
        return visited

    def get_all_services(self) -> Set[str]:
        return set(self._adjacency)

    def has_service(self, service: str) -> bool:
        return service in self._adjacency

    def get_adjacency_list(self) -> Dict[str, Set[str]]:
        return {node: set(successors) for node, successors in self._adjacency.items()}

    def service_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(successors) for successors in self._adjacency.values())

    def clear(self) -> None:
        self._adjacency.clear()

    def __contains__(self, service: object) -> bool:
        return service in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)
