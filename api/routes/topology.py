"""
Topology routes for querying services, reachable sets, and the adjacency list of the dependency graph.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from api.responses import AdjacencySnapshot, ReachableServices, ServiceList
from api.routes.common import get_analyzer, sorted_adjacency
from api.routes.exception import handle_exceptions
from services.analyzer_service import DependencyAnalyzerService

router = APIRouter(tags=["Topology"])


@router.get("/services", summary="List all known services", response_model=ServiceList)
@handle_exceptions
async def list_services(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> ServiceList:
    services = sorted(analyzer.get_all_services())
    return ServiceList(services=services, count=len(services))


@router.get(
    "/services/{service}/reachable",
    summary="Services transitively depended upon by a service",
    response_model=ReachableServices,
)
@handle_exceptions
async def reachable_services(
    service: str,
    analyzer: DependencyAnalyzerService = Depends(get_analyzer),
) -> ReachableServices:
    if not analyzer.has_service(service):
        raise HTTPException(status_code=404, detail=f"service '{service}' not found")
    reachable = sorted(analyzer.get_reachable_services(service))
    return ReachableServices(service=service, reachable=reachable, count=len(reachable))


@router.get("/graph", summary="Adjacency list snapshot", response_model=AdjacencySnapshot)
@handle_exceptions
async def adjacency(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> AdjacencySnapshot:
    snapshot = sorted_adjacency(analyzer.get_adjacency_list())
    return AdjacencySnapshot(
        adjacency=snapshot,
        services=len(snapshot),
        edges=sum(len(v) for v in snapshot.values()),
    )


@router.delete("/graph", summary="Clear the graph and reset the processed counter")
@handle_exceptions
async def clear_graph(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> Dict[str, Any]:
    analyzer.clear_graph()
    return {"status": "cleared", "queue_size": analyzer.get_queue_size()}
