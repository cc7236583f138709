"""
Shared dependencies for API route modules.

The analyzer instance is created by the application factory and stored on
``app.state``; routes resolve it per request through :func:`get_analyzer`
so they never touch a module-level global.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List, Set

from fastapi import HTTPException, Request

from services.analyzer_service import DependencyAnalyzerService


def get_analyzer(request: Request) -> DependencyAnalyzerService:
    analyzer = getattr(request.app.state, "analyzer", None)
    if analyzer is None:
        raise HTTPException(status_code=503, detail="analyzer not initialised")
    return analyzer


def sorted_adjacency(adjacency: Dict[str, Set[str]]) -> Dict[str, List[str]]:
    return {node: sorted(successors) for node, successors in sorted(adjacency.items())}
