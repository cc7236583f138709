"""
Health check route reporting graph and queue sizes.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.routes.common import get_analyzer
from api.routes.exception import handle_exceptions
from services.analyzer_service import DependencyAnalyzerService

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health(analyzer: DependencyAnalyzerService = Depends(get_analyzer)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "services": len(analyzer.get_all_services()),
        "queue_size": analyzer.get_queue_size(),
    }
