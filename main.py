"""
Entry point for the Dependency Analyzer API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import settings
from services.analyzer_service import DependencyAnalyzerService

log = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
        stream=sys.stdout,
    )


def create_app(analyzer: Optional[DependencyAnalyzerService] = None) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "analyzer", None) is None:
            app.state.analyzer = DependencyAnalyzerService()
        log.info("Dependency analyzer ready")
        try:
            yield
        finally:
            state = app.state.analyzer
            log.info(
                "Shutting down with %d services and %d queued events",
                len(state.get_all_services()), state.get_queue_size(),
            )

    app = FastAPI(
        title="Dependency Analyzer",
        description="Ingests service dependency events and answers transitive reachability queries.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.analyzer = analyzer
    app.include_router(router, prefix=settings.api_prefix)
    return app


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    uvicorn.run(
        create_app(),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


app = create_app()


if __name__ == "__main__":
    configure_logging()
    serve()
