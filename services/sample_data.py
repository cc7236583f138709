from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from config import SAMPLE_DEPENDENCIES
from services.analyzer_service import DependencyAnalyzerService

log = logging.getLogger(__name__)


def load_sample_dataset(
    analyzer: DependencyAnalyzerService,
    dependencies: Optional[Iterable[Tuple[str, str, int]]] = None,
) -> int:
    """Queue the sample dependency events. Nothing is drained here."""
    count = 0
    for source, target, latency_ms in dependencies if dependencies is not None else SAMPLE_DEPENDENCIES:
        analyzer.publish_dependency_event(source, target, latency_ms)
        count += 1
    log.info("Queued %d sample dependency events", count)
    return count
