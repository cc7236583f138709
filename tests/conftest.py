import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import SAMPLE_DEPENDENCIES
from engine.topology import DependencyGraph
from services.analyzer_service import DependencyAnalyzerService


@pytest.fixture
def graph():
    return DependencyGraph()


@pytest.fixture
def analyzer():
    return DependencyAnalyzerService()


@pytest.fixture
def sample_analyzer():
    """Analyzer with the ten sample edges published and drained."""
    svc = DependencyAnalyzerService()
    for source, target, latency in SAMPLE_DEPENDENCIES:
        svc.publish_dependency_event(source, target, latency)
    svc.process_all_queued_events()
    return svc
