"""
Analyzer facade tests covering the end-to-end publish, drain, and query flow.
"""

from engine.events import DependencyEvent, EventBuffer
from engine.topology import DependencyGraph
from services.analyzer_service import DependencyAnalyzerService
from services.sample_data import load_sample_dataset


def test_end_to_end_sample(analyzer):
    assert load_sample_dataset(analyzer) == 10
    assert analyzer.get_queue_size() == 10
    assert analyzer.get_all_services() == set()

    assert analyzer.process_all_queued_events() == 10
    assert analyzer.get_queue_size() == 0
    assert analyzer.get_processed_event_count() == 10
    assert analyzer.get_all_services() == set("ABCDEFGH")
    assert analyzer.get_reachable_services("A") == set("BCDEFGH")
    assert analyzer.get_reachable_services("F") == set("CDEGH")
    assert "F" not in analyzer.get_reachable_services("F")


def test_queries_between_drains(analyzer):
    analyzer.publish_dependency_event("A", "B", 1)
    analyzer.process_all_queued_events()
    analyzer.publish_dependency_event("B", "C", 1)
    assert analyzer.get_reachable_services("A") == {"B"}
    assert not analyzer.has_service("C")
    analyzer.process_all_queued_events()
    assert analyzer.get_reachable_services("A") == {"B", "C"}


def test_publish_event_with_other_kind(analyzer):
    analyzer.publish_event(DependencyEvent("heartbeat", "X", "Y", 0))
    analyzer.process_all_queued_events()
    assert analyzer.get_processed_event_count() == 1
    assert analyzer.get_all_services() == set()


def test_clear_graph_keeps_undrained_events(analyzer):
    load_sample_dataset(analyzer)
    for _ in range(4):
        analyzer.event_consumer.consume_event()
    assert analyzer.get_processed_event_count() == 4

    analyzer.clear_graph()
    assert analyzer.get_all_services() == set()
    assert analyzer.get_processed_event_count() == 0
    assert analyzer.get_queue_size() == 6
    assert not analyzer.has_service("A")

    analyzer.process_all_queued_events()
    assert analyzer.get_processed_event_count() == 6
    assert not analyzer.has_service("A")
    assert analyzer.has_service("C")


def test_injected_components_are_used():
    buf = EventBuffer()
    graph = DependencyGraph()
    svc = DependencyAnalyzerService(buffer=buf, graph=graph)
    svc.publish_dependency_event("A", "B", 3)
    assert buf.size() == 1
    svc.process_all_queued_events()
    assert graph.has_service("B")
    assert svc.service_graph is graph
    assert svc.event_publisher.get_queue_size() == 0


def test_adjacency_snapshot_is_detached(sample_analyzer):
    adjacency = sample_analyzer.get_adjacency_list()
    assert adjacency["F"] == {"C", "G"}
    adjacency["F"].clear()
    assert sample_analyzer.get_adjacency_list()["F"] == {"C", "G"}


def test_latency_does_not_affect_reachability(analyzer):
    analyzer.publish_dependency_event("A", "B", 0)
    analyzer.publish_dependency_event("A", "B", 10_000)
    analyzer.process_all_queued_events()
    assert analyzer.get_adjacency_list() == {"A": {"B"}, "B": set()}
    assert analyzer.get_processed_event_count() == 2
