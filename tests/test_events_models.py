"""
Test Suite for Dependency Event Models

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import dataclasses
import json

import pytest

from engine.enums import EventKind
from engine.events.models import DependencyEvent


def test_dependency_factory_sets_kind():
    e = DependencyEvent.dependency("A", "B", 5)
    assert e.kind == "dependency"
    assert e.kind == EventKind.dependency
    assert e.is_dependency


def test_value_equality_and_hash():
    a = DependencyEvent("dependency", "A", "B", 5)
    b = DependencyEvent("dependency", "A", "B", 5)
    assert a == b
    assert hash(a) == hash(b)
    assert a != DependencyEvent("dependency", "A", "B", 6)
    assert a != DependencyEvent("heartbeat", "A", "B", 5)
    assert len({a, b}) == 1


def test_event_is_immutable():
    e = DependencyEvent.dependency("A", "B", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.source = "Z"


def test_other_kinds_are_not_graph_affecting():
    assert not DependencyEvent("heartbeat", "A", "B", 0).is_dependency
    assert not DependencyEvent("Dependency", "A", "B", 0).is_dependency


def test_str_renders_json_shape():
    e = DependencyEvent.dependency("A", "B", 5)
    assert json.loads(str(e)) == {"type": "dependency", "source": "A", "target": "B", "latency_ms": 5}
    assert e.to_dict()["latency_ms"] == 5
