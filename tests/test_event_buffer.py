from engine.events import DependencyEvent, EventBuffer, EventPublisher


def test_empty_buffer_signals_none():
    buf = EventBuffer()
    assert buf.is_empty()
    assert buf.size() == 0
    assert buf.consume() is None
    # consuming an empty buffer is not an error and leaves it usable
    assert buf.consume() is None
    assert len(buf) == 0


def test_fifo_order():
    buf = EventBuffer()
    events = [DependencyEvent.dependency("A", t, i) for i, t in enumerate("BCD")]
    for e in events:
        buf.publish(e)
    assert buf.size() == 3
    assert [buf.consume() for _ in range(3)] == events
    assert buf.is_empty()


def test_duplicates_are_stored_distinctly():
    buf = EventBuffer()
    e = DependencyEvent.dependency("A", "B", 1)
    buf.publish(e)
    buf.publish(e)
    assert buf.size() == 2
    assert buf.consume() == e
    assert buf.consume() == e
    assert buf.consume() is None


def test_publisher_builds_dependency_events():
    buf = EventBuffer()
    pub = EventPublisher(buf)
    assert pub.is_queue_empty()
    event = pub.publish_dependency_event("A", "B", 7)
    pub.publish_event(DependencyEvent("heartbeat", "A", "A", 0))
    assert pub.get_queue_size() == 2
    assert buf.consume() == event == DependencyEvent("dependency", "A", "B", 7)
    assert buf.consume().kind == "heartbeat"
