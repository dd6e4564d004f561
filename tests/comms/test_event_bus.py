"""Unit tests for EventBus - subscribe/publish, type filters, overflow."""
from __future__ import annotations

import queue

import pytest

from invaders.comms.event_bus import DEFAULT_QUEUE_SIZE, EventBus


@pytest.mark.unit
class TestEventBusBasics:
    """Core subscribe/publish/unsubscribe functionality."""

    def test_subscribe_returns_queue(self):
        bus = EventBus()
        assert isinstance(bus.subscribe(), queue.Queue)

    def test_publish_delivers_to_subscriber(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("enemy_destroyed", {"score": 10})
        msg = q.get_nowait()
        assert msg["type"] == "enemy_destroyed"
        assert msg["data"]["score"] == 10

    def test_publish_without_data(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("ping")
        msg = q.get_nowait()
        assert msg["type"] == "ping"
        assert "data" not in msg

    def test_multiple_subscribers(self):
        bus = EventBus()
        q1 = bus.subscribe()
        q2 = bus.subscribe()
        bus.publish("broadcast")
        assert q1.get_nowait()["type"] == "broadcast"
        assert q2.get_nowait()["type"] == "broadcast"

    def test_unsubscribe_stops_delivery(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.unsubscribe(q)
        bus.publish("after_unsub")
        assert q.empty()

    def test_unsubscribe_unknown_queue_is_safe(self):
        EventBus().unsubscribe(queue.Queue())


@pytest.mark.unit
class TestEventBusFilters:
    def test_single_type_filter(self):
        bus = EventBus()
        q = bus.subscribe("game_over")
        bus.publish("shot_fired")
        bus.publish("game_over", {"result": "defeat"})
        assert [m["type"] for m in EventBus.drain(q)] == ["game_over"]

    def test_multiple_type_filter(self):
        bus = EventBus()
        q = bus.subscribe(["wave_complete", "game_reset"])
        bus.publish("wave_complete")
        bus.publish("shot_fired")
        bus.publish("game_reset")
        assert [m["type"] for m in EventBus.drain(q)] == ["wave_complete", "game_reset"]

    def test_unfiltered_receives_everything(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("a")
        bus.publish("b")
        assert q.qsize() == 2


@pytest.mark.unit
class TestEventBusOverflow:
    """Queue overflow behavior - drop oldest message when full."""

    def test_default_queue_size(self):
        assert EventBus().subscribe().maxsize == DEFAULT_QUEUE_SIZE

    def test_overflow_drops_oldest(self):
        bus = EventBus(maxsize=5)
        q = bus.subscribe()
        for i in range(5):
            bus.publish("fill", {"seq": i})
        assert q.full()

        bus.publish("overflow", {"seq": 5})
        msgs = EventBus.drain(q)
        assert [m["data"]["seq"] for m in msgs] == [1, 2, 3, 4, 5]

    def test_drain_empties_queue(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("x")
        assert len(EventBus.drain(q)) == 1
        assert EventBus.drain(q) == []
