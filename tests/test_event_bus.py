"""Tests for the model event bus."""

import pytest

from tsukumo.state import EventBus, ModelEvent, ModelEventType


class TestEventBus:
    """Test subscription and delivery."""

    def test_emit_reaches_subscriber(self):
        bus = EventBus()
        received = []
        bus.on(ModelEventType.TO_LEVEL_CHANGED, received.append)

        event = bus.emit(ModelEventType.TO_LEVEL_CHANGED, to_level=5)

        assert received == [event]
        assert event.data == {"to_level": 5}

    def test_other_event_types_not_delivered(self):
        bus = EventBus()
        received = []
        bus.on(ModelEventType.TO_LEVEL_CHANGED, received.append)

        bus.emit(ModelEventType.LOG_TEXT_CHANGED, log_text="x")

        assert received == []

    def test_subscription_order_preserved(self):
        """Handlers run in the order they subscribed."""
        bus = EventBus()
        order = []
        bus.on(ModelEventType.CURRENT_EXP_CHANGED, lambda e: order.append("first"))
        bus.on(ModelEventType.CURRENT_EXP_CHANGED, lambda e: order.append("second"))

        bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=1)

        assert order == ["first", "second"]

    def test_duplicate_subscription_ignored(self):
        bus = EventBus()
        received = []
        bus.on(ModelEventType.CURRENT_EXP_CHANGED, received.append)
        bus.on(ModelEventType.CURRENT_EXP_CHANGED, received.append)

        bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=1)

        assert len(received) == 1
        assert bus.listener_count(ModelEventType.CURRENT_EXP_CHANGED) == 1

    def test_handler_error_propagates(self):
        """A failing handler is not swallowed."""
        bus = EventBus()

        def broken(event: ModelEvent):
            raise RuntimeError("boom")

        bus.on(ModelEventType.CURRENT_EXP_CHANGED, broken)

        with pytest.raises(RuntimeError, match="boom"):
            bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=1)


class TestEventHistory:
    """Test the debugging history."""

    def test_history_filters_by_type(self):
        bus = EventBus()
        bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=1)
        bus.emit(ModelEventType.TO_LEVEL_CHANGED, to_level=2)
        bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=3)

        assert len(bus.get_history()) == 3
        exp_events = bus.get_history(ModelEventType.CURRENT_EXP_CHANGED)
        assert [e.data["exp"] for e in exp_events] == [1, 3]

    def test_history_is_bounded(self):
        bus = EventBus(history_limit=5)
        for i in range(10):
            bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=i)

        history = bus.get_history()
        assert len(history) == 5
        assert history[0].data["exp"] == 5

    def test_event_str(self):
        event = ModelEvent(type=ModelEventType.TO_LEVEL_CHANGED, data={"to_level": 3})
        assert str(event) == "[target.level_changed] {'to_level': 3}"
