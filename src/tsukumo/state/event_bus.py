"""
Event bus for tsukumo model notifications.

Decouples the model from whatever renders it. The model owns one bus
and emits on it; observers and plain callbacks subscribe per event type.

Usage:
    from .event_bus import EventBus, ModelEventType

    bus = EventBus()
    bus.on(ModelEventType.NECESSARY_TSUKUMO_CHANGED, my_handler)

    # Emit (in model when a derived value is recomputed)
    bus.emit(ModelEventType.NECESSARY_TSUKUMO_CHANGED, exp=500, source=50)

    # Handler receives event
    def my_handler(event: ModelEvent):
        print(f"Need {event.data['source']} sources")
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class ModelEventType(Enum):
    """Notifications the model can publish."""

    # Current status
    CURRENT_EXP_CHANGED = "current.exp_changed"
    CURRENT_LEVEL_CHANGED = "current.level_changed"
    MAX_EXP_OF_CURRENT_LEVEL_CHANGED = "current.max_exp_changed"

    # Target
    TO_LEVEL_CHANGED = "target.level_changed"
    TO_LEVEL_MIN_CHANGED = "target.level_min_changed"

    # Derived
    NECESSARY_TSUKUMO_CHANGED = "necessary.changed"

    # Log
    LOG_TEXT_CHANGED = "log.text_changed"


@dataclass
class ModelEvent:
    """
    Event payload for the event bus.

    Attributes:
        type: The event type (from ModelEventType enum)
        data: Primitive payload (ints and strings only)
        timestamp: When the event was emitted
    """

    type: ModelEventType
    data: dict = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.data}"


# Type alias for event handlers
EventHandler = Callable[[ModelEvent], None]


class EventBus:
    """
    Synchronous event bus.

    Listeners are called immediately on emit(), in subscription order.
    A listener must not call back into a model mutator while handling
    an event; nested cascades are not supported.

    Handler errors are logged and re-raised: every error reaching the
    bus is a programming error and must not be hidden.
    """

    def __init__(self, history_limit: int = 100):
        self._listeners: dict[ModelEventType, list[EventHandler]] = {}
        self._history: list[ModelEvent] = []
        self._history_limit = history_limit  # Keep last N events for debugging

    def on(self, event_type: ModelEventType, handler: EventHandler) -> None:
        """
        Subscribe to an event type.

        Subscribing the same handler twice is a no-op.

        Args:
            event_type: The type of event to listen for
            handler: Callback function that receives ModelEvent
        """
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        if handler not in self._listeners[event_type]:
            self._listeners[event_type].append(handler)

    def emit(self, event_type: ModelEventType, **data) -> ModelEvent:
        """
        Emit an event to all subscribers.

        Args:
            event_type: The type of event
            **data: Event-specific data

        Returns:
            The emitted ModelEvent (for chaining/testing)
        """
        event = ModelEvent(type=event_type, data=data)

        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]

        for handler in self._listeners.get(event_type, []):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in handler for {event_type.value}")
                raise

        return event

    def get_history(self, event_type: ModelEventType | None = None) -> list[ModelEvent]:
        """
        Get recent event history.

        Args:
            event_type: Filter by type, or None for all events

        Returns:
            List of recent events
        """
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.type == event_type]

    def listener_count(self, event_type: ModelEventType) -> int:
        """Get number of listeners for an event type."""
        return len(self._listeners.get(event_type, []))
