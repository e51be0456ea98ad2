"""State management for the tsukumo calculator."""

from .schema import TsukumoStatus
from .history import LogHistory
from .event_bus import (
    EventBus,
    EventHandler,
    ModelEvent,
    ModelEventType,
)
from .observer import DISPATCH, ModelObserver
from .model import TsukumoModel

__all__ = [
    # Schema
    "TsukumoStatus",
    "LogHistory",
    # Event Bus
    "EventBus",
    "EventHandler",
    "ModelEvent",
    "ModelEventType",
    # Observer
    "DISPATCH",
    "ModelObserver",
    # Model
    "TsukumoModel",
]
