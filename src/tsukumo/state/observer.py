"""
Observer contract for TsukumoModel.

An observer overrides the callbacks it cares about; the rest are no-ops.
Every callback receives primitive values only, never the model itself.

The model delivers through its EventBus. DISPATCH maps each event type
to the observer method that handles it, so one registration subscribes
the observer to every event type in a fixed order.
"""

from .event_bus import ModelEvent, ModelEventType


class ModelObserver:
    """Interface to observe TsukumoModel."""

    def on_update_current_exp(self, exp: int) -> None:
        """Call when current exp has been updated."""

    def on_update_current_level(self, level: int) -> None:
        """Call when current level has been updated."""

    def on_update_max_exp_of_current_level(self, max_exp: int) -> None:
        """Call when max exp of current level has been updated."""

    def on_update_to_level(self, to_level: int) -> None:
        """Call when "to level" has been updated."""

    def on_update_to_level_min(self, to_level_min: int) -> None:
        """Call when min of "to level" has been updated."""

    def on_update_necessary_tsukumo(self, exp: int, source: int) -> None:
        """Call when necessary tsukumo exp and number of sources have been updated."""

    def on_log_text_changed(self, log_text: str) -> None:
        """Call when log text has been changed (carries the whole log text)."""

    def handle_event(self, event: ModelEvent) -> None:
        """Route a bus event to the matching callback, payload in emit order."""
        method = getattr(self, DISPATCH[event.type])
        method(*event.data.values())


DISPATCH: dict[ModelEventType, str] = {
    ModelEventType.CURRENT_EXP_CHANGED: "on_update_current_exp",
    ModelEventType.CURRENT_LEVEL_CHANGED: "on_update_current_level",
    ModelEventType.MAX_EXP_OF_CURRENT_LEVEL_CHANGED: "on_update_max_exp_of_current_level",
    ModelEventType.TO_LEVEL_CHANGED: "on_update_to_level",
    ModelEventType.TO_LEVEL_MIN_CHANGED: "on_update_to_level_min",
    ModelEventType.NECESSARY_TSUKUMO_CHANGED: "on_update_necessary_tsukumo",
    ModelEventType.LOG_TEXT_CHANGED: "on_log_text_changed",
}
