"""
Tsukumo calculator model.

Owns the current status, the target level and the gain, and pushes every
change out through its EventBus. Host bindings call the setters; they
never touch state directly.

Update discipline:
- Every setter assigns, then recomputes and broadcasts the derived
  (exp, sources) pair. Nothing derived is cached across a mutation.
- set_current_level additionally cascades: max exp of the level, the
  target floor (level + 1) and, if it fell below the floor, the target.

Usage:
    model = TsukumoModel()
    model.register_observer(view)
    model.initialize()

    model.set_current_level(5)
    model.request_log_text()
"""

from __future__ import annotations

import logging

from ..systems.derivation import Gain, NecessaryTsukumo, calculate
from ..systems.progression import max_exp_of_level
from .event_bus import EventBus, ModelEventType
from .history import LogHistory
from .observer import DISPATCH, ModelObserver
from .schema import TsukumoStatus

logger = logging.getLogger(__name__)


DEFAULT_TO_LEVEL = 1
DEFAULT_GAIN = 1.0


class TsukumoModel:
    """
    Model of the tsukumo calculator.

    Single-threaded and synchronous: each setter returns only after every
    observer has handled every notification it caused. Observers must not
    call setters from inside a callback.
    """

    def __init__(self, bus: EventBus | None = None):
        self._status = TsukumoStatus()
        self._to_level = DEFAULT_TO_LEVEL
        self._to_level_min = DEFAULT_TO_LEVEL
        self._gain: Gain = DEFAULT_GAIN
        self._history = LogHistory()
        self._bus = bus or EventBus()

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def status(self) -> TsukumoStatus:
        """Copy of the current status."""
        return self._status.model_copy()

    @property
    def to_level(self) -> int:
        return self._to_level

    @property
    def to_level_min(self) -> int:
        return self._to_level_min

    @property
    def gain(self) -> Gain:
        return self._gain

    @property
    def max_exp_of_current_level(self) -> int:
        return max_exp_of_level(self._status.level)

    @property
    def necessary(self) -> NecessaryTsukumo:
        """Derived pair for the current inputs."""
        return calculate(self._status, self._to_level, self._gain)

    @property
    def log_text(self) -> str:
        return self._history.latest

    @property
    def log_history(self) -> tuple[str, ...]:
        return self._history.entries

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def register_observer(self, observer: ModelObserver) -> None:
        """
        Register an observer for every model notification.

        Registration is permanent. Observers are notified in the order
        they were registered.
        """
        for event_type in DISPATCH:
            self._bus.on(event_type, observer.handle_event)
        logger.debug(f"Registered observer {type(observer).__name__}")

    def _notify_necessary_tsukumo(self) -> None:
        necessary = self.necessary
        self._bus.emit(
            ModelEventType.NECESSARY_TSUKUMO_CHANGED,
            exp=necessary.exp,
            source=necessary.sources,
        )

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Reset to level 0, exp 0, no active bonus, target 1, gain x1.0.

        Fires the full cascade so freshly registered observers receive
        every value. Log history is left as is.
        """
        self._status = TsukumoStatus()
        self._to_level = DEFAULT_TO_LEVEL
        self._to_level_min = DEFAULT_TO_LEVEL
        self._gain = DEFAULT_GAIN
        logger.debug("Model initialized")

        self._bus.emit(ModelEventType.CURRENT_LEVEL_CHANGED, level=self._status.level)
        self._bus.emit(
            ModelEventType.MAX_EXP_OF_CURRENT_LEVEL_CHANGED,
            max_exp=self.max_exp_of_current_level,
        )
        self._bus.emit(ModelEventType.TO_LEVEL_MIN_CHANGED, to_level_min=self._to_level_min)
        self._bus.emit(ModelEventType.TO_LEVEL_CHANGED, to_level=self._to_level)
        self._bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=self._status.exp)
        self._notify_necessary_tsukumo()

    def set_current_level(self, level: int) -> None:
        """
        Set current tsukumo level.

        Raises OutOfRangeError if the level is outside the progression
        table. In that case the level is already assigned and no derived
        value is broadcast.
        """
        logger.debug(f"set_current_level({level})")
        self._status.level = level
        self._bus.emit(ModelEventType.CURRENT_LEVEL_CHANGED, level=level)
        self._bus.emit(
            ModelEventType.MAX_EXP_OF_CURRENT_LEVEL_CHANGED,
            max_exp=max_exp_of_level(level),
        )

        # Target floor tracks level + 1; target is raised when it falls below
        to_level_min = level + 1
        if to_level_min != self._to_level_min:
            self._to_level_min = to_level_min
            self._bus.emit(ModelEventType.TO_LEVEL_MIN_CHANGED, to_level_min=to_level_min)
        if self._to_level < self._to_level_min:
            self._to_level = self._to_level_min
            self._bus.emit(ModelEventType.TO_LEVEL_CHANGED, to_level=self._to_level)

        self._notify_necessary_tsukumo()

    def set_current_exp(self, exp: int) -> None:
        """Set exp earned inside the current level."""
        logger.debug(f"set_current_exp({exp})")
        self._status.exp = exp
        self._bus.emit(ModelEventType.CURRENT_EXP_CHANGED, exp=exp)
        self._notify_necessary_tsukumo()

    def set_current_active_bonus_count(self, count: int) -> None:
        """Set number of currently activated tsukumo powers."""
        logger.debug(f"set_current_active_bonus_count({count})")
        self._status.active_bonus_count = count
        self._notify_necessary_tsukumo()

    def set_to_level(self, level: int) -> None:
        """
        Set "to level".

        Callers must honor the last to_level_min notification; a target
        at or below the current level raises PreconditionViolation.
        """
        logger.debug(f"set_to_level({level})")
        self._to_level = level
        self._notify_necessary_tsukumo()

    def set_gain(self, gain: Gain) -> None:
        """Set gain of tsukumo source into tsukumo exp."""
        logger.debug(f"set_gain({gain})")
        self._gain = gain
        self._notify_necessary_tsukumo()

    # -------------------------------------------------------------------------
    # Log
    # -------------------------------------------------------------------------

    def result_text(self) -> str:
        """Current calculation result as a log block."""
        necessary = self.necessary
        return (
            f"{self._status}\n"
            f"目標レベル:{self._to_level},倍率:{float(self._gain):.1f}\n"
            "　　　　↓\n"
            f"必要な九十九の源:{necessary.sources},経験値:{necessary.exp}\n"
        )

    def request_log_text(self) -> None:
        """
        Append the current result to the log.

        The new history entry is the previous log text, a blank line, and
        the result block. Observers receive the whole text.
        """
        log_text = self._history.latest
        if log_text:
            log_text += "\n"
        log_text += self.result_text()
        self._history.push(log_text)
        logger.debug(f"Log recorded ({len(self._history)} entries)")
        self._bus.emit(ModelEventType.LOG_TEXT_CHANGED, log_text=log_text)

    def clear_log_text(self) -> None:
        """Clear log text. Recorded as an empty entry so undo can restore it."""
        if not self._history:
            return
        self._history.push("")
        logger.debug("Log cleared")
        self._bus.emit(ModelEventType.LOG_TEXT_CHANGED, log_text="")

    def undo_log_text_change(self) -> None:
        """Undo the last log change. There is no redo."""
        if not self._history:
            return
        self._history.pop()
        logger.debug(f"Log change undone ({len(self._history)} entries)")
        self._bus.emit(ModelEventType.LOG_TEXT_CHANGED, log_text=self._history.latest)
