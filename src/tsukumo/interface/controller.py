"""
Controller of the tsukumo calculator.

Translates text commands into model calls, and keeps the input bounds
the model announces (target floor, exp ceiling) so every call it makes
is one the model accepts.

Usage:
    controller = TsukumoController(model, config)
    controller.handle("level 5")
    controller.handle("gain 1.5")
    controller.handle("memo")
"""

import logging

from ..state import ModelObserver, TsukumoModel
from ..systems import MAX_CURRENT_LEVEL, MAX_TO_LEVEL, TsukumoError
from .config import DEFAULT_CONFIG, Config, validate_config

logger = logging.getLogger(__name__)


class InputError(TsukumoError):
    """User input that cannot be turned into a model call."""
    pass


def parse_int(value: str, name: str) -> int:
    try:
        return int(value, 10)
    except ValueError:
        raise InputError(f"{name} must be an integer, got {value!r}") from None


def parse_float(value: str, name: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise InputError(f"{name} must be a number, got {value!r}") from None


class TsukumoController(ModelObserver):
    """
    Controller of the tsukumo calculator.

    Registers itself with the model on construction. Bound updates only
    change the controller's own fields; any follow-up model call (such
    as re-sending a clamped exp) happens after the notifying setter has
    returned.
    """

    def __init__(self, model: TsukumoModel, config: Config | None = None):
        self._model = model
        # Only positive gains and a non-negative bonus limit ever reach the model
        config = validate_config(config or DEFAULT_CONFIG)
        self.gain_choices: list[float] = config["gain_choices"]
        self.max_active_bonus: int = config["max_active_bonus"]

        # Mirrors of the page's input widgets
        self.to_level_floor = 1
        self.exp_ceiling = 0
        self.exp_input = 0

        self._model.register_observer(self)

        self._commands = {
            "level": self._set_level,
            "exp": self._set_exp,
            "bonus": self._set_bonus,
            "to": self._set_to_level,
            "gain": self._set_gain,
            "memo": self._memo,
            "clear": self._clear,
            "undo": self._undo,
        }

    @property
    def command_names(self) -> list[str]:
        return list(self._commands)

    # -------------------------------------------------------------------------
    # Observer callbacks
    # -------------------------------------------------------------------------

    def on_update_current_exp(self, exp: int) -> None:
        self.exp_input = exp

    def on_update_current_level(self, level: int) -> None:
        self.to_level_floor = level + 1

    def on_update_max_exp_of_current_level(self, max_exp: int) -> None:
        self.exp_ceiling = max_exp
        if self.exp_input > max_exp:
            self.exp_input = max_exp

    def on_update_to_level_min(self, to_level_min: int) -> None:
        self.to_level_floor = to_level_min

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def handle(self, line: str) -> None:
        """
        Run one command line, e.g. "level 5" or "memo".

        Raises:
            InputError: unknown command, missing or malformed argument
        """
        parts = line.split()
        if not parts:
            return
        name, args = parts[0].lower(), parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            raise InputError(f"Unknown command: {name}")
        logger.debug(f"Command {name} {args}")
        handler(args)

    def _single_arg(self, args: list[str], name: str) -> str:
        if len(args) != 1:
            raise InputError(f"{name} takes exactly one value")
        return args[0]

    def _set_level(self, args: list[str]) -> None:
        level = parse_int(self._single_arg(args, "level"), "level")
        if not 0 <= level <= MAX_CURRENT_LEVEL:
            raise InputError(f"level must be between 0 and {MAX_CURRENT_LEVEL}")
        self._model.set_current_level(level)
        # The page clamps the exp field on a lower ceiling; tell the model too
        if self.exp_input != self._model.status.exp:
            self._model.set_current_exp(self.exp_input)

    def _set_exp(self, args: list[str]) -> None:
        exp = parse_int(self._single_arg(args, "exp"), "exp")
        if exp < 0:
            raise InputError("exp must not be negative")
        self._model.set_current_exp(min(exp, self.exp_ceiling))

    def _set_bonus(self, args: list[str]) -> None:
        count = parse_int(self._single_arg(args, "bonus"), "bonus")
        if not 0 <= count <= self.max_active_bonus:
            raise InputError(f"bonus must be between 0 and {self.max_active_bonus}")
        self._model.set_current_active_bonus_count(count)

    def _set_to_level(self, args: list[str]) -> None:
        level = parse_int(self._single_arg(args, "to"), "to")
        if level > MAX_TO_LEVEL:
            raise InputError(f"to must be at most {MAX_TO_LEVEL}")
        self._model.set_to_level(max(level, self.to_level_floor))

    def _set_gain(self, args: list[str]) -> None:
        gain = parse_float(self._single_arg(args, "gain"), "gain")
        if gain not in self.gain_choices:
            choices = ", ".join(f"{g:.1f}" for g in self.gain_choices)
            raise InputError(f"gain must be one of: {choices}")
        self._model.set_gain(gain)

    def _memo(self, args: list[str]) -> None:
        self._model.request_log_text()

    def _clear(self, args: list[str]) -> None:
        self._model.clear_log_text()

    def _undo(self, args: list[str]) -> None:
        self._model.undo_log_text_change()
