"""
Derivation functions for tsukumo requirements.

Pure functions: (status, to_level, gain) -> exp / sources needed.
No clamping happens here; invalid inputs raise.

Yield arithmetic uses Fraction so the ceiling is exact:
    exp_per_source = 10 * gain * (active_bonus_count + 1)
    sources        = ceil(required_exp / exp_per_source)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import TYPE_CHECKING

from .progression import TsukumoError, exp_to_next_level

if TYPE_CHECKING:
    from ..state.schema import TsukumoStatus


# Base exp granted by one tsukumo source at x1.0 with no active bonus
BASE_EXP_PER_SOURCE = 10

Gain = float | int | Fraction | Decimal


class PreconditionViolation(TsukumoError):
    """Derivation called with inputs that have no meaningful result."""
    pass


@dataclass(frozen=True)
class NecessaryTsukumo:
    """Exp and tsukumo sources still needed to reach the target level."""
    exp: int
    sources: int


def as_fraction(gain: Gain) -> Fraction:
    """
    Convert a gain to an exact Fraction.

    Floats go through their shortest repr, so 1.5 -> 3/2 and
    1.1 -> 11/10 rather than the binary approximation.
    """
    if isinstance(gain, Rational):
        return Fraction(gain)
    if isinstance(gain, float):
        return Fraction(repr(gain))
    return Fraction(gain)


def _ceil_div(exp: int, per_source: Fraction) -> int:
    # Exact on rationals; partial sources cannot be spent
    return -(-exp // per_source)


def required_exp(status: "TsukumoStatus", to_level: int) -> int:
    """
    Calculate exp still needed to reach `to_level`.

    Remaining exp of the current level, plus the full cost of every
    level from status.level + 1 up to (not including) to_level.

    Raises:
        PreconditionViolation: to_level is not above the current level
        OutOfRangeError: a level outside the progression table is touched
    """
    if to_level <= status.level:
        raise PreconditionViolation(
            f"Target level {to_level} must be above current level {status.level}."
        )

    exp = exp_to_next_level(status.level) - status.exp
    for level in range(status.level + 1, to_level):
        exp += exp_to_next_level(level)
    return exp


def exp_per_source(gain: Gain, active_bonus_count: int) -> Fraction:
    """
    Exp granted by one tsukumo source.

    Args:
        gain: Campaign multiplier, usually x1.0, and x1.5 in campaigns
        active_bonus_count: Number of currently activated tsukumo powers
    """
    gain = as_fraction(gain)
    if gain <= 0:
        raise PreconditionViolation(f"Gain must be positive, got {gain}.")
    if active_bonus_count < 0:
        raise PreconditionViolation(
            f"Active bonus count must not be negative, got {active_bonus_count}."
        )
    return BASE_EXP_PER_SOURCE * gain * (active_bonus_count + 1)


def required_sources(status: "TsukumoStatus", to_level: int, gain: Gain) -> int:
    """Number of tsukumo sources needed to reach `to_level` (rounded up)."""
    exp = required_exp(status, to_level)
    return _ceil_div(exp, exp_per_source(gain, status.active_bonus_count))


def calculate(status: "TsukumoStatus", to_level: int, gain: Gain) -> NecessaryTsukumo:
    """Derive the (exp, sources) pair for the given inputs."""
    exp = required_exp(status, to_level)
    sources = _ceil_div(exp, exp_per_source(gain, status.active_bonus_count))
    return NecessaryTsukumo(exp=exp, sources=sources)
