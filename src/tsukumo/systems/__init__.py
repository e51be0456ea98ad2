"""
Calculation systems for the tsukumo calculator.

Pure functions over TsukumoStatus; no model state lives here.
"""

from .progression import (
    EXP_TO_NEXT_LEVEL,
    MAX_CURRENT_LEVEL,
    MAX_TO_LEVEL,
    TABLE_LENGTH,
    OutOfRangeError,
    TsukumoError,
    exp_to_next_level,
    max_exp_of_level,
)
from .derivation import (
    BASE_EXP_PER_SOURCE,
    NecessaryTsukumo,
    PreconditionViolation,
    as_fraction,
    calculate,
    exp_per_source,
    required_exp,
    required_sources,
)

__all__ = [
    # Progression table
    "EXP_TO_NEXT_LEVEL",
    "MAX_CURRENT_LEVEL",
    "MAX_TO_LEVEL",
    "TABLE_LENGTH",
    "exp_to_next_level",
    "max_exp_of_level",
    # Derivation
    "BASE_EXP_PER_SOURCE",
    "NecessaryTsukumo",
    "as_fraction",
    "calculate",
    "exp_per_source",
    "required_exp",
    "required_sources",
    # Errors
    "TsukumoError",
    "OutOfRangeError",
    "PreconditionViolation",
]
