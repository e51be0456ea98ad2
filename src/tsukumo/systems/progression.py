"""
Tsukumo progression table.

Experience needed to advance from each tsukumo level to the next.
Values are fixed by the game; index 0 is the cost of 0 → 1.
"""


class TsukumoError(Exception):
    """Base error for tsukumo calculations."""
    pass


class OutOfRangeError(TsukumoError):
    """Level index falls outside the progression table."""
    def __init__(self, level: int):
        self.level = level
        super().__init__(
            f"Level {level} is outside the progression table "
            f"(valid: 0-{len(EXP_TO_NEXT_LEVEL) - 1})."
        )


# Experience to next level, indexed by current level
EXP_TO_NEXT_LEVEL: tuple[int, ...] = (
    500,
    1135,
    1642,
    2285,
    3102,
    4139,
    5456,
    7130,
    9255,
    11953,
    15381,
    19734,
    25262,
    32282,
    41199,
    52522,
    66903,
    85167,
    108362,
    137820,
    175231,
    222744,
    283085,
    359717,
    457041,
    580642,
    737615,
    936971,
    1190154,
    1511695,
    1920053,
)

TABLE_LENGTH = len(EXP_TO_NEXT_LEVEL)

# Current level must satisfy 0 <= level < TABLE_LENGTH - 1
MAX_CURRENT_LEVEL = TABLE_LENGTH - 2
MAX_TO_LEVEL = TABLE_LENGTH - 1


def exp_to_next_level(level: int) -> int:
    """
    Get exp needed to go from `level` to `level + 1`.

    Raises OutOfRangeError for anything outside [0, TABLE_LENGTH);
    negative indices are rejected rather than wrapped.
    """
    if not 0 <= level < TABLE_LENGTH:
        raise OutOfRangeError(level)
    return EXP_TO_NEXT_LEVEL[level]


def max_exp_of_level(level: int) -> int:
    """Highest exp value that can be held inside `level`."""
    return exp_to_next_level(level) - 1
