"""
Pydantic models for tsukumo calculator state.

TsukumoStatus is the mutable progression snapshot owned by the model.
"""

from pydantic import BaseModel


class TsukumoStatus(BaseModel):
    """
    Tsukumo status of a weapon.

    `exp` is the exp earned inside the current level, never total exp.
    The model assigns fields directly and has no validation path; bounds
    are enforced by the host bindings and by the progression table lookup.
    """

    level: int = 0
    exp: int = 0
    active_bonus_count: int = 0

    def __str__(self) -> str:
        return (
            f"現在の九十九レベル:{self.level},"
            f"経験値:{self.exp},"
            f"発動数:{self.active_bonus_count}"
        )

