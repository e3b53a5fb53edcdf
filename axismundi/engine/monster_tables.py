"""Monster attack bonus and saving throw tables."""

import math
from types import MappingProxyType
from typing import NamedTuple

from axismundi.errors import InvalidSaveCategoryError
from axismundi.models.actors import Saves

ATTACK_BONUS_FLOOR = 0
ATTACK_BONUS_CEILING = 16
MAX_TABLED_HIT_DICE = 31

# (lowest hit dice, highest hit dice, attack bonus); 1-8 are identity
_ATTACK_BONUS_BANDS = (
    (9, 9, 8),
    (10, 11, 9),
    (12, 13, 10),
    (14, 15, 11),
    (16, 19, 12),
    (20, 23, 13),
    (24, 27, 14),
    (28, 31, 15),
)

ATTACK_BONUS_TABLE = MappingProxyType(
    {
        **{hit_dice: hit_dice for hit_dice in range(1, 9)},
        **{
            hit_dice: bonus
            for low, high, bonus in _ATTACK_BONUS_BANDS
            for hit_dice in range(low, high + 1)
        },
    }
)


class SaveValues(NamedTuple):
    """Saving throw targets in table order."""

    paralysis: int
    death: int
    breath: int
    wands: int
    spells: int


SAVES_TABLE = MappingProxyType(
    {
        1: SaveValues(15, 14, 16, 16, 17),
        2: SaveValues(14, 13, 15, 15, 16),
        3: SaveValues(14, 13, 15, 15, 16),
        4: SaveValues(13, 12, 14, 14, 15),
        5: SaveValues(12, 11, 13, 13, 14),
        6: SaveValues(12, 11, 13, 13, 14),
        7: SaveValues(11, 10, 12, 12, 13),
        8: SaveValues(10, 9, 11, 11, 12),
        9: SaveValues(10, 9, 11, 11, 12),
        10: SaveValues(9, 8, 10, 10, 11),
        11: SaveValues(8, 7, 9, 9, 10),
        12: SaveValues(8, 7, 9, 9, 10),
        13: SaveValues(7, 6, 8, 8, 9),
        14: SaveValues(6, 5, 7, 7, 8),
    }
)

SAVE_CATEGORY_RANGE = (min(SAVES_TABLE), max(SAVES_TABLE))


class MonsterTables:
    """Lookups for monster combat values."""

    @staticmethod
    def attack_bonus(hit_dice: float) -> int:
        """
        Attack bonus for a monster's hit dice.

        Fractional hit dice (e.g. 1/2 HD creatures) are compared by whole
        tiers, so 8.5 HD attacks as 8 HD.

        Args:
            hit_dice: Hit dice count

        Returns:
            Attack bonus, 0 below 1 HD (or NaN) and 16 above 31 HD (infinity included)
        """
        # Clamp before flooring: math.floor rejects infinities and NaN
        if math.isnan(hit_dice) or hit_dice < 1:
            return ATTACK_BONUS_FLOOR
        if hit_dice >= MAX_TABLED_HIT_DICE + 1:
            return ATTACK_BONUS_CEILING
        return ATTACK_BONUS_TABLE[math.floor(hit_dice)]

    @staticmethod
    def saves(category: int) -> SaveValues:
        """
        Saving throw targets for a save category.

        Raises:
            InvalidSaveCategoryError: If category has no row in the table
        """
        # bool is an int subclass but never a meaningful category
        if isinstance(category, bool) or category not in SAVES_TABLE:
            raise InvalidSaveCategoryError(category, SAVE_CATEGORY_RANGE)
        return SAVES_TABLE[category]

    @staticmethod
    def build_saves(category: int) -> Saves:
        """Saves model filled from the table row for category."""
        return Saves(**MonsterTables.saves(category)._asdict())
