"""Ability modifier calculation."""

from types import MappingProxyType

from axismundi.models.actors import AbilityScore

# Score -> modifier. Scores without an entry are neutral.
ABILITY_BONUS_TABLE = MappingProxyType(
    {
        3: -3,
        4: -2,
        5: -2,
        6: -1,
        7: -1,
        8: -1,
        13: 1,
        14: 1,
        15: 1,
        16: 2,
        17: 2,
        18: 3,
    }
)


class AbilityCalculator:
    """Turns ability scores into modifiers."""

    @staticmethod
    def calculate_bonus(score: int) -> int:
        """
        Modifier for a raw ability score.

        Args:
            score: Raw ability score; any integer is accepted

        Returns:
            Modifier from -3 to +3, or 0 outside 3-18
        """
        return ABILITY_BONUS_TABLE.get(score, 0)

    @staticmethod
    def apply_bonuses(abilities: dict[str, AbilityScore]) -> dict[str, AbilityScore]:
        """Return a copy of abilities with every bonus recomputed from its score."""
        return {
            key: ability.model_copy(update={"bonus": AbilityCalculator.calculate_bonus(ability.value)})
            for key, ability in abilities.items()
        }
