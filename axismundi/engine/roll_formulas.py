"""Roll formula strings handed to the external dice engine."""

from typing import Literal

from axismundi.models.actors import ActorType
from axismundi.models.items import WeaponItem

AttackKind = Literal["melee", "ranged"]

SKILL_CHECK_FORMULA = "1d6"


class RollFormulaBuilder:
    """Builds formulas; evaluation is left to the dice engine."""

    @staticmethod
    def weapon_attack(actor, weapon: WeaponItem, attack: AttackKind = "melee") -> str:
        """
        Attack roll formula for a weapon.

        Characters add the ability bonus by reference (@str.bonus or
        @dex.bonus) and their melee or ranged attack bonus. Monsters add
        their attack bonus.
        """
        formula = "d20"
        if actor.type == ActorType.CHARACTER.value:
            if attack == "ranged":
                formula += f"+@dex.bonus+{actor.ranged_attack_bonus}"
            else:
                formula += f"+@str.bonus+{actor.melee_attack_bonus}"
        elif actor.type == ActorType.MONSTER.value:
            formula += f"+{actor.attack_bonus}"
        return f"{formula}+{weapon.attack_bonus}"

    @staticmethod
    def weapon_damage(actor, weapon: WeaponItem) -> str:
        """Damage formula: weapon damage plus the actor's melee or ranged damage bonus."""
        if weapon.weapon_type == "r":
            bonus = getattr(actor, "ranged_damage_bonus", 0)
        else:
            bonus = getattr(actor, "melee_damage_bonus", 0)
        return f"{weapon.damage}+{bonus}"

    @staticmethod
    def skill_check() -> str:
        return SKILL_CHECK_FORMULA
