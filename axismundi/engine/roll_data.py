"""Roll data projection for formula evaluation."""

import copy
import logging
from typing import Any

from axismundi.models.actors import ActorType

logger = logging.getLogger(__name__)

# Short aliases resolved by formulas such as "d20+@str.bonus+@ab"
LEVEL_ALIAS = "lvl"
ATTACK_BONUS_ALIAS = "ab"


class RollDataProjector:
    """Builds the flat lookup surface a formula evaluator reads."""

    @staticmethod
    def project(actor) -> dict[str, Any]:
        """
        Flatten an actor's derived state into roll data.

        The result is built from a copy of the actor's attributes and can be
        changed freely without touching the actor.

        Args:
            actor: Derived actor record

        Returns:
            Dict of attribute values plus short aliases
        """
        data = actor.model_dump(mode="json", exclude={"items"})

        if actor.type == ActorType.CHARACTER.value:
            # Copy each ability to the top level so formulas can use @str.bonus
            for key, ability in data.get("abilities", {}).items():
                if key in data or key in (LEVEL_ALIAS, ATTACK_BONUS_ALIAS):
                    logger.warning(f"Ability {key!r} on {actor.actor_id} shadows a roll data key; not copied")
                    continue
                data[key] = copy.deepcopy(ability)
            data[LEVEL_ALIAS] = data.get("level") or 0

        if "attack_bonus" in data:
            data[ATTACK_BONUS_ALIAS] = data["attack_bonus"] or 0

        return data
