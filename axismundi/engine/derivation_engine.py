"""Actor derivation pipeline."""

import logging
from collections.abc import Mapping
from typing import Optional

from axismundi.engine.actor_rules import RULES, ActorRules
from axismundi.errors import UnknownActorTypeError
from axismundi.models.actors import ActorRecord

logger = logging.getLogger(__name__)


class DerivationEngine:
    """Runs the base and derived rule passes for an actor."""

    @staticmethod
    def rules_for(actor_type: str, rules: Optional[Mapping[str, ActorRules]] = None) -> ActorRules:
        """
        Rule set registered for an actor type.

        Raises:
            UnknownActorTypeError: If no rule set is registered
        """
        registry = RULES if rules is None else rules
        try:
            return registry[actor_type]
        except KeyError:
            raise UnknownActorTypeError(actor_type) from None

    @staticmethod
    def derive(actor: ActorRecord, rules: Optional[Mapping[str, ActorRules]] = None) -> ActorRecord:
        """
        Compute an actor's derived values.

        The input record is left untouched. Running derive on an already
        derived record gives the same record back.

        Args:
            actor: Stored actor snapshot with its items
            rules: Optional override of the type -> rules table

        Returns:
            New actor record with derived values filled in
        """
        actor_rules = DerivationEngine.rules_for(actor.type, rules)
        logger.debug(f"Deriving {actor.type} {actor.actor_id} ({len(actor.items)} items)")

        base = actor_rules.prepare_base_data(actor)
        return actor_rules.prepare_derived_data(base)
