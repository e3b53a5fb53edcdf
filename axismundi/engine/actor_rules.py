"""Per-type derivation rules.

Each actor type has one rule set with two passes: base data, which only
reads the stored record, and derived data, which may read base-data results
and item aggregates. Both passes return a new record.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType

from axismundi.engine.ability_calculator import AbilityCalculator
from axismundi.engine.monster_tables import MonsterTables
from axismundi.engine.stronghold_calculator import StrongholdCalculator
from axismundi.engine.vehicle_calculator import VehicleCalculator
from axismundi.models.actors import (
    ActorType,
    CharacterActor,
    MonsterActor,
    StrongholdActor,
    VehicleActor,
)
from axismundi.models.items import ItemType


class ActorRules(ABC):
    """Rule set for one actor type. Both passes default to no change."""

    @property
    @abstractmethod
    def actor_type(self) -> ActorType:
        """Actor type this rule set handles; subclasses set it as a class attribute."""

    def prepare_base_data(self, actor):
        """Apply rules that only need stored values."""
        return actor

    def prepare_derived_data(self, actor):
        """Apply rules that depend on base data or item aggregates."""
        return actor


class CharacterRules(ActorRules):
    actor_type = ActorType.CHARACTER

    def prepare_derived_data(self, actor: CharacterActor) -> CharacterActor:
        return actor.model_copy(update={"abilities": AbilityCalculator.apply_bonuses(actor.abilities)})


class MonsterRules(ActorRules):
    actor_type = ActorType.MONSTER

    def prepare_base_data(self, actor: MonsterActor) -> MonsterActor:
        return actor.model_copy(
            update={
                "attack_bonus": MonsterTables.attack_bonus(actor.hit_dice),
                "saves": MonsterTables.build_saves(actor.monster_saves),
            }
        )


class SiegeEngineRules(ActorRules):
    actor_type = ActorType.SIEGE_ENGINE


class StrongholdRules(ActorRules):
    actor_type = ActorType.STRONGHOLD

    def prepare_base_data(self, actor: StrongholdActor) -> StrongholdActor:
        priced = []
        for item in actor.items:
            if item.type == ItemType.FLOOR.value:
                item = StrongholdCalculator.price_floor(item)
            elif item.type == ItemType.WALL.value:
                item = StrongholdCalculator.price_wall(item)
            priced.append(item)
        return actor.model_copy(update={"items": priced})

    def prepare_derived_data(self, actor: StrongholdActor) -> StrongholdActor:
        summary = StrongholdCalculator.summarize(
            floors=actor.items_of_type(ItemType.FLOOR),
            walls=actor.items_of_type(ItemType.WALL),
            workers=actor.workers,
            cost_multiplier=actor.cost_multiplier,
        )
        return actor.model_copy(
            update={"height": summary.height, "cost": summary.cost, "build_time": summary.build_time}
        )


class VehicleRules(ActorRules):
    actor_type = ActorType.VEHICLE

    def prepare_base_data(self, actor: VehicleActor) -> VehicleActor:
        return actor.model_copy(update={"hit_points": VehicleCalculator.aggregate_hit_points(actor.hit_points)})

    def prepare_derived_data(self, actor: VehicleActor) -> VehicleActor:
        return actor.model_copy(update={"move": VehicleCalculator.apply_movement(actor.hit_points, actor.move)})


RULES = MappingProxyType(
    {
        rules.actor_type.value: rules
        for rules in (CharacterRules(), MonsterRules(), SiegeEngineRules(), StrongholdRules(), VehicleRules())
    }
)
