"""Actor models: characters, monsters, siege engines, strongholds and vehicles."""

import uuid
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from axismundi.config import ABILITY_LABEL_KEYS
from axismundi.models.items import ItemRecord, ItemType


class ActorType(str, Enum):
    """Actor type discriminators."""

    CHARACTER = "character"
    MONSTER = "monster"
    SIEGE_ENGINE = "siegeEngine"
    STRONGHOLD = "stronghold"
    VEHICLE = "vehicle"


class AbilityScore(BaseModel):
    """Single ability score with its derived modifier."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    value: int = Field(default=10, description="Raw ability score")
    bonus: int = Field(default=0, description="Derived modifier")


def _default_abilities() -> dict[str, AbilityScore]:
    return {key: AbilityScore() for key in ABILITY_LABEL_KEYS}


class Money(BaseModel):
    """Coins held, by denomination."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)  # Immutable model, finite coin counts

    pp: float = Field(default=0, description="Platinum pieces")
    gp: float = Field(default=0, description="Gold pieces")
    ep: float = Field(default=0, description="Electrum pieces")
    sp: float = Field(default=0, description="Silver pieces")
    cp: float = Field(default=0, description="Copper pieces")


class Saves(BaseModel):
    """Saving throw targets."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    paralysis: int = Field(default=0, description="Paralysis and poison")
    death: int = Field(default=0, description="Death ray")
    breath: int = Field(default=0, description="Breath weapon")
    wands: int = Field(default=0, description="Wands and rods")
    spells: int = Field(default=0, description="Spells and staves")


class VehicleSide(BaseModel):
    """Hit points of one side of a vehicle."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    value: int = Field(default=0, description="Current hit points")
    max: int = Field(default=0, ge=0, description="Maximum hit points")


class VehicleHitPoints(BaseModel):
    """Per-side hit points and their aggregate."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    forward: VehicleSide = Field(default_factory=VehicleSide)
    aft: VehicleSide = Field(default_factory=VehicleSide)
    port: VehicleSide = Field(default_factory=VehicleSide)
    starboard: VehicleSide = Field(default_factory=VehicleSide)
    value: int = Field(default=0, description="Aggregate current hit points")
    max: int = Field(default=0, description="Aggregate maximum hit points")


class Movement(BaseModel):
    """Base and current movement of a vehicle."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    value: int = Field(default=0, ge=0, description="Full movement")
    current: int = Field(default=0, ge=0, description="Movement after side damage")


class BaseActor(BaseModel):
    """Fields shared by every actor."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    actor_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique actor identifier")
    name: str = Field(description="Actor name")
    biography: str = Field(default="", description="Free-form description")
    items: list[ItemRecord] = Field(default_factory=list, description="Owned items")

    def items_of_type(self, item_type: ItemType) -> list:
        """Items whose discriminator matches item_type, in stored order."""
        return [item for item in self.items if item.type == item_type.value]

    def get_item(self, item_id: str):
        """Owned item by id, or None."""
        return next((item for item in self.items if item.item_id == item_id), None)


class CharacterActor(BaseActor):
    """Player character."""

    type: Literal["character"] = ActorType.CHARACTER.value
    abilities: dict[str, AbilityScore] = Field(default_factory=_default_abilities, description="Ability scores")
    level: int = Field(default=1, ge=0, description="Experience level")
    experience: int = Field(default=0, ge=0, description="Experience points")
    attack_bonus: int = Field(default=0, description="Base attack bonus")
    melee_attack_bonus: int = Field(default=0, description="Melee attack bonus")
    ranged_attack_bonus: int = Field(default=0, description="Ranged attack bonus")
    melee_damage_bonus: int = Field(default=0, description="Melee damage bonus")
    ranged_damage_bonus: int = Field(default=0, description="Ranged damage bonus")
    saves: Saves = Field(default_factory=Saves, description="Saving throw targets")
    money: Money = Field(default_factory=Money, description="Coins carried")
    skills_calculated: bool = Field(default=False, description="Whether skill ratings have been calculated")


class MonsterActor(BaseActor):
    """World-controlled creature."""

    type: Literal["monster"] = ActorType.MONSTER.value
    hit_dice: float = Field(default=1, allow_inf_nan=False, description="Hit dice count")
    monster_saves: int = Field(default=1, description="Save category (1-14)")
    saves: Saves = Field(default_factory=Saves, description="Saving throw targets")
    attack_bonus: int = Field(default=0, description="Derived attack bonus")


class SiegeEngineActor(BaseActor):
    """Siege engine."""

    type: Literal["siegeEngine"] = ActorType.SIEGE_ENGINE.value
    range_bonus: int = Field(default=0, description="Selected range bonus")


class StrongholdActor(BaseActor):
    """Building made of floors and walls."""

    type: Literal["stronghold"] = ActorType.STRONGHOLD.value
    workers: int = Field(default=1, ge=1, description="Workers on the build")
    cost_multiplier: float = Field(default=1, ge=0, allow_inf_nan=False, description="Regional cost multiplier")
    height: float = Field(default=0, description="Derived total height")
    cost: float = Field(default=0, description="Derived total cost")
    build_time: int = Field(default=0, description="Derived build time")


class VehicleActor(BaseActor):
    """Ship, wagon or other vehicle."""

    type: Literal["vehicle"] = ActorType.VEHICLE.value
    hit_points: VehicleHitPoints = Field(default_factory=VehicleHitPoints, description="Per-side hit points")
    move: Movement = Field(default_factory=Movement, description="Movement")


ActorRecord = Annotated[
    Union[CharacterActor, MonsterActor, SiegeEngineActor, StrongholdActor, VehicleActor],
    Field(discriminator="type"),
]

_actor_adapter = TypeAdapter(ActorRecord)


def parse_actor(data: dict) -> ActorRecord:
    """Validate a raw actor payload into its typed record."""
    return _actor_adapter.validate_python(data)
