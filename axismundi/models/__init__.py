"""Data models module for Axis Mundi."""

# Items
from axismundi.models.items import (
    ArmorItem,
    BaseItem,
    ContainerItem,
    FeatureItem,
    FloorItem,
    FloorMaterial,
    GearItem,
    ItemRecord,
    ItemType,
    MonsterSkillItem,
    SkillItem,
    SpellItem,
    WallItem,
    WallMaterial,
    WeaponItem,
    parse_item,
)

# Actors
from axismundi.models.actors import (
    AbilityScore,
    ActorRecord,
    ActorType,
    BaseActor,
    CharacterActor,
    Money,
    MonsterActor,
    Movement,
    Saves,
    SiegeEngineActor,
    StrongholdActor,
    VehicleActor,
    VehicleHitPoints,
    VehicleSide,
    parse_actor,
)

__all__ = [
    # Items
    "ItemType",
    "ItemRecord",
    "BaseItem",
    "GearItem",
    "ContainerItem",
    "WeaponItem",
    "ArmorItem",
    "SpellItem",
    "SkillItem",
    "FeatureItem",
    "MonsterSkillItem",
    "FloorItem",
    "FloorMaterial",
    "WallItem",
    "WallMaterial",
    "parse_item",
    # Actors
    "ActorType",
    "ActorRecord",
    "BaseActor",
    "AbilityScore",
    "Money",
    "Saves",
    "CharacterActor",
    "MonsterActor",
    "SiegeEngineActor",
    "StrongholdActor",
    "VehicleActor",
    "VehicleHitPoints",
    "VehicleSide",
    "Movement",
    "parse_actor",
]
