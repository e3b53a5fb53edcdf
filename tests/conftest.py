"""Pytest configuration and fixtures."""

import pytest

from axismundi.models.actors import (
    AbilityScore,
    CharacterActor,
    Money,
    MonsterActor,
    Movement,
    StrongholdActor,
    VehicleActor,
    VehicleHitPoints,
    VehicleSide,
)
from axismundi.models.items import (
    ArmorItem,
    ContainerItem,
    FeatureItem,
    FloorItem,
    GearItem,
    SkillItem,
    SpellItem,
    WallItem,
    WeaponItem,
)


@pytest.fixture
def character():
    """Fighter with a mixed inventory."""
    return CharacterActor(
        actor_id="char-1",
        name="Aldara",
        abilities={
            "str": AbilityScore(value=16),
            "dex": AbilityScore(value=13),
            "con": AbilityScore(value=9),
            "int": AbilityScore(value=3),
            "wis": AbilityScore(value=18),
            "cha": AbilityScore(value=7),
        },
        level=3,
        attack_bonus=1,
        melee_attack_bonus=2,
        ranged_attack_bonus=1,
        melee_damage_bonus=1,
        ranged_damage_bonus=0,
        money=Money(gp=150, sp=50),
        items=[
            GearItem(item_id="rope", name="Rope", weight=2, quantity=5),
            GearItem(item_id="torches", name="Torches", weight=None, quantity=3, prepared=True),
            ContainerItem(item_id="backpack", name="Backpack", weight=1, quantity=1, prepared=True, capacity=30),
            WeaponItem(item_id="sword", name="Sword", weight=3, prepared=True, attack_bonus=1, damage="1d8"),
            WeaponItem(item_id="bow", name="Bow", weight=2, weapon_type="r", damage="1d6"),
            ArmorItem(item_id="mail", name="Chain mail", weight=20, armor_class=5),
            SpellItem(item_id="sleep", name="Sleep", spell_level=1),
            SkillItem(item_id="stealth", name="Sigilo", base_value=2, ability="dex"),
            SkillItem(item_id="alchemy", name="Alquimia", advanced=True, base_value=1, ability="int"),
            FeatureItem(item_id="second-wind", name="Second wind", level=2),
            FeatureItem(item_id="weapon-focus", name="Weapon focus", level=1),
        ],
    )


@pytest.fixture
def monster():
    """Ogre-sized monster."""
    return MonsterActor(actor_id="mon-1", name="Ogre", hit_dice=4, monster_saves=4)


@pytest.fixture
def stronghold():
    """Tower with one thatched floor and hard stone walls."""
    return StrongholdActor(
        actor_id="keep-1",
        name="Watchtower",
        workers=10,
        cost_multiplier=1,
        items=[
            FloorItem(item_id="floor-1", name="Ground floor", material="roofThatch", area=100, height=10),
            WallItem(item_id="wall-1", name="Curtain wall", material="stoneHard", thickness=15, quantity=2),
        ],
    )


@pytest.fixture
def vehicle():
    """Undamaged ship with 10 hit points per side."""
    return VehicleActor(
        actor_id="ship-1",
        name="Cog",
        hit_points=VehicleHitPoints(
            forward=VehicleSide(value=10, max=10),
            aft=VehicleSide(value=10, max=10),
            port=VehicleSide(value=10, max=10),
            starboard=VehicleSide(value=10, max=10),
        ),
        move=Movement(value=12),
    )
