"""Item models owned by actors."""

import uuid
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Weight may be a number, a free-form string such as "2 lb", blank, or the
# currency sentinel "*".
WeightValue = Optional[Union[float, str]]
QuantityValue = Optional[Union[int, float, str]]


class ItemType(str, Enum):
    """Item type discriminators."""

    ITEM = "item"
    CONTAINER = "container"
    WEAPON = "weapon"
    ARMOR = "armor"
    SPELL = "spell"
    SKILL = "pericia"
    FEATURE = "feature"
    MONSTER_SKILL = "monsterSkill"
    FLOOR = "floor"
    WALL = "wall"


class FloorMaterial(str, Enum):
    """Floor and roof materials."""

    FLOOR = "floor"
    ROOF_THATCH = "roofThatch"
    ROOF_WOOD = "roofWood"
    ROOF_SLATE = "roofSlate"


class WallMaterial(str, Enum):
    """Wall materials."""

    STONE_HARD = "stoneHard"
    STONE_SOFT = "stoneSoft"
    BRICK = "brick"
    WOOD = "wood"


class BaseItem(BaseModel):
    """Fields shared by every item."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    item_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique item identifier")
    name: str = Field(description="Item name")
    description: str = Field(default="", description="Item description")


class GearItem(BaseItem):
    """General equipment."""

    type: Literal["item"] = ItemType.ITEM.value
    weight: WeightValue = Field(default=None, description="Per-unit weight or currency sentinel")
    quantity: QuantityValue = Field(default=1, description="Number of units")
    price: float = Field(default=0, description="Price in gold pieces")
    prepared: bool = Field(default=False, description="Kept at hand rather than packed")


class ContainerItem(GearItem):
    """Bag, sack or chest that extends carrying capacity."""

    type: Literal["container"] = ItemType.CONTAINER.value
    capacity: float = Field(default=0, allow_inf_nan=False, description="Weight the container can hold")


class WeaponItem(BaseItem):
    """Weapon, never stacked."""

    type: Literal["weapon"] = ItemType.WEAPON.value
    weight: WeightValue = Field(default=None, description="Weapon weight")
    price: float = Field(default=0, description="Price in gold pieces")
    prepared: bool = Field(default=False, description="Kept at hand rather than packed")
    attack_bonus: int = Field(default=0, description="Weapon attack bonus")
    damage: str = Field(default="1d6", description="Damage formula")
    weapon_type: Literal["m", "r"] = Field(default="m", description="Melee (m) or ranged (r)")


class ArmorItem(BaseItem):
    """Armor, always counted as carried."""

    type: Literal["armor"] = ItemType.ARMOR.value
    weight: WeightValue = Field(default=None, description="Armor weight")
    price: float = Field(default=0, description="Price in gold pieces")
    armor_class: int = Field(default=0, description="Armor class granted")


class SpellItem(BaseItem):
    """Spell known by a caster."""

    type: Literal["spell"] = ItemType.SPELL.value
    spell_level: Optional[int] = Field(default=None, description="Spell level (1-6)")
    prepared: int = Field(default=0, ge=0, description="Times prepared")


class SkillItem(BaseItem):
    """Skill ("pericia"), basic or advanced."""

    type: Literal["pericia"] = ItemType.SKILL.value
    advanced: bool = Field(default=False, description="Advanced skill")
    base_value: int = Field(default=0, description="Base rating before ability bonus")
    ability: Optional[str] = Field(default=None, description="Governing ability key")
    amount: int = Field(default=0, ge=0, description="Calculated rating")
    calculated: bool = Field(default=False, description="Whether amount has been calculated")


class FeatureItem(BaseItem):
    """Class or racial feature."""

    type: Literal["feature"] = ItemType.FEATURE.value
    level: int = Field(default=0, description="Level at which the feature is gained")


class MonsterSkillItem(BaseItem):
    """Special ability of a monster."""

    type: Literal["monsterSkill"] = ItemType.MONSTER_SKILL.value


class FloorItem(BaseItem):
    """Floor or roof of a stronghold."""

    type: Literal["floor"] = ItemType.FLOOR.value
    material: str = Field(default=FloorMaterial.FLOOR.value, description="Floor material")
    area: float = Field(default=0, ge=0, allow_inf_nan=False, description="Surface area")
    height: float = Field(default=0, ge=0, allow_inf_nan=False, description="Height added to the building")
    price: float = Field(default=0, description="Computed price")


class WallItem(BaseItem):
    """Wall section of a stronghold."""

    type: Literal["wall"] = ItemType.WALL.value
    material: str = Field(default=WallMaterial.WOOD.value, description="Wall material")
    thickness: int = Field(default=1, description="Wall thickness")
    quantity: int = Field(default=1, ge=0, description="Number of wall sections")
    hardness: int = Field(default=0, description="Computed hardness")
    price: float = Field(default=0, description="Computed total price")


ItemRecord = Annotated[
    Union[
        GearItem,
        ContainerItem,
        WeaponItem,
        ArmorItem,
        SpellItem,
        SkillItem,
        FeatureItem,
        MonsterSkillItem,
        FloorItem,
        WallItem,
    ],
    Field(discriminator="type"),
]

_item_adapter = TypeAdapter(ItemRecord)


def parse_item(data: dict) -> ItemRecord:
    """Validate a raw item payload into its typed record."""
    return _item_adapter.validate_python(data)
