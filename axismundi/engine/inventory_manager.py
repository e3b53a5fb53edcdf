"""Inventory classification."""

from pydantic import BaseModel, ConfigDict, Field

from axismundi.config import SPELL_LEVELS
from axismundi.errors import InvalidSpellLevelError
from axismundi.models.items import (
    ArmorItem,
    ContainerItem,
    FeatureItem,
    GearItem,
    ItemRecord,
    ItemType,
    MonsterSkillItem,
    SkillItem,
    SpellItem,
    WeaponItem,
)


def _empty_spellbook() -> dict[int, list[SpellItem]]:
    return {level: [] for level in SPELL_LEVELS}


class ClassifiedInventory(BaseModel):
    """An actor's items sorted into the buckets a sheet displays."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    gear: list[GearItem | ContainerItem] = Field(default_factory=list, description="General gear and containers")
    weapons: list[WeaponItem] = Field(default_factory=list, description="Weapons")
    armors: list[ArmorItem] = Field(default_factory=list, description="Armor")
    spells: dict[int, list[SpellItem]] = Field(default_factory=_empty_spellbook, description="Spells by level")
    basic_skills: list[SkillItem] = Field(default_factory=list, description="Basic skills")
    advanced_skills: list[SkillItem] = Field(default_factory=list, description="Advanced skills")
    features: list[FeatureItem] = Field(default_factory=list, description="Features, lowest level first")
    monster_skills: list[MonsterSkillItem] = Field(default_factory=list, description="Monster skills")


class InventoryManager:
    """Sorts an actor's items by type."""

    @staticmethod
    def classify_items(items: list[ItemRecord]) -> ClassifiedInventory:
        """
        Classify items into display buckets.

        Floors and walls belong to strongholds and are not bucketed. Spells
        without a level are left out of the spellbook.

        Args:
            items: Items owned by an actor

        Returns:
            ClassifiedInventory

        Raises:
            InvalidSpellLevelError: If a spell level is outside the spellbook
        """
        buckets = {
            "gear": [],
            "weapons": [],
            "armors": [],
            "basic_skills": [],
            "advanced_skills": [],
            "features": [],
            "monster_skills": [],
        }
        spells = _empty_spellbook()

        for item in items:
            if item.type in (ItemType.ITEM.value, ItemType.CONTAINER.value):
                buckets["gear"].append(item)
            elif item.type == ItemType.WEAPON.value:
                buckets["weapons"].append(item)
            elif item.type == ItemType.ARMOR.value:
                buckets["armors"].append(item)
            elif item.type == ItemType.SPELL.value:
                if item.spell_level is None:
                    continue
                if item.spell_level not in spells:
                    raise InvalidSpellLevelError(item.spell_level, item.item_id)
                spells[item.spell_level].append(item)
            elif item.type == ItemType.SKILL.value:
                if item.advanced:
                    buckets["advanced_skills"].append(item)
                else:
                    buckets["basic_skills"].append(item)
            elif item.type == ItemType.FEATURE.value:
                buckets["features"].append(item)
            elif item.type == ItemType.MONSTER_SKILL.value:
                buckets["monster_skills"].append(item)

        # sorted() is stable, so features of the same level keep their order
        buckets["features"] = sorted(buckets["features"], key=lambda feature: feature.level)

        return ClassifiedInventory(spells=spells, **buckets)
