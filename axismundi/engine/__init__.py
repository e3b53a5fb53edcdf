"""Derivation engine package."""

from axismundi.engine.ability_calculator import AbilityCalculator
from axismundi.engine.actor_rules import RULES, ActorRules
from axismundi.engine.derivation_engine import DerivationEngine
from axismundi.engine.encumbrance_calculator import EncumbranceCalculator, LoadTier, WeightTotals
from axismundi.engine.inventory_manager import ClassifiedInventory, InventoryManager
from axismundi.engine.localization import KeyLocalizer, Localizer
from axismundi.engine.monster_tables import MonsterTables
from axismundi.engine.roll_data import RollDataProjector
from axismundi.engine.roll_formulas import RollFormulaBuilder
from axismundi.engine.sheet_builder import SheetBuilder
from axismundi.engine.skill_manager import SkillManager
from axismundi.engine.stronghold_calculator import StrongholdCalculator
from axismundi.engine.vehicle_calculator import VehicleCalculator

__all__ = [
    "AbilityCalculator",
    "ActorRules",
    "RULES",
    "DerivationEngine",
    "EncumbranceCalculator",
    "LoadTier",
    "WeightTotals",
    "ClassifiedInventory",
    "InventoryManager",
    "KeyLocalizer",
    "Localizer",
    "MonsterTables",
    "RollDataProjector",
    "RollFormulaBuilder",
    "SheetBuilder",
    "SkillManager",
    "StrongholdCalculator",
    "VehicleCalculator",
]
