"""Carried weight accumulation and load tiers.

Weights are folded with pure reducers: each takes a running total plus one
item's weight and quantity and returns the new total. Malformed weights or
quantities leave the total unchanged, so the totals never decrease.
"""

import logging
import math
import re
from enum import IntEnum
from functools import reduce
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from axismundi.config import (
    CURRENCY_WEIGHT_SENTINEL,
    DEFAULT_CARRIED_COINS_PER_WEIGHT,
    DEFAULT_PREPARED_COINS_PER_WEIGHT,
    DEFAULT_PREPARED_UNIT_WEIGHT,
)
from axismundi.engine.inventory_manager import ClassifiedInventory, InventoryManager
from axismundi.models.actors import ActorType, Money
from axismundi.models.items import ItemType

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class LoadTier(IntEnum):
    """Load tiers relative to strength."""

    UNENCUMBERED = 0
    LIGHT = 1
    MEDIUM = 2
    HEAVY = 3
    OVERLOADED = 4


class WeightTotals(BaseModel):
    """Running weight totals."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    prepared: float = Field(default=0, ge=0, description="Weight of prepared gear")
    carried: float = Field(default=0, ge=0, description="Weight of packed gear, armor and coins")
    max_carried: float = Field(default=0, ge=0, description="Capacity of prepared containers")

    @computed_field
    def prepared_value(self) -> int:
        """Prepared weight as displayed, fractions rounded up."""
        return math.ceil(self.prepared)

    @computed_field
    def carried_value(self) -> int:
        """Carried weight as displayed, fractions rounded up."""
        return math.ceil(self.carried)


class LoadThresholds(BaseModel):
    """Heaviest carried weight still inside each tier."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    light: float = Field(description="Upper bound of the light tier")
    medium: float = Field(description="Upper bound of the medium tier")
    heavy: float = Field(description="Upper bound of the heavy tier")


class EncumbranceReport(BaseModel):
    """Classified inventory with its weight totals."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    inventory: ClassifiedInventory
    weights: WeightTotals
    load_tier: Optional[LoadTier] = Field(default=None, description="Load tier, characters only")
    thresholds: Optional[LoadThresholds] = Field(default=None, description="Tier bounds, characters only")


def parse_weight(weight) -> Optional[float]:
    """
    Numeric value of a weight, read from its leading number.

    Returns:
        The weight, or None if it has no numeric reading
    """
    if weight is None or isinstance(weight, bool):
        return None
    if isinstance(weight, (int, float)):
        return float(weight) if math.isfinite(weight) else None
    match = _LEADING_NUMBER.match(str(weight))
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_quantity(quantity) -> Optional[float]:
    """Positive finite quantity, or None when the quantity contributes nothing."""
    if quantity is None or isinstance(quantity, bool):
        return None
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def add_weight(total: float, weight, quantity, coins_per_weight: int) -> float:
    """
    Add one entry's weight to a running total.

    A numeric weight adds weight * quantity. The currency sentinel adds
    quantity // coins_per_weight when that is positive. Anything else, or an
    invalid quantity, adds nothing.
    """
    count = parse_quantity(quantity)
    if count is None:
        return total

    numeric = parse_weight(weight)
    if numeric is not None:
        return total + numeric * count if numeric > 0 else total

    if weight == CURRENCY_WEIGHT_SENTINEL:
        coin_weight = math.floor(count / coins_per_weight)
        if coin_weight > 0:
            return total + coin_weight
    return total


def _exact_number(weight) -> Optional[float]:
    """Weight that is entirely a finite number, such as 2 or "2"; "2 lb" is not."""
    if weight is None or isinstance(weight, bool):
        return None
    try:
        value = float(weight)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def prepared_unit_weight(weight):
    """
    Weight used for prepared gear.

    Only positive plain numbers are kept. Missing, free-form ("2 lb") or
    non-positive weights count as 1. The currency sentinel is kept.
    """
    if weight == CURRENCY_WEIGHT_SENTINEL:
        return weight
    numeric = _exact_number(weight)
    if numeric is None or numeric <= 0:
        return DEFAULT_PREPARED_UNIT_WEIGHT
    return numeric


def add_prepared_weight(total: float, weight, quantity) -> float:
    """Add prepared gear to the prepared total."""
    return add_weight(total, prepared_unit_weight(weight), quantity, DEFAULT_PREPARED_COINS_PER_WEIGHT)


def add_carried_weight(total: float, weight, quantity) -> float:
    """Add packed gear to the carried total."""
    return add_weight(total, weight, quantity, DEFAULT_CARRIED_COINS_PER_WEIGHT)


def fold_item(totals: WeightTotals, item) -> WeightTotals:
    """Return totals with one gear, weapon or armor item accumulated."""
    if item.type in (ItemType.ITEM.value, ItemType.CONTAINER.value):
        if parse_quantity(item.quantity) is None and item.quantity not in (0, None):
            logger.warning(f"Item {item.item_id} has invalid quantity {item.quantity!r}; no weight added")
        if item.prepared:
            updates = {"prepared": add_prepared_weight(totals.prepared, item.weight, item.quantity)}
            if item.type == ItemType.CONTAINER.value:
                updates["max_carried"] = totals.max_carried + max(item.capacity, 0)
            return totals.model_copy(update=updates)
        return totals.model_copy(update={"carried": add_carried_weight(totals.carried, item.weight, item.quantity)})

    # Weapons and armor never stack
    if item.type == ItemType.WEAPON.value:
        if item.prepared:
            return totals.model_copy(update={"prepared": add_prepared_weight(totals.prepared, item.weight, 1)})
        return totals.model_copy(update={"carried": add_carried_weight(totals.carried, item.weight, 1)})

    if item.type == ItemType.ARMOR.value:
        return totals.model_copy(update={"carried": add_carried_weight(totals.carried, item.weight, 1)})

    return totals


def coin_count(money: Money) -> float:
    """Total coins of every denomination; every coin weighs the same."""
    return money.pp + money.gp + money.ep + money.sp + money.cp


def fold_money(totals: WeightTotals, money: Money) -> WeightTotals:
    """Return totals with coin weight added to the carried total."""
    carried = add_carried_weight(totals.carried, CURRENCY_WEIGHT_SENTINEL, coin_count(money))
    return totals.model_copy(update={"carried": carried})


class EncumbranceCalculator:
    """Weight totals and load tiers for an actor's inventory."""

    @staticmethod
    def calculate_weights(inventory: ClassifiedInventory, money: Optional[Money] = None) -> WeightTotals:
        """
        Fold classified gear, weapons, armor and money into weight totals.

        Args:
            inventory: Classified items
            money: Coins carried, if the actor has any

        Returns:
            WeightTotals
        """
        items = [*inventory.gear, *inventory.weapons, *inventory.armors]
        totals = reduce(fold_item, items, WeightTotals())
        if money is not None:
            totals = fold_money(totals, money)
        return totals

    @staticmethod
    def load_tier(carried_weight: float, strength: int) -> LoadTier:
        """
        Load tier for a carried weight.

        Args:
            carried_weight: Raw carried weight
            strength: Raw strength score

        Returns:
            UNENCUMBERED at exactly 0, then LIGHT below strength, MEDIUM below
            4x strength, HEAVY below 5x strength, OVERLOADED beyond
        """
        if carried_weight == 0:
            return LoadTier.UNENCUMBERED
        if carried_weight < strength:
            return LoadTier.LIGHT
        if carried_weight < strength * 4:
            return LoadTier.MEDIUM
        if carried_weight < strength * 5:
            return LoadTier.HEAVY
        return LoadTier.OVERLOADED

    @staticmethod
    def load_thresholds(strength: int) -> LoadThresholds:
        """Heaviest weight inside each tier for a strength score."""
        return LoadThresholds(light=strength - 1, medium=strength * 4 - 1, heavy=strength * 5 - 1)

    @staticmethod
    def evaluate(actor) -> EncumbranceReport:
        """
        Classify an actor's items, then total their weight.

        Load tier and thresholds are only computed for characters.
        """
        inventory = InventoryManager.classify_items(actor.items)
        money = getattr(actor, "money", None)
        weights = EncumbranceCalculator.calculate_weights(inventory, money)

        if actor.type != ActorType.CHARACTER.value:
            return EncumbranceReport(inventory=inventory, weights=weights)

        strength = actor.abilities["str"].value if "str" in actor.abilities else 0
        return EncumbranceReport(
            inventory=inventory,
            weights=weights,
            load_tier=EncumbranceCalculator.load_tier(weights.carried, strength),
            thresholds=EncumbranceCalculator.load_thresholds(strength),
        )
