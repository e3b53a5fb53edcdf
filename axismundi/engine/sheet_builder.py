"""Presentation context for actor sheets."""

from typing import Any, Optional

from axismundi.config import (
    ABILITY_ABBREVIATION_KEYS,
    ABILITY_LABEL_KEYS,
    MONEY_LABEL_KEYS,
    SAVE_LABEL_KEYS,
    STRONGHOLD_LABEL_KEYS,
)
from axismundi.engine.derivation_engine import DerivationEngine
from axismundi.engine.encumbrance_calculator import EncumbranceCalculator
from axismundi.engine.localization import KeyLocalizer, Localizer
from axismundi.engine.roll_data import RollDataProjector
from axismundi.models.actors import ActorType


class SheetBuilder:
    """Assembles everything a sheet template renders for an actor."""

    @staticmethod
    def labels(actor, localizer: Localizer) -> dict[str, dict[str, str]]:
        """Display labels for the actor's abilities, saves, money and totals."""

        def resolve(keys: dict[str, str], present) -> dict[str, str]:
            return {key: localizer.localize(keys.get(key, key)) or key for key in present}

        labels: dict[str, dict[str, str]] = {}
        if actor.type == ActorType.CHARACTER.value:
            labels["abilities"] = resolve(ABILITY_LABEL_KEYS, actor.abilities)
            labels["ability_abbreviations"] = resolve(ABILITY_ABBREVIATION_KEYS, actor.abilities)
            labels["money"] = resolve(MONEY_LABEL_KEYS, MONEY_LABEL_KEYS)
        if actor.type in (ActorType.CHARACTER.value, ActorType.MONSTER.value):
            labels["saves"] = resolve(SAVE_LABEL_KEYS, SAVE_LABEL_KEYS)
        if actor.type == ActorType.STRONGHOLD.value:
            labels["stronghold"] = resolve(STRONGHOLD_LABEL_KEYS, STRONGHOLD_LABEL_KEYS)
        return labels

    @staticmethod
    def build(actor, localizer: Optional[Localizer] = None) -> dict[str, Any]:
        """
        Build the sheet context for an actor.

        The actor is derived first. Items are classified before any weight
        total or load tier is read.

        Args:
            actor: Stored actor record
            localizer: Resolves label keys; keys are returned as-is by default

        Returns:
            JSON-ready dict
        """
        derived = DerivationEngine.derive(actor)
        report = EncumbranceCalculator.evaluate(derived)

        context: dict[str, Any] = {
            "actor": derived.model_dump(mode="json"),
            "inventory": report.inventory.model_dump(mode="json"),
            "weights": report.weights.model_dump(mode="json"),
            "roll_data": RollDataProjector.project(derived),
            "labels": SheetBuilder.labels(derived, localizer or KeyLocalizer()),
        }
        if report.load_tier is not None:
            context["load_tier"] = int(report.load_tier)
            context["thresholds"] = report.thresholds.model_dump(mode="json")
        return context
