"""Exceptions raised by the derivation engine."""


class AxisMundiError(Exception):
    """Base class for rule errors."""


class InvalidSaveCategoryError(AxisMundiError, ValueError):
    """Monster save category has no row in the saves table."""

    def __init__(self, category, valid_range: tuple[int, int]) -> None:
        self.category = category
        self.valid_range = valid_range
        low, high = valid_range
        super().__init__(
            f"Invalid monster save category {category!r}: expected an integer between {low} and {high}"
        )


class InvalidSpellLevelError(AxisMundiError, ValueError):
    """Spell level falls outside the spellbook levels."""

    def __init__(self, spell_level, item_id: str) -> None:
        self.spell_level = spell_level
        self.item_id = item_id
        super().__init__(f"Spell {item_id} has invalid level {spell_level!r}")


class UnknownActorTypeError(AxisMundiError, KeyError):
    """No rule set is registered for an actor type."""

    def __init__(self, actor_type) -> None:
        self.actor_type = actor_type
        super().__init__(f"No rules registered for actor type {actor_type!r}")

    def __str__(self) -> str:
        return self.args[0]
