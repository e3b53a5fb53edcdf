"""Skill seeding and skill rating calculation."""

import logging
import uuid

from axismundi.models.actors import CharacterActor
from axismundi.models.items import ItemType, SkillItem

logger = logging.getLogger(__name__)

# (name, base value, governing ability, description)
DEFAULT_SKILLS = (
    (
        "Alerta",
        2,
        "wis",
        "Permite detectar emboscadas y ataques por sorpresa antes de que sea demasiado tarde.",
    ),
    (
        "Arquitectura",
        1,
        None,
        "Permite recibir datos sobre construcciones, detectar bajadas imperceptibles, muros de material distinto, etc.",
    ),
    (
        "Escalada",
        1,
        "con",
        "Permite trepar por superficies difíciles o mantenerse agarrado en momentos complicados.",
    ),
    (
        "Detectar",
        1,
        None,
        "Permite encontrar elementos relevantes que pueden haberse pasado por alto.",
    ),
    (
        "Forzar Puertas",
        1,
        "str",
        "Permite desatascar puertas o incluso echarlas abajo.",
    ),
    (
        "Idiomas",
        0,
        "int",
        "Indica la capacidad del personaje para comprender idiomas relacionados con el suyo y aprenderlos "
        "en general. Un especialista puede leer y comprender cualquier texto escrito con una tirada con "
        "éxito de esta pericia, a partir del nivel 4.",
    ),
    (
        "Sigilo",
        2,
        "dex",
        "Permite pillar a enemigos por sorpresa, esconderse, pasar frente a un monstruo dormido y, en "
        "general, mantener tu presencia oculta a los demás.",
    ),
)


class SkillManager:
    """Handles an actor's skills ("pericias")."""

    @staticmethod
    def build_default_skills() -> list[SkillItem]:
        """Fresh starter skills with new ids."""
        return [
            SkillItem(
                item_id=str(uuid.uuid4()),
                name=name,
                description=description,
                advanced=False,
                base_value=base_value,
                ability=ability,
            )
            for name, base_value, ability, description in DEFAULT_SKILLS
        ]

    @staticmethod
    def ensure_default_skills(actor):
        """
        Seed starter skills on an actor that has none.

        Call before derivation; the caller persists the created items.

        Args:
            actor: Actor record

        Returns:
            Tuple of (actor, created_items). Actors that already own a skill
            come back unchanged with no created items.
        """
        if actor.items_of_type(ItemType.SKILL):
            return actor, []

        created = SkillManager.build_default_skills()
        logger.info(f"Seeding {len(created)} default skills on {actor.type} {actor.actor_id}")
        return actor.model_copy(update={"items": [*actor.items, *created]}), created

    @staticmethod
    def skill_rating(skill: SkillItem, actor: CharacterActor) -> int:
        """Base value plus the governing ability bonus, never below 0."""
        bonus = 0
        if skill.ability:
            ability = actor.abilities.get(skill.ability)
            if ability is not None:
                bonus = ability.bonus
        return max(0, skill.base_value + bonus)

    @staticmethod
    def calculate_skill_values(actor: CharacterActor, only_uncalculated: bool = False) -> CharacterActor:
        """
        Compute every skill's rating from derived ability bonuses.

        Args:
            actor: Derived character
            only_uncalculated: Skip advanced skills already calculated

        Returns:
            Character with skill amounts filled in
        """
        items = []
        for item in actor.items:
            if item.type == ItemType.SKILL.value and not (
                only_uncalculated and item.advanced and item.calculated
            ):
                item = item.model_copy(
                    update={"amount": SkillManager.skill_rating(item, actor), "calculated": True}
                )
            items.append(item)
        return actor.model_copy(update={"items": items, "skills_calculated": True})
