"""Stronghold construction pricing."""

import logging
import math
from types import MappingProxyType
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from axismundi.models.items import FloorItem, FloorMaterial, WallItem, WallMaterial

logger = logging.getLogger(__name__)

# Price per 10 units of area
FLOOR_PRICE_MULTIPLIERS = MappingProxyType(
    {
        FloorMaterial.FLOOR.value: 1,
        FloorMaterial.ROOF_THATCH.value: 1,
        FloorMaterial.ROOF_WOOD.value: 2,
        FloorMaterial.ROOF_SLATE.value: 4,
    }
)
DEFAULT_FLOOR_PRICE_MULTIPLIER = 1


class WallSpec(NamedTuple):
    """Hardness and unit prices of a wall material."""

    hardness: int
    prices_by_thickness: MappingProxyType
    default_price: int
    fixed_thickness: int | None = None


WALL_SPECS = MappingProxyType(
    {
        WallMaterial.STONE_HARD.value: WallSpec(16, MappingProxyType({15: 350, 10: 260, 5: 90}), 40),
        WallMaterial.STONE_SOFT.value: WallSpec(12, MappingProxyType({10: 200, 5: 70}), 30),
        WallMaterial.BRICK.value: WallSpec(8, MappingProxyType({5: 50}), 20),
        WallMaterial.WOOD.value: WallSpec(6, MappingProxyType({}), 10, fixed_thickness=1),
    }
)
DEFAULT_WALL_SPEC = WALL_SPECS[WallMaterial.WOOD.value]


class StrongholdSummary(BaseModel):
    """Aggregate construction figures for a stronghold."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    height: float = Field(description="Sum of floor heights")
    base_cost: float = Field(description="Sum of floor and wall prices")
    cost: float = Field(description="Cost after height surcharge and multiplier")
    build_time: int = Field(description="Days to build")


class StrongholdCalculator:
    """Prices floors and walls and totals a stronghold."""

    @staticmethod
    def floor_price(material: str, area: float) -> float:
        """Price of a floor: area / 10 times the material multiplier."""
        return area / 10 * FLOOR_PRICE_MULTIPLIERS.get(material, DEFAULT_FLOOR_PRICE_MULTIPLIER)

    @staticmethod
    def price_floor(floor: FloorItem) -> FloorItem:
        """Return floor with its price resolved."""
        return floor.model_copy(update={"price": StrongholdCalculator.floor_price(floor.material, floor.area)})

    @staticmethod
    def wall_stats(material: str, thickness: int) -> tuple[int, int, int]:
        """
        Hardness, effective thickness and unit price of a wall section.

        Unknown materials are built as wood.

        Returns:
            Tuple of (hardness, thickness, unit_price)
        """
        wall_spec = WALL_SPECS.get(material, DEFAULT_WALL_SPEC)
        if wall_spec.fixed_thickness is not None:
            thickness = wall_spec.fixed_thickness
        unit_price = wall_spec.prices_by_thickness.get(thickness, wall_spec.default_price)
        return wall_spec.hardness, thickness, unit_price

    @staticmethod
    def price_wall(wall: WallItem) -> WallItem:
        """Return wall with hardness, thickness and total price resolved."""
        hardness, thickness, unit_price = StrongholdCalculator.wall_stats(wall.material, wall.thickness)
        return wall.model_copy(
            update={
                "hardness": hardness,
                "thickness": thickness,
                "price": unit_price * wall.quantity,
            }
        )

    @staticmethod
    def build_time(cost: float, workers: int) -> int:
        """
        Days needed to build.

        More workers shorten the build, but never below the square root of
        the cost. workers must be positive.
        """
        return math.ceil(max(cost / workers, math.sqrt(cost)))

    @staticmethod
    def summarize(
        floors: list[FloorItem],
        walls: list[WallItem],
        workers: int,
        cost_multiplier: float = 1,
    ) -> StrongholdSummary:
        """
        Total height, cost and build time from already priced components.

        Args:
            floors: Floors with prices resolved
            walls: Walls with prices resolved
            workers: Workers on the build
            cost_multiplier: Regional cost multiplier

        Returns:
            StrongholdSummary
        """
        height = sum(floor.height for floor in floors)
        base_cost = sum(floor.price for floor in floors) + sum(wall.price for wall in walls)
        # each 10 units of height adds 10% to the summed cost
        cost = (base_cost + base_cost * (height / 100)) * cost_multiplier
        build_time = StrongholdCalculator.build_time(cost, workers)
        logger.debug(
            f"Stronghold summary: height={height}, base_cost={base_cost}, cost={cost}, build_time={build_time}"
        )
        return StrongholdSummary(height=height, base_cost=base_cost, cost=cost, build_time=build_time)
