"""Vehicle hit point aggregation and damage movement penalties."""

from axismundi.config import VEHICLE_SIDES
from axismundi.models.actors import Movement, VehicleHitPoints


class VehicleCalculator:
    """Aggregates per-side hit points and derives movement."""

    @staticmethod
    def aggregate_hit_points(hit_points: VehicleHitPoints) -> VehicleHitPoints:
        """Return hit_points with value and max set to the sums over all sides."""
        sides = [getattr(hit_points, side) for side in VEHICLE_SIDES]
        return hit_points.model_copy(
            update={
                "value": sum(side.value for side in sides),
                "max": sum(side.max for side in sides),
            }
        )

    @staticmethod
    def destroyed_sides(hit_points: VehicleHitPoints) -> int:
        """Count sides reduced to 0 hit points that had hit points to lose."""
        return sum(
            1
            for side in (getattr(hit_points, name) for name in VEHICLE_SIDES)
            if side.value == 0 and side.max != 0
        )

    @staticmethod
    def current_move(full_move: int, destroyed_sides: int) -> int:
        """
        Movement left after side damage.

        Args:
            full_move: Undamaged movement
            destroyed_sides: Sides at 0 hit points

        Returns:
            Full movement with no destroyed side, half (floored) with one, 0 otherwise
        """
        if destroyed_sides == 0:
            return full_move
        if destroyed_sides == 1:
            return full_move // 2
        return 0

    @staticmethod
    def apply_movement(hit_points: VehicleHitPoints, move: Movement) -> Movement:
        """Return move with current movement derived from side damage."""
        destroyed = VehicleCalculator.destroyed_sides(hit_points)
        return move.model_copy(update={"current": VehicleCalculator.current_move(move.value, destroyed)})
