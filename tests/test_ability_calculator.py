"""Tests for AbilityCalculator."""

import pytest

from axismundi.engine.ability_calculator import AbilityCalculator
from axismundi.models.actors import AbilityScore

EXPECTED_BONUSES = {
    3: -3,
    4: -2,
    5: -2,
    6: -1,
    7: -1,
    8: -1,
    9: 0,
    10: 0,
    11: 0,
    12: 0,
    13: 1,
    14: 1,
    15: 1,
    16: 2,
    17: 2,
    18: 3,
}


class TestAbilityCalculator:
    """Test suite for AbilityCalculator."""

    @pytest.mark.parametrize("score,bonus", sorted(EXPECTED_BONUSES.items()))
    def test_bonus_table(self, score, bonus):
        """Test every score from 3 to 18 against the modifier table."""
        assert AbilityCalculator.calculate_bonus(score) == bonus

    @pytest.mark.parametrize("score", [-5, 0, 1, 2, 19, 20, 25, 100])
    def test_out_of_range_is_neutral(self, score):
        """Test that scores outside 3-18 give no modifier."""
        assert AbilityCalculator.calculate_bonus(score) == 0

    def test_apply_bonuses_recomputes_stale_bonus(self):
        """Test that a stored bonus is replaced by the one the score implies."""
        abilities = {"str": AbilityScore(value=18, bonus=0), "dex": AbilityScore(value=10, bonus=2)}
        result = AbilityCalculator.apply_bonuses(abilities)
        assert result["str"].bonus == 3
        assert result["dex"].bonus == 0

    def test_apply_bonuses_leaves_input_untouched(self):
        """Test that the input mapping keeps its original bonuses."""
        abilities = {"str": AbilityScore(value=4)}
        AbilityCalculator.apply_bonuses(abilities)
        assert abilities["str"].bonus == 0

    def test_interface_completeness(self):
        """Test that AbilityCalculator has all required methods."""
        assert callable(AbilityCalculator.calculate_bonus)
        assert callable(AbilityCalculator.apply_bonuses)
