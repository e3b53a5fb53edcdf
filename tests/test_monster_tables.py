"""Tests for MonsterTables."""

import pytest

from axismundi.engine.monster_tables import MonsterTables, SaveValues
from axismundi.errors import AxisMundiError, InvalidSaveCategoryError

EXPECTED_ATTACK_BONUS = {
    1: 1, 2: 2, 3: 3, 4: 4, 5: 5, 6: 6, 7: 7, 8: 8,
    9: 8,
    10: 9, 11: 9,
    12: 10, 13: 10,
    14: 11, 15: 11,
    16: 12, 17: 12, 18: 12, 19: 12,
    20: 13, 21: 13, 22: 13, 23: 13,
    24: 14, 25: 14, 26: 14, 27: 14,
    28: 15, 29: 15, 30: 15, 31: 15,
}

EXPECTED_SAVES = {
    1: (15, 14, 16, 16, 17),
    2: (14, 13, 15, 15, 16),
    3: (14, 13, 15, 15, 16),
    4: (13, 12, 14, 14, 15),
    5: (12, 11, 13, 13, 14),
    6: (12, 11, 13, 13, 14),
    7: (11, 10, 12, 12, 13),
    8: (10, 9, 11, 11, 12),
    9: (10, 9, 11, 11, 12),
    10: (9, 8, 10, 10, 11),
    11: (8, 7, 9, 9, 10),
    12: (8, 7, 9, 9, 10),
    13: (7, 6, 8, 8, 9),
    14: (6, 5, 7, 7, 8),
}


class TestMonsterAttackBonus:
    """Test suite for MonsterTables.attack_bonus."""

    @pytest.mark.parametrize("hit_dice,bonus", sorted(EXPECTED_ATTACK_BONUS.items()))
    def test_attack_bonus_table(self, hit_dice, bonus):
        """Test every tabled hit dice count."""
        assert MonsterTables.attack_bonus(hit_dice) == bonus

    @pytest.mark.parametrize("hit_dice", [0, -1, 0.5])
    def test_below_one_hit_die(self, hit_dice):
        """Test that creatures under 1 HD get no attack bonus."""
        assert MonsterTables.attack_bonus(hit_dice) == 0

    @pytest.mark.parametrize("hit_dice", [32, 50, 1000])
    def test_ceiling(self, hit_dice):
        """Test that the bonus is clamped at 16 beyond 31 HD."""
        assert MonsterTables.attack_bonus(hit_dice) == 16

    def test_non_finite_hit_dice(self):
        """Test that infinite hit dice clamp and NaN gets no bonus."""
        assert MonsterTables.attack_bonus(float("inf")) == 16
        assert MonsterTables.attack_bonus(float("-inf")) == 0
        assert MonsterTables.attack_bonus(float("nan")) == 0

    def test_fractional_hit_dice_use_whole_tier(self):
        """Test that fractional hit dice attack as their whole tier."""
        assert MonsterTables.attack_bonus(8.5) == 8
        assert MonsterTables.attack_bonus(9.9) == 8
        assert MonsterTables.attack_bonus(31.5) == 15


class TestMonsterSaves:
    """Test suite for MonsterTables.saves."""

    @pytest.mark.parametrize("category,expected", sorted(EXPECTED_SAVES.items()))
    def test_saves_table(self, category, expected):
        """Test every save category row."""
        assert tuple(MonsterTables.saves(category)) == expected

    def test_saves_never_increase(self):
        """Test that each save is non-increasing as the category rises."""
        rows = [MonsterTables.saves(category) for category in range(1, 15)]
        for better, worse in zip(rows, rows[1:]):
            assert all(b >= w for b, w in zip(better, worse))

    def test_row_field_order(self):
        """Test the named order paralysis, death, breath, wands, spells."""
        row = MonsterTables.saves(1)
        assert isinstance(row, SaveValues)
        assert row.paralysis == 15
        assert row.death == 14
        assert row.breath == 16
        assert row.wands == 16
        assert row.spells == 17

    def test_build_saves_model(self):
        """Test that build_saves fills a Saves model."""
        saves = MonsterTables.build_saves(14)
        assert saves.paralysis == 6
        assert saves.spells == 8

    @pytest.mark.parametrize("category", [0, 15, -1, 100, True])
    def test_invalid_category_raises(self, category):
        """Test that categories outside 1-14 raise a descriptive error."""
        with pytest.raises(InvalidSaveCategoryError) as exc_info:
            MonsterTables.saves(category)
        assert exc_info.value.category == category
        assert exc_info.value.valid_range == (1, 14)
        assert "1 and 14" in str(exc_info.value)

    def test_invalid_category_is_rule_error(self):
        """Test that the error belongs to the package hierarchy and ValueError."""
        with pytest.raises(AxisMundiError):
            MonsterTables.saves(20)
        with pytest.raises(ValueError):
            MonsterTables.saves(20)

    def test_interface_completeness(self):
        """Test that MonsterTables has all required methods."""
        assert callable(MonsterTables.attack_bonus)
        assert callable(MonsterTables.saves)
        assert callable(MonsterTables.build_saves)
