"""
Tests for the resolution of the player's stats.
"""

import pytest
from character.character_stats import (
    BaseStats,
    EquipmentBonuses,
    TalentBonuses,
    resolve_stats,
)


@pytest.fixture
def base():
    return BaseStats(
        attack_damage=10.0,
        attack_period=1.5,
        max_health=100.0,
        crit_damage_multiplier=2.0,
    )


def test_no_bonuses_keeps_base_values(base: BaseStats):
    stats = resolve_stats(base)

    assert stats.attack_damage == 10.0
    assert stats.attack_period == 1.5
    assert stats.max_health == 100.0
    assert stats.crit_chance == 0.0
    assert stats.crit_damage_multiplier == 2.0
    assert stats.lifesteal_fraction == 0.0
    assert stats.dodge_fraction == 0.0
    assert stats.armor_fraction == 0.0


def test_talent_multiplier_applies_after_additive_bonuses(base: BaseStats):
    equipment = EquipmentBonuses(attack_damage=5.0)
    talents = TalentBonuses(damage_multiplier=0.2)

    stats = resolve_stats(base, equipment, talents)

    assert stats.attack_damage == pytest.approx(18.0), "(10 + 5) * 1.2"


def test_health_sums_then_multiplies(base: BaseStats):
    equipment = EquipmentBonuses(max_health=20.0)
    talents = TalentBonuses(max_health=30.0, health_multiplier=0.5)

    stats = resolve_stats(base, equipment, talents)

    assert stats.max_health == pytest.approx(225.0), "(100 + 20 + 30) * 1.5"


def test_attack_speed_is_a_period_delta(base: BaseStats):
    stats = resolve_stats(
        base,
        EquipmentBonuses(attack_speed=-0.3),
        TalentBonuses(attack_speed=-0.2),
    )

    assert stats.attack_period == pytest.approx(1.0)


def test_fractions_are_summed(base: BaseStats):
    equipment = EquipmentBonuses(
        critical_chance=0.05,
        lifesteal=0.1,
        dodge=0.02,
        armor=0.15,
        xp_bonus=0.1,
        gold_bonus=0.2,
    )
    talents = TalentBonuses(
        critical_chance=0.05,
        lifesteal=0.05,
        dodge=0.03,
        armor=0.05,
        xp_bonus=0.05,
        gold_bonus=0.1,
        critical_damage=0.5,
    )

    stats = resolve_stats(base, equipment, talents)

    assert stats.crit_chance == pytest.approx(0.1)
    assert stats.lifesteal_fraction == pytest.approx(0.15)
    assert stats.dodge_fraction == pytest.approx(0.05)
    assert stats.armor_fraction == pytest.approx(0.2)
    assert stats.xp_bonus == pytest.approx(0.15)
    assert stats.gold_bonus == pytest.approx(0.3)
    assert stats.crit_damage_multiplier == pytest.approx(2.5)


def test_values_are_not_clamped(base: BaseStats):
    stats = resolve_stats(base, EquipmentBonuses(armor=0.8), TalentBonuses(armor=0.5))

    assert stats.armor_fraction == pytest.approx(1.3)
