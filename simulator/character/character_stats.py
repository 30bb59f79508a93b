"""
Character stats module for the simulator.

Combines the player's base stats with the bonuses granted by equipment and
talents into the resolved stat block used for a whole encounter.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.constants import (
    BASE_ATTACK_DAMAGE,
    BASE_ATTACK_PERIOD,
    BASE_CRIT_MULTIPLIER,
    DEFAULT_MAX_HEALTH,
)


class BaseStats(BaseModel):
    """The player's stats before any equipment or talent bonus."""

    attack_damage: float = Field(
        default=BASE_ATTACK_DAMAGE,
        description="Damage dealt per attack.",
    )
    attack_period: float = Field(
        default=BASE_ATTACK_PERIOD,
        description="Seconds between two attacks.",
    )
    max_health: float = Field(
        default=DEFAULT_MAX_HEALTH,
        description="Maximum health.",
    )
    crit_damage_multiplier: float = Field(
        default=BASE_CRIT_MULTIPLIER,
        description="Damage multiplier of a critical hit.",
    )


class EquipmentBonuses(BaseModel):
    """Aggregate bonuses of every equipped item."""

    attack_damage: float = 0.0
    attack_speed: float = Field(
        default=0.0,
        description="Delta added to the attack period, in seconds.",
    )
    max_health: float = 0.0
    armor: float = 0.0
    dodge: float = 0.0
    critical_chance: float = 0.0
    lifesteal: float = 0.0
    xp_bonus: float = 0.0
    gold_bonus: float = 0.0


class TalentBonuses(BaseModel):
    """Aggregate bonuses of every unlocked talent."""

    # Additive bonuses.
    attack_damage: float = 0.0
    max_health: float = 0.0
    attack_speed: float = Field(
        default=0.0,
        description="Delta added to the attack period, in seconds.",
    )
    # Percentage multipliers.
    damage_multiplier: float = 0.0
    health_multiplier: float = 0.0
    critical_chance: float = 0.0
    critical_damage: float = Field(
        default=0.0,
        description="Added to the critical damage multiplier.",
    )
    # Special stats.
    lifesteal: float = 0.0
    dodge: float = 0.0
    armor: float = 0.0
    xp_bonus: float = 0.0
    gold_bonus: float = 0.0


class ResolvedStats(BaseModel):
    """
    The fully combined stat block used for one combat session.

    Fractional fields are plain sums of the bonuses and are not clamped: the
    providers are expected to keep them within [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    attack_damage: float
    attack_period: float
    max_health: float
    crit_chance: float = 0.0
    crit_damage_multiplier: float = BASE_CRIT_MULTIPLIER
    lifesteal_fraction: float = 0.0
    dodge_fraction: float = 0.0
    armor_fraction: float = 0.0
    xp_bonus: float = 0.0
    gold_bonus: float = 0.0


def resolve_stats(
    base: BaseStats,
    equipment: EquipmentBonuses | None = None,
    talents: TalentBonuses | None = None,
) -> ResolvedStats:
    """
    Resolves the stats of the player for a combat session.

    Additive bonuses are summed first; the talent percentage multipliers are
    applied on top of the summed value.

    Args:
        base (BaseStats):
            The base stats of the player.
        equipment (EquipmentBonuses | None):
            The equipment bonuses, None counts as no bonus.
        talents (TalentBonuses | None):
            The talent bonuses, None counts as no bonus.

    Returns:
        ResolvedStats:
            The resolved stat block.

    """
    equipment = equipment or EquipmentBonuses()
    talents = talents or TalentBonuses()

    attack_damage = base.attack_damage + equipment.attack_damage + talents.attack_damage
    attack_damage *= 1.0 + talents.damage_multiplier

    max_health = base.max_health + equipment.max_health + talents.max_health
    max_health *= 1.0 + talents.health_multiplier

    attack_period = base.attack_period + equipment.attack_speed + talents.attack_speed

    return ResolvedStats(
        attack_damage=attack_damage,
        attack_period=attack_period,
        max_health=max_health,
        crit_chance=equipment.critical_chance + talents.critical_chance,
        crit_damage_multiplier=base.crit_damage_multiplier + talents.critical_damage,
        lifesteal_fraction=equipment.lifesteal + talents.lifesteal,
        dodge_fraction=equipment.dodge + talents.dodge,
        armor_fraction=equipment.armor + talents.armor,
        xp_bonus=equipment.xp_bonus + talents.xp_bonus,
        gold_bonus=equipment.gold_bonus + talents.gold_bonus,
    )
