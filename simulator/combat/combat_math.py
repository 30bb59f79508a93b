"""
Combat math module for the simulator.

The formulas of the auto-battle: critical hits on player attacks, dodge and
armor on monster attacks, lifesteal and reward bonuses. Every random decision
takes a single uniform draw from the given random source.
"""

import random

from character.character_stats import ResolvedStats
from core.utils import scale_reward
from items.loot import roll_chance


def calculate_player_damage(
    base_damage: float,
    stats: ResolvedStats,
    rng: random.Random,
) -> tuple[float, bool]:
    """
    Calculates the damage of a player attack, critical hits included.

    Args:
        base_damage (float): The resolved attack damage.
        stats (ResolvedStats): The player's resolved stats.
        rng (random.Random): The random source.

    Returns:
        tuple[float, bool]: The damage and whether it was a critical hit.

    """
    if roll_chance(rng, stats.crit_chance):
        return base_damage * stats.crit_damage_multiplier, True
    return base_damage, False


def calculate_monster_damage(
    base_damage: float,
    stats: ResolvedStats,
    rng: random.Random,
) -> tuple[float, bool]:
    """
    Calculates the damage a monster attack deals to the player.

    A dodged attack deals no damage; otherwise armor removes its fraction of
    the damage.

    Args:
        base_damage (float): The monster's attack damage.
        stats (ResolvedStats): The player's resolved stats.
        rng (random.Random): The random source.

    Returns:
        tuple[float, bool]: The damage and whether it was dodged.

    """
    if roll_chance(rng, stats.dodge_fraction):
        return 0.0, True
    if stats.armor_fraction > 0:
        return base_damage * (1.0 - stats.armor_fraction), False
    return base_damage, False


def calculate_lifesteal(damage: float, lifesteal_fraction: float) -> float:
    """Returns the health the player recovers from dealing `damage`."""
    return damage * lifesteal_fraction


def calculate_rewards(base_xp: int, base_gold: int, stats: ResolvedStats) -> tuple[int, int]:
    """
    Applies the XP and gold bonuses to a kill's rewards.

    Args:
        base_xp (int): The monster's experience reward.
        base_gold (int): The monster's gold reward.
        stats (ResolvedStats): The player's resolved stats.

    Returns:
        tuple[int, int]: The experience and gold to grant, rounded half away
        from zero.

    """
    return scale_reward(base_xp, stats.xp_bonus), scale_reward(base_gold, stats.gold_bonus)
