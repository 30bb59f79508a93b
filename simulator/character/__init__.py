"""
Character system module for the Idle Auto-Battle Simulator.

This module handles the combatants of an encounter: stat resolution from
base, equipment and talent bonuses, the monster templates and the mutable
combat records of the player and of each monster.
"""

from .character_stats import (
    BaseStats,
    EquipmentBonuses,
    ResolvedStats,
    TalentBonuses,
    resolve_stats,
)
from .combatant import CombatantState, MonsterSlot
from .monster import MonsterTemplate

__all__ = [
    # Import from character_stats.py
    "BaseStats",
    "EquipmentBonuses",
    "ResolvedStats",
    "TalentBonuses",
    "resolve_stats",
    # Import from combatant.py
    "CombatantState",
    "MonsterSlot",
    # Import from monster.py
    "MonsterTemplate",
]
