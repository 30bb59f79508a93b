"""
Core system module for the Idle Auto-Battle Simulator.

This module contains the fundamental components shared by the combat core,
including game constants, configuration, logging, content loading and
display utilities.
"""

from .config import CombatConfig, load_config
from .constants import ActivityType, ActorType, CombatPhase
from .logging import get_logger, log_debug, log_info, setup_logging
from .utils import (
    ccapture,
    clamp01,
    cprint,
    crule,
    make_bar,
    round_half_away_from_zero,
    scale_reward,
)

__all__ = [
    # Import from config.py
    "CombatConfig",
    "load_config",
    # Import from constants.py
    "ActivityType",
    "ActorType",
    "CombatPhase",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_info",
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "clamp01",
    "cprint",
    "crule",
    "make_bar",
    "round_half_away_from_zero",
    "scale_reward",
]
