"""
Configuration module for the simulator.

Holds the tuning values of the combat core and loads them from a JSON file.
"""

import json
from pathlib import Path

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError

from core.constants import (
    BASE_ATTACK_DAMAGE,
    BASE_ATTACK_PERIOD,
    BASE_CRIT_MULTIPLIER,
    DEFAULT_MAX_HEALTH,
    DEFAULT_MOB_COUNT,
    MAX_MOB_COUNT,
    MIN_MOB_COUNT,
    RESPAWN_DELAY,
)


class CombatConfig(BaseModel):
    """Tuning values of the combat core."""

    base_attack_damage: float = Field(
        default=BASE_ATTACK_DAMAGE,
        description="Player damage per attack before equipment and talents.",
        ge=0,
    )
    base_attack_period: float = Field(
        default=BASE_ATTACK_PERIOD,
        description="Seconds between player attacks before equipment and talents.",
        gt=0,
    )
    default_max_health: float = Field(
        default=DEFAULT_MAX_HEALTH,
        description="Player max health used when no progression service is available.",
        gt=0,
    )
    base_crit_multiplier: float = Field(
        default=BASE_CRIT_MULTIPLIER,
        description="Damage multiplier of a critical hit before talents.",
        ge=1,
    )
    respawn_delay: float = Field(
        default=RESPAWN_DELAY,
        description="Seconds between the death of the last monster and the next group.",
        ge=0,
    )
    default_mob_count: int = Field(
        default=DEFAULT_MOB_COUNT,
        description="Number of monsters spawned when the caller does not choose.",
        ge=1,
    )
    min_mob_count: int = Field(
        default=MIN_MOB_COUNT,
        description="Smallest accepted number of simultaneous monsters.",
        ge=1,
    )
    max_mob_count: int = Field(
        default=MAX_MOB_COUNT,
        description="Largest accepted number of simultaneous monsters.",
        ge=1,
    )

    def model_post_init(self, _: object) -> None:
        """Validates the mob count bounds."""
        assert (
            self.min_mob_count <= self.max_mob_count
        ), "min_mob_count must not exceed max_mob_count."

    def clamp_mob_count(self, mob_count: int | None) -> int:
        """
        Clamps a requested mob count to the configured bounds.

        Args:
            mob_count (int | None): The requested count, None for the default.

        Returns:
            int: The mob count to use.

        """
        if mob_count is None:
            mob_count = self.default_mob_count
        return max(self.min_mob_count, min(self.max_mob_count, mob_count))


def load_config(path: Path | None) -> CombatConfig:
    """
    Loads the combat configuration from a JSON file.

    A missing or malformed file is reported and replaced by the defaults.

    Args:
        path (Path | None): The JSON file to read.

    Returns:
        CombatConfig: The loaded configuration.

    """
    if path is None:
        return CombatConfig()
    if not path.is_file():
        log_warning(
            f"Combat configuration not found, using defaults: {path}",
            {"path": str(path)},
        )
        return CombatConfig()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return CombatConfig.model_validate(data)
    except (json.JSONDecodeError, ValidationError, AssertionError) as e:
        log_warning(
            f"Invalid combat configuration, using defaults: {path}",
            {"path": str(path), "error": str(e)},
        )
        return CombatConfig()
