"""
Monster module for the simulator.

Defines the immutable monster templates an encounter draws its monsters from.
Monster stats are fixed and do not scale with the player.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from items.loot import DropEntry


class MonsterTemplate(BaseModel):
    """Represents the definition of a monster, shared by all its instances."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The display name of the monster.",
    )
    level: int = Field(
        default=1,
        description="Monster level, informative only.",
        ge=1,
    )
    health: float = Field(
        default=50.0,
        description="Maximum health of every instance of this monster.",
        gt=0,
    )
    attack_damage: float = Field(
        default=5.0,
        description="Damage dealt per attack.",
        ge=0,
    )
    attack_period: float = Field(
        default=2.0,
        description="Time in seconds between attacks.",
        gt=0,
    )
    attack_range: float = Field(
        default=100.0,
        description="Engagement range used by the presentation layer.",
        ge=0,
    )
    xp_reward: int = Field(
        default=10,
        description="Experience granted on death, before bonuses.",
        ge=0,
    )
    gold_reward: int = Field(
        default=5,
        description="Gold granted on death, before bonuses.",
        ge=0,
    )
    drop_table: tuple[DropEntry, ...] = Field(
        default=(),
        description="Items that can drop, each rolled independently.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates the monster template."""
        assert self.name and isinstance(self.name, str), "Monster name must not be empty."

    def __str__(self) -> str:
        return f"{self.name} (lvl {self.level})"
