"""
Combatant module for the simulator.

Holds the mutable per-participant combat record: health bounds, attack
cadence and the pending-attack flag.
"""

from pydantic import BaseModel, Field

from character.monster import MonsterTemplate
from core.utils import clamp01


class CombatantState(BaseModel):
    """
    Mutable combat record of the player or of one monster instance.

    Attributes:
        id (str):
            Identifier of the combatant.
        current_health (float):
            Current health, always within [0, max_health].
        max_health (float):
            Maximum health.
        attack_damage (float):
            Damage dealt per attack, before modifiers.
        attack_timer (float):
            Seconds elapsed since the last attack trigger.
        attack_period (float):
            Seconds between two attack triggers.
        pending_attack (bool):
            True between an attack trigger and its completion callback.

    """

    id: str
    current_health: float = Field(ge=0)
    max_health: float = Field(ge=0)
    attack_damage: float = 0.0
    attack_timer: float = 0.0
    attack_period: float
    pending_attack: bool = False

    def is_alive(self) -> bool:
        return self.current_health > 0

    def is_dead(self) -> bool:
        return not self.is_alive()

    def adjust_health(self, amount: float) -> float:
        """
        Adjusts the current health by the specified amount.

        Args:
            amount (float):
                The amount to adjust health by (positive or negative).

        Returns:
            float:
                The actual amount adjusted (may be less than requested if at
                max or min).

        """
        new_health = max(0.0, min(self.current_health + amount, self.max_health))
        actual_adjustment = new_health - self.current_health
        self.current_health = new_health
        return actual_adjustment

    def advance_timer(self, dt: float) -> bool:
        """
        Advances the attack timer.

        Args:
            dt (float): Elapsed seconds.

        Returns:
            bool: True if an attack is due.

        """
        self.attack_timer += dt
        return self.attack_timer >= self.attack_period

    def reset_timer(self) -> None:
        self.attack_timer = 0.0

    @property
    def attack_progress(self) -> float:
        """Progress towards the next attack, in [0, 1]."""
        if self.attack_period <= 0:
            return 1.0
        return clamp01(self.attack_timer / self.attack_period)

    @property
    def health_ratio(self) -> float:
        if self.max_health <= 0:
            return 0.0
        return self.current_health / self.max_health


class MonsterSlot(CombatantState):
    """
    A monster instance occupying a fixed position of the encounter.

    The slot index is stable for the lifetime of the monster group and is how
    the targeting policy and the animation layer address this monster.
    """

    template: MonsterTemplate
    slot_index: int = Field(ge=0)

    @classmethod
    def spawn(cls, template: MonsterTemplate, slot_index: int) -> "MonsterSlot":
        """
        Creates a full-health instance of a monster template.

        Args:
            template (MonsterTemplate): The monster to instantiate.
            slot_index (int): The slot the monster occupies.

        Returns:
            MonsterSlot: The new monster slot.

        """
        return cls(
            id=f"{template.name}#{slot_index}",
            current_health=template.health,
            max_health=template.health,
            attack_damage=template.attack_damage,
            attack_period=template.attack_period,
            template=template,
            slot_index=slot_index,
        )

    @property
    def name(self) -> str:
        return self.template.name
