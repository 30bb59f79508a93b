"""
Collaborator contracts of the combat core.

Every service the encounter controller talks to is described here as a
Protocol. The controller only ever calls these methods, and none of the
implementations receives a reference into the encounter state.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from character.character_stats import EquipmentBonuses, TalentBonuses
from core.constants import ActivityType
from items.item import InventoryItem

# Called by the animation layer when a player projectile lands.
OnHit = Callable[[float, int], None]
# Called by the animation layer when a monster attack animation ends.
OnComplete = Callable[[], None]


@runtime_checkable
class ProgressionService(Protocol):
    """Owns the player's level, experience, gold and canonical health."""

    @property
    def level(self) -> int: ...

    @property
    def current_health(self) -> float: ...

    @property
    def max_health(self) -> float: ...

    def take_damage(self, amount: float) -> None: ...

    def heal(self, amount: float) -> None: ...

    def heal_to_full(self) -> None: ...

    def add_xp(self, amount: int) -> None: ...

    def add_gold(self, amount: int) -> None: ...


@runtime_checkable
class EquipmentStatsProvider(Protocol):
    """Aggregates the stats of the equipped items."""

    def get_total_stats(self) -> EquipmentBonuses: ...


@runtime_checkable
class TalentStatsProvider(Protocol):
    """Aggregates the bonuses of the unlocked talents."""

    def get_total_bonuses(self) -> TalentBonuses: ...


@runtime_checkable
class InventoryService(Protocol):
    """Stores the items dropped by monsters."""

    def try_add_item(self, item: InventoryItem, quantity: int) -> tuple[int, int]:
        """
        Adds up to `quantity` units of an item.

        Returns:
            tuple[int, int]: The units added and the units that did not fit.

        """
        ...


@runtime_checkable
class AnimationCollaborator(Protocol):
    """The presentation layer that plays attacks before they resolve."""

    def request_player_attack(self, damage: float, target_slot: int, on_hit: OnHit) -> None:
        """Plays the player attack, then calls `on_hit(damage, target_slot)`."""
        ...

    def request_monster_attack(self, slot: int, on_complete: OnComplete) -> None:
        """Plays the monster attack, then calls `on_complete()`."""
        ...

    def is_slot_in_range(self, slot: int) -> bool: ...

    def get_slot_world_position(self, slot: int) -> Any: ...


@runtime_checkable
class ActivityTracker(Protocol):
    """Records what the player is doing, for away rewards."""

    def start_activity(self, activity: ActivityType, **details: Any) -> None: ...

    def stop_activity(self) -> None: ...
