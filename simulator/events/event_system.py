"""
Event system module for the simulator.

Defines the events emitted by the combat core. Consumers (UI panels,
persistence, floating combat text, quests) subscribe to them through the
event bus and never hold a reference into the encounter state.
"""

from enum import Enum

from pydantic import BaseModel, Field

from core.constants import ActorType, CombatPhase


class EventType(Enum):
    """Enumeration of available event types."""

    COMBAT_STARTED = "combat_started"  # When an encounter starts
    COMBAT_ENDED = "combat_ended"  # When an encounter is discarded
    PHASE_CHANGED = "phase_changed"  # When the encounter phase changes

    PLAYER_HEALTH_CHANGED = "player_health_changed"
    MONSTER_HEALTH_CHANGED = "monster_health_changed"

    MONSTER_SPAWNED = "monster_spawned"  # When a slot receives a new monster
    MONSTER_DIED = "monster_died"  # When a monster reaches 0 health
    TARGET_CHANGED = "target_changed"  # When the player switches target

    ATTACK_PROGRESS = "attack_progress"  # Cadence progress, once per tick
    DAMAGE_DEALT = "damage_dealt"  # Player hit a monster
    DAMAGE_TAKEN = "damage_taken"  # Monster attack resolved on the player

    ITEM_DROPPED = "item_dropped"  # Loot added to the inventory
    INVENTORY_FULL = "inventory_full"  # Loot lost to a full inventory


class CombatEvent(BaseModel):
    """Base class for all combat events."""

    event_type: EventType = Field(
        description="The type of the event.",
    )


class CombatStartedEvent(CombatEvent):
    """Event data for COMBAT_STARTED."""

    event_type: EventType = EventType.COMBAT_STARTED
    monster_pool: list[str] = Field(description="Names of the candidate monsters.")
    mob_count: int = Field(description="Number of simultaneous monsters.")

    def __str__(self) -> str:
        return f"CombatStartedEvent(pool={self.monster_pool}, mobs={self.mob_count})"


class CombatEndedEvent(CombatEvent):
    """Event data for COMBAT_ENDED."""

    event_type: EventType = EventType.COMBAT_ENDED
    monsters_defeated: int = Field(
        default=0, description="Monsters killed during the session."
    )

    def __str__(self) -> str:
        return f"CombatEndedEvent(defeated={self.monsters_defeated})"


class PhaseChangedEvent(CombatEvent):
    """Event data for PHASE_CHANGED."""

    event_type: EventType = EventType.PHASE_CHANGED
    previous: CombatPhase = Field(description="The phase before the change.")
    phase: CombatPhase = Field(description="The phase after the change.")

    def __str__(self) -> str:
        return f"PhaseChangedEvent({self.previous} -> {self.phase})"


class PlayerHealthChangedEvent(CombatEvent):
    """Event data for PLAYER_HEALTH_CHANGED."""

    event_type: EventType = EventType.PLAYER_HEALTH_CHANGED
    current: float = Field(description="Health after the change.")
    maximum: float = Field(description="Maximum health.")
    delta: float = Field(default=0.0, description="Positive when healed.")

    def __str__(self) -> str:
        return f"PlayerHealthChangedEvent({self.current:.1f}/{self.maximum:.1f})"


class MonsterHealthChangedEvent(CombatEvent):
    """Event data for MONSTER_HEALTH_CHANGED."""

    event_type: EventType = EventType.MONSTER_HEALTH_CHANGED
    slot_index: int = Field(description="The slot of the monster.")
    current: float = Field(description="Health after the change.")
    maximum: float = Field(description="Maximum health.")

    def __str__(self) -> str:
        return (
            f"MonsterHealthChangedEvent(slot={self.slot_index}, "
            f"{self.current:.1f}/{self.maximum:.1f})"
        )


class MonsterSpawnedEvent(CombatEvent):
    """Event data for MONSTER_SPAWNED."""

    event_type: EventType = EventType.MONSTER_SPAWNED
    slot_index: int = Field(description="The slot of the monster.")
    monster_name: str = Field(description="The name of the monster.")

    def __str__(self) -> str:
        return f"MonsterSpawnedEvent(slot={self.slot_index}, {self.monster_name})"


class MonsterDiedEvent(CombatEvent):
    """Event data for MONSTER_DIED."""

    event_type: EventType = EventType.MONSTER_DIED
    slot_index: int = Field(description="The slot of the monster.")
    monster_name: str = Field(description="The name of the monster.")
    xp_awarded: int = Field(default=0, description="Experience granted.")
    gold_awarded: int = Field(default=0, description="Gold granted.")

    def __str__(self) -> str:
        return (
            f"MonsterDiedEvent(slot={self.slot_index}, {self.monster_name}, "
            f"xp={self.xp_awarded}, gold={self.gold_awarded})"
        )


class TargetChangedEvent(CombatEvent):
    """Event data for TARGET_CHANGED."""

    event_type: EventType = EventType.TARGET_CHANGED
    slot_index: int = Field(description="The new target slot.")

    def __str__(self) -> str:
        return f"TargetChangedEvent(slot={self.slot_index})"


class AttackProgressEvent(CombatEvent):
    """Event data for ATTACK_PROGRESS, used by cadence bars."""

    event_type: EventType = EventType.ATTACK_PROGRESS
    actor: ActorType = Field(description="Who is charging the attack.")
    slot_index: int | None = Field(
        default=None, description="The monster slot, None for the player."
    )
    progress: float = Field(description="Progress towards the next attack, 0 to 1.")


class DamageDealtEvent(CombatEvent):
    """Event data for DAMAGE_DEALT (player on a monster)."""

    event_type: EventType = EventType.DAMAGE_DEALT
    damage: float = Field(description="Damage applied to the monster.")
    was_critical: bool = Field(default=False, description="True on a critical hit.")
    slot_index: int = Field(description="The slot of the monster hit.")

    def __str__(self) -> str:
        crit = ", critical" if self.was_critical else ""
        return f"DamageDealtEvent(slot={self.slot_index}, damage={self.damage:.1f}{crit})"


class DamageTakenEvent(CombatEvent):
    """Event data for DAMAGE_TAKEN (monster on the player)."""

    event_type: EventType = EventType.DAMAGE_TAKEN
    damage: float = Field(description="Damage applied to the player, 0 when dodged.")
    was_dodged: bool = Field(default=False, description="True when dodged.")
    slot_index: int = Field(description="The slot of the attacking monster.")

    def __str__(self) -> str:
        if self.was_dodged:
            return f"DamageTakenEvent(slot={self.slot_index}, dodged)"
        return f"DamageTakenEvent(slot={self.slot_index}, damage={self.damage:.1f})"


class ItemDroppedEvent(CombatEvent):
    """Event data for ITEM_DROPPED."""

    event_type: EventType = EventType.ITEM_DROPPED
    item_name: str = Field(description="The item that dropped.")
    quantity: int = Field(description="Units added to the inventory.")

    def __str__(self) -> str:
        return f"ItemDroppedEvent({self.quantity}x {self.item_name})"


class InventoryFullEvent(CombatEvent):
    """Event data for INVENTORY_FULL."""

    event_type: EventType = EventType.INVENTORY_FULL
    item_name: str = Field(description="The item that did not fit.")
    items_lost: int = Field(description="Units discarded.")

    def __str__(self) -> str:
        return f"InventoryFullEvent({self.item_name}, lost={self.items_lost})"
