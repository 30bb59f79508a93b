"""
Encounter state module for the simulator.

The session record of one engagement, owned exclusively by the encounter
controller.
"""

from pydantic import BaseModel, Field

from character.combatant import CombatantState, MonsterSlot
from character.monster import MonsterTemplate
from core.constants import CombatPhase


class EncounterState(BaseModel):
    """
    The state of an engagement, from `start_combat` to `end_combat`.

    Attributes:
        phase (CombatPhase):
            The current phase.
        monster_pool (tuple[MonsterTemplate, ...]):
            The candidate monsters supplied by the caller.
        active_slots (list[MonsterSlot]):
            One entry per monster of the current group. Dead monsters stay in
            place with 0 health; the list is never compacted.
        target_index (int):
            Index of the player's target in `active_slots`.
        player (CombatantState):
            The player's combat record.
        mob_count (int):
            Number of monsters per group.
        group_id (int):
            Incremented on every spawn, so that callbacks issued against an
            earlier group can be recognised.
        monsters_defeated (int):
            Kills during the session.

    """

    phase: CombatPhase = CombatPhase.IDLE
    monster_pool: tuple[MonsterTemplate, ...] = ()
    active_slots: list[MonsterSlot] = Field(default_factory=list)
    target_index: int = 0
    player: CombatantState
    mob_count: int = 1
    group_id: int = 0
    monsters_defeated: int = 0

    def slot_at(self, index: int) -> MonsterSlot | None:
        """Returns the slot at an index, or None when out of range."""
        if 0 <= index < len(self.active_slots):
            return self.active_slots[index]
        return None

    def current_target(self) -> MonsterSlot | None:
        return self.slot_at(self.target_index)

    def living_slots(self) -> list[MonsterSlot]:
        return [slot for slot in self.active_slots if slot.is_alive()]

    def all_monsters_dead(self) -> bool:
        return all(slot.is_dead() for slot in self.active_slots)
