"""
Targeting module for the simulator.

Selects and cycles the player's target among the living monsters of an
encounter. Targeting is deterministic: whenever several slots qualify, the
lowest index wins.
"""

from combat.encounter_state import EncounterState


def cycle_target(state: EncounterState) -> int:
    """
    Advances the target to the next living slot, wrapping around.

    Args:
        state (EncounterState): The encounter.

    Returns:
        int: The new target index, or the original one when no slot is alive.

    """
    count = len(state.active_slots)
    if count == 0:
        return state.target_index
    start = state.target_index
    for step in range(1, count + 1):
        index = (start + step) % count
        if state.active_slots[index].is_alive():
            state.target_index = index
            return index
    return start


def ensure_valid_target(state: EncounterState) -> bool:
    """
    Retargets the first living slot if the current target is dead.

    Args:
        state (EncounterState): The encounter.

    Returns:
        bool: False when no slot is alive; the index is then left unchanged.

    """
    target = state.current_target()
    if target is not None and target.is_alive():
        return True
    living = state.living_slots()
    if not living:
        return False
    state.target_index = living[0].slot_index
    return True


def set_target(state: EncounterState, index: int) -> bool:
    """
    Targets a specific slot.

    Args:
        state (EncounterState): The encounter.
        index (int): The slot to target.

    Returns:
        bool: True if the slot exists and is alive, otherwise nothing changes.

    """
    slot = state.slot_at(index)
    if slot is None or slot.is_dead():
        return False
    state.target_index = index
    return True
