"""
Tests for the selection and cycling of the player's target.
"""

import pytest
from character.combatant import CombatantState, MonsterSlot
from character.monster import MonsterTemplate
from combat import targeting
from combat.encounter_state import EncounterState


@pytest.fixture
def state():
    template = MonsterTemplate(name="Goblin", health=20.0)
    return EncounterState(
        player=CombatantState(id="player", current_health=100, max_health=100, attack_period=1.5),
        active_slots=[MonsterSlot.spawn(template, i) for i in range(3)],
        mob_count=3,
    )


def kill(state: EncounterState, index: int) -> None:
    state.active_slots[index].current_health = 0.0


def test_cycle_wraps_around(state: EncounterState):
    assert targeting.cycle_target(state) == 1
    assert targeting.cycle_target(state) == 2
    assert targeting.cycle_target(state) == 0


def test_cycle_skips_dead_slots(state: EncounterState):
    kill(state, 1)

    assert targeting.cycle_target(state) == 2
    assert targeting.cycle_target(state) == 0


def test_cycle_stays_on_only_living_slot(state: EncounterState):
    kill(state, 0)
    kill(state, 2)
    state.target_index = 1

    assert targeting.cycle_target(state) == 1


def test_cycle_with_no_living_slot_keeps_index(state: EncounterState):
    for index in range(3):
        kill(state, index)
    state.target_index = 2

    assert targeting.cycle_target(state) == 2


def test_ensure_valid_target_prefers_lowest_index(state: EncounterState):
    state.target_index = 1
    kill(state, 1)

    assert targeting.ensure_valid_target(state)
    assert state.target_index == 0


def test_ensure_valid_target_keeps_living_target(state: EncounterState):
    state.target_index = 2

    assert targeting.ensure_valid_target(state)
    assert state.target_index == 2


def test_ensure_valid_target_without_living_slot(state: EncounterState):
    for index in range(3):
        kill(state, index)
    state.target_index = 1

    assert not targeting.ensure_valid_target(state)
    assert state.target_index == 1


def test_set_target_rejects_dead_or_unknown_slots(state: EncounterState):
    kill(state, 2)

    assert targeting.set_target(state, 1)
    assert state.target_index == 1
    assert not targeting.set_target(state, 2)
    assert not targeting.set_target(state, 5)
    assert not targeting.set_target(state, -1)
    assert state.target_index == 1


@pytest.mark.parametrize("dead", [(1,), (0, 3), (2, 4)])
def test_rotation_visits_each_living_slot_once(dead):
    template = MonsterTemplate(name="Goblin", health=20.0)
    state = EncounterState(
        player=CombatantState(id="player", current_health=100, max_health=100, attack_period=1.5),
        active_slots=[MonsterSlot.spawn(template, i) for i in range(5)],
        mob_count=5,
    )
    for index in dead:
        kill(state, index)
    targeting.ensure_valid_target(state)
    living = [i for i in range(5) if i not in dead]

    visited = [targeting.cycle_target(state) for _ in range(len(living))]

    assert sorted(visited) == living
    assert visited[-1] == living[0]
