"""
Shared fixtures for the combat core tests.
"""

import random

import pytest
from events.event_bus import EventBus
from events.event_system import CombatEvent


class ScriptedRandom(random.Random):
    """A random source returning scripted draws, then a fixed default."""

    def __init__(self, draws: list[float] | None = None, default: float = 0.5) -> None:
        super().__init__(0)
        self.draws = list(draws or [])
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.draws:
            return self.draws.pop(0)
        return self.default


class FakeAnimation:
    """Animation layer that holds every request until the test resolves it."""

    def __init__(self) -> None:
        self.player_requests: list[tuple] = []
        self.monster_requests: list[tuple] = []
        self.out_of_range: set[int] = set()

    def request_player_attack(self, damage, target_slot, on_hit) -> None:
        self.player_requests.append((damage, target_slot, on_hit))

    def request_monster_attack(self, slot, on_complete) -> None:
        self.monster_requests.append((slot, on_complete))

    def is_slot_in_range(self, slot) -> bool:
        return slot not in self.out_of_range

    def get_slot_world_position(self, slot):
        return (slot * 10.0, 0.0)

    def land_player_attack(self, index: int = 0) -> None:
        damage, target_slot, on_hit = self.player_requests[index]
        on_hit(damage, target_slot)

    def complete_monster_attack(self, index: int = 0) -> None:
        _, on_complete = self.monster_requests[index]
        on_complete()


class FakeTracker:
    """Activity tracker recording its calls."""

    def __init__(self) -> None:
        self.started: list[tuple] = []
        self.stopped = 0

    def start_activity(self, activity, **details) -> None:
        self.started.append((activity, details))

    def stop_activity(self) -> None:
        self.stopped += 1


class EventRecorder:
    """Collects every event published on a bus."""

    def __init__(self, events: EventBus) -> None:
        self.events: list[CombatEvent] = []
        events.subscribe(CombatEvent, self.events.append)

    def of_type(self, event_class: type) -> list:
        return [e for e in self.events if isinstance(e, event_class)]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def make_rng():
    return ScriptedRandom


@pytest.fixture
def animation():
    return FakeAnimation()


@pytest.fixture
def tracker():
    return FakeTracker()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return EventRecorder(bus)
