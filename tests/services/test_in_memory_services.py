"""
Tests for the in-memory progression and inventory services.
"""

import pytest
from items.item import ItemTemplate
from services.interfaces import InventoryService, ProgressionService
from services.memory import InMemoryInventory, InMemoryProgression


@pytest.fixture
def ore():
    return ItemTemplate(name="Iron Ore", max_stack_size=10)


def test_services_satisfy_their_contracts():
    assert isinstance(InMemoryProgression(), ProgressionService)
    assert isinstance(InMemoryInventory(), InventoryService)


def test_level_curve():
    progression = InMemoryProgression(level=1, base_max_health=50.0)

    assert progression.max_health == pytest.approx(50.0)
    assert progression.xp_required_for_next_level() == 100

    progression.add_xp(100)

    assert progression.level == 2
    assert progression.experience == 0
    assert progression.max_health == pytest.approx(55.0)
    assert progression.xp_required_for_next_level() == 282, "floor(100 * 2^1.5)"


def test_level_up_heals_to_full():
    progression = InMemoryProgression()
    progression.take_damage(30.0)

    progression.add_xp(150)

    assert progression.level == 2
    assert progression.experience == 50
    assert progression.current_health == pytest.approx(progression.max_health)


def test_health_is_clamped():
    progression = InMemoryProgression(base_max_health=50.0)

    progression.take_damage(80.0)
    assert progression.current_health == 0.0

    progression.heal(100.0)
    assert progression.current_health == pytest.approx(50.0)


def test_inventory_stacks_before_using_empty_slots(ore: ItemTemplate):
    inventory = InMemoryInventory(max_slots=3)

    assert inventory.try_add_item(ore.create_item(4), 4) == (4, 0)
    assert inventory.try_add_item(ore.create_item(8), 8) == (8, 0)

    assert inventory.slots[0].quantity == 10
    assert inventory.slots[1].quantity == 2
    assert inventory.slots[2] is None
    assert inventory.count("Iron Ore") == 12


def test_inventory_reports_what_did_not_fit(ore: ItemTemplate):
    inventory = InMemoryInventory(max_slots=1)

    added, remaining = inventory.try_add_item(ore.create_item(15), 15)

    assert (added, remaining) == (10, 5)
    assert inventory.count("Iron Ore") == 10
