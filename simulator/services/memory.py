"""
In-memory collaborators.

Headless implementations of the progression, inventory and stat provider
contracts, used by the demo runner and by the tests. They follow the game's
level curve (max health grows 10% per level, `floor(100 * level^1.5)`
experience per level) and its inventory stacking rules.
"""

import math

from catchery import log_debug

from character.character_stats import EquipmentBonuses, TalentBonuses
from items.item import InventoryItem


class InMemoryProgression:
    """Level, experience, gold and canonical health of one character."""

    def __init__(self, level: int = 1, base_max_health: float = 50.0) -> None:
        self._level: int = level
        self.base_max_health: float = base_max_health
        self.experience: int = 0
        self.gold: int = 0
        self._current_health: float = self.max_health

    @property
    def level(self) -> int:
        return self._level

    @property
    def max_health(self) -> float:
        return self.base_max_health * math.pow(1.1, self._level - 1)

    @property
    def current_health(self) -> float:
        return self._current_health

    def xp_required_for_next_level(self) -> int:
        return math.floor(100 * math.pow(self._level, 1.5))

    def take_damage(self, amount: float) -> None:
        self._current_health = max(0.0, self._current_health - max(0.0, amount))

    def heal(self, amount: float) -> None:
        self._current_health = min(self.max_health, self._current_health + max(0.0, amount))

    def heal_to_full(self) -> None:
        self._current_health = self.max_health

    def add_xp(self, amount: int) -> None:
        """Adds experience and levels up as many times as it allows."""
        self.experience += amount
        while self.experience >= self.xp_required_for_next_level():
            self.experience -= self.xp_required_for_next_level()
            self._level += 1
            # Levelling up restores the character to the new maximum.
            self._current_health = self.max_health
            log_debug(f"Level up to {self._level}", {"level": self._level})

    def add_gold(self, amount: int) -> None:
        self.gold += amount


class InMemoryInventory:
    """A fixed number of slots holding stacks of items."""

    def __init__(self, max_slots: int = 20) -> None:
        self.max_slots: int = max_slots
        self.slots: list[InventoryItem | None] = [None] * max_slots

    def try_add_item(self, item: InventoryItem, quantity: int) -> tuple[int, int]:
        """
        Adds units of an item, first onto existing stacks, then into empty slots.

        Args:
            item (InventoryItem): The item to add.
            quantity (int): The number of units.

        Returns:
            tuple[int, int]: The units added and the units that did not fit.

        """
        remaining = max(0, quantity)
        max_stack = item.template.max_stack_size
        # First try to stack with existing items.
        for stack in self.slots:
            if remaining == 0:
                break
            if stack is not None and stack.can_stack_with(item):
                can_add = min(remaining, max_stack - stack.quantity)
                stack.quantity += can_add
                remaining -= can_add
        # Then fill empty slots.
        for index, stack in enumerate(self.slots):
            if remaining == 0:
                break
            if stack is None:
                can_add = min(remaining, max_stack)
                self.slots[index] = item.template.create_item(can_add)
                remaining -= can_add
        return quantity - remaining, remaining

    def count(self, name: str) -> int:
        """Total units of an item, across all stacks."""
        return sum(s.quantity for s in self.slots if s is not None and s.name == name)


class FixedEquipmentStats:
    """Equipment provider returning a constant bonus bundle."""

    def __init__(self, bonuses: EquipmentBonuses | None = None) -> None:
        self.bonuses: EquipmentBonuses = bonuses or EquipmentBonuses()

    def get_total_stats(self) -> EquipmentBonuses:
        return self.bonuses


class FixedTalentBonuses:
    """Talent provider returning a constant bonus bundle."""

    def __init__(self, bonuses: TalentBonuses | None = None) -> None:
        self.bonuses: TalentBonuses = bonuses or TalentBonuses()

    def get_total_bonuses(self) -> TalentBonuses:
        return self.bonuses
