"""
Loot module for the simulator.

Handles drop tables and their resolution into the items awarded by a kill.
Every entry of a drop table is rolled on its own: one kill can award several
items, or none at all.
"""

import random

from catchery import log_debug
from pydantic import BaseModel, Field

from items.item import InventoryItem, ItemTemplate


class DropEntry(BaseModel):
    """A single entry of a monster's drop table."""

    item: ItemTemplate | None = Field(
        default=None,
        description="The item that can drop. An entry without item never drops.",
    )
    quantity: int = Field(
        default=1,
        description="Quantity of items to drop.",
        ge=1,
    )
    drop_chance: float = Field(
        default=0.25,
        description="Chance this item will drop (0.0 to 1.0, where 1.0 = 100%).",
        ge=0.0,
        le=1.0,
    )


def roll_chance(rng: random.Random, chance: float) -> bool:
    """
    Rolls a uniform draw against a chance.

    No draw is consumed when the chance is not positive, so a zero chance
    can never succeed.

    Args:
        rng (random.Random): The random source.
        chance (float): The success chance.

    Returns:
        bool: True if the draw is less than or equal to the chance.

    """
    return chance > 0 and rng.random() <= chance


class DropResolver:
    """Evaluates drop tables into concrete item stacks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng: random.Random = rng or random.Random()

    def roll(self, drop_table: list[DropEntry]) -> list[InventoryItem]:
        """
        Rolls every entry of a drop table independently.

        Args:
            drop_table (list[DropEntry]): The entries to roll.

        Returns:
            list[InventoryItem]: The items that dropped, in table order.

        """
        drops: list[InventoryItem] = []
        for entry in drop_table:
            # Entries without an item template are skipped without a draw.
            if entry.item is None:
                continue
            if roll_chance(self.rng, entry.drop_chance):
                drops.append(entry.item.create_item(entry.quantity))
                log_debug(
                    f"Dropped {entry.quantity}x {entry.item.name}",
                    {"item": entry.item.name, "chance": entry.drop_chance},
                )
        return drops
