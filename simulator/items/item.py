"""
Item module for the simulator.

Defines the immutable item templates referenced by drop tables and the
inventory items created from them when a monster drops loot.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemTemplate(BaseModel):
    """
    Represents the definition of an item that monsters can drop.

    Templates are shared by every drop table that references them; the
    inventory only ever receives fresh `InventoryItem` instances.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        default="",
        description="A brief description of the item.",
    )
    item_type: str = Field(
        default="material",
        description="The category of the item (e.g., material, equipment).",
    )
    max_stack_size: int = Field(
        default=99,
        description="How many units of this item fit in one inventory slot.",
        ge=1,
    )

    def model_post_init(self, _: Any) -> None:
        """Validates the item template."""
        assert self.name and isinstance(self.name, str), "Item name must not be empty."

    def create_item(self, quantity: int = 1) -> "InventoryItem":
        """
        Creates an inventory item from this template.

        Args:
            quantity (int): The number of units. Defaults to 1.

        Returns:
            InventoryItem: The new inventory item.

        """
        return InventoryItem(template=self, quantity=quantity)


class InventoryItem(BaseModel):
    """A stack of units of one item template."""

    template: ItemTemplate = Field(
        description="The template this item was created from.",
    )
    quantity: int = Field(
        default=1,
        description="The number of units in the stack.",
        ge=0,
    )

    @property
    def name(self) -> str:
        return self.template.name

    def is_empty(self) -> bool:
        return self.quantity <= 0

    def can_stack_with(self, other: "InventoryItem") -> bool:
        """Returns True if both stacks hold the same item."""
        return self.template == other.template

    def __str__(self) -> str:
        return f"{self.quantity}x {self.name}"
