"""
Rewards module for the simulator.

Grants the experience, gold and loot of a kill to the progression and
inventory services.
"""

from catchery import log_debug, log_warning
from pydantic import BaseModel, Field

from character.character_stats import ResolvedStats
from character.monster import MonsterTemplate
from combat.combat_math import calculate_rewards
from events.event_bus import EventBus
from events.event_system import InventoryFullEvent, ItemDroppedEvent
from items.item import InventoryItem
from items.loot import DropResolver
from services.interfaces import InventoryService, ProgressionService


class RewardResult(BaseModel):
    """What a kill actually granted."""

    xp: int = 0
    gold: int = 0
    items_added: list[InventoryItem] = Field(default_factory=list)
    items_lost: list[InventoryItem] = Field(default_factory=list)


class RewardDistributor:
    """Routes the rewards of a kill to the external services."""

    def __init__(
        self,
        drop_resolver: DropResolver,
        events: EventBus,
        progression: ProgressionService | None = None,
        inventory: InventoryService | None = None,
    ) -> None:
        self.drop_resolver = drop_resolver
        self.events = events
        self.progression = progression
        self.inventory = inventory

    def distribute(self, monster: MonsterTemplate, stats: ResolvedStats) -> RewardResult:
        """
        Grants the rewards of a killed monster.

        Experience and gold go to the progression service; every drop table
        entry is rolled on its own and dropped items go to the inventory.
        Units that do not fit in the inventory are lost.

        Args:
            monster (MonsterTemplate): The monster that died.
            stats (ResolvedStats): The player's resolved stats (for bonuses).

        Returns:
            RewardResult: The rewards actually granted.

        """
        xp, gold = calculate_rewards(monster.xp_reward, monster.gold_reward, stats)
        result = RewardResult(xp=xp, gold=gold)
        if self.progression is not None:
            self.progression.add_xp(xp)
            self.progression.add_gold(gold)

        for item in self.drop_resolver.roll(list(monster.drop_table)):
            self._store(item, result)
        return result

    def _store(self, item: InventoryItem, result: RewardResult) -> None:
        if self.inventory is None:
            log_debug(
                f"No inventory to receive {item}",
                {"item": item.name, "quantity": item.quantity},
            )
            result.items_lost.append(item)
            return

        added, remaining = self.inventory.try_add_item(item, item.quantity)
        if added > 0:
            result.items_added.append(item.template.create_item(added))
            self.events.publish(ItemDroppedEvent(item_name=item.name, quantity=added))
        if remaining > 0:
            log_warning(
                f"Inventory full, {remaining}x {item.name} lost",
                {"item": item.name, "added": added, "remaining": remaining},
            )
            result.items_lost.append(item.template.create_item(remaining))
            self.events.publish(InventoryFullEvent(item_name=item.name, items_lost=remaining))
