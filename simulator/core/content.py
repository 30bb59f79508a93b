import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import ValidationError

from character.monster import MonsterTemplate
from items.item import ItemTemplate
from items.loot import DropEntry

from core.utils import cprint


class ContentRepository:
    """
    Registry of the item and monster definitions, with by-name access.

    Drop tables reference items by name, so items are loaded first.
    """

    items: dict[str, ItemTemplate]
    monsters: dict[str, MonsterTemplate]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing the data files to load. When None,
                the repository starts empty.

        """
        self.items = {}
        self.monsters = {}
        if data_dir:
            self.reload(data_dir)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing `items.json` and `monsters.json`.

        Raises:
            ValueError: If a file is missing, empty or malformed.

        """
        self.items = _load_json_file(
            root / "items.json",
            self._load_items,
            "items",
        )
        self.monsters = _load_json_file(
            root / "monsters.json",
            self._load_monsters,
            "monsters",
        )

    def get_item(self, name: str) -> ItemTemplate | None:
        """Get an item by name, or None if not found."""
        return self.items.get(name)

    def get_monster(self, name: str) -> MonsterTemplate | None:
        """Get a monster by name, or None if not found."""
        monster = self.monsters.get(name)
        if monster is None:
            log_warning(
                f"Monster '{name}' not found in ContentRepository.",
                {"monster": name, "known": sorted(self.monsters)},
            )
        return monster

    def get_monster_pool(self, names: list[str] | None = None) -> list[MonsterTemplate]:
        """
        Builds a monster pool for an encounter.

        Args:
            names (list[str] | None):
                The monsters to include; None includes every monster. Unknown
                names are reported and skipped.

        Returns:
            list[MonsterTemplate]: The pool, possibly empty.

        """
        if names is None:
            return list(self.monsters.values())
        pool = []
        for name in names:
            monster = self.get_monster(name)
            if monster is not None:
                pool.append(monster)
        return pool

    @staticmethod
    def _load_items(data: list[dict]) -> dict[str, ItemTemplate]:
        """
        Load items from JSON data.

        Raises:
            ValueError: If duplicate item names are found.

        """
        items = {}
        for item_data in data:
            item = ItemTemplate(**item_data)
            if item.name in items:
                raise ValueError(f"Duplicate item name: {item.name}")
            items[item.name] = item
        return items

    def _load_monsters(self, data: list[dict]) -> dict[str, MonsterTemplate]:
        """
        Load monsters from JSON data, resolving their drop tables.

        Args:
            data (list[dict]): List of monster data dictionaries.

        Returns:
            dict[str, MonsterTemplate]: Dictionary mapping monster names to templates.

        Raises:
            ValueError: If duplicate monster names are found.

        """
        monsters = {}
        for monster_data in data:
            monster_data = dict(monster_data)
            monster_data["drop_table"] = self._load_drop_table(
                monster_data.get("name", "?"),
                monster_data.get("drop_table", []),
            )
            monster = MonsterTemplate(**monster_data)
            if monster.name in monsters:
                raise ValueError(f"Duplicate monster name: {monster.name}")
            monsters[monster.name] = monster
        return monsters

    def _load_drop_table(self, monster_name: str, data: list[dict]) -> tuple[DropEntry, ...]:
        entries = []
        for entry_data in data:
            item_name = entry_data.get("item")
            item = self.items.get(item_name) if item_name else None
            # The entry is kept; it simply never drops.
            if item is None:
                log_warning(
                    f"Monster '{monster_name}' drops unknown item '{item_name}'.",
                    {"monster": monster_name, "item": item_name},
                )
            entries.append(
                DropEntry(
                    item=item,
                    quantity=entry_data.get("quantity", 1),
                    drop_chance=entry_data.get("drop_chance", 0.25),
                )
            )
        return tuple(entries)


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        cprint(
            f"  Loading {description} using {loader_func.__name__}...",
            style="bold green",
        )
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValidationError, ValueError, AssertionError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
