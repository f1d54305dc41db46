"""Grocery list state manager."""

import asyncio
import logging
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from recipe_finder.domain.grocery import ClearResult, GroceryItem
from recipe_finder.domain.recipes import RecipeDetails
from recipe_finder.services.storage import JsonStore

GROCERY_ITEMS_KEY = "groceryItems"
NOTHING_TO_CLEAR = "There are no completed items to clear."

_logger = logging.getLogger(__name__)


class NoIngredientsError(ValueError):
    """Raised when a recipe has no ingredients to add."""


class NoIngredientsSelectedError(ValueError):
    """Raised when no valid ingredient was selected."""


@dataclass
class TimeBasedIdFactory:
    """Issue millisecond timestamp ids that never repeat within a process."""

    clock: Callable[[], float] = time.time
    _last: int = field(default=0, init=False)

    def __call__(self) -> str:
        value = max(int(self.clock() * 1000), self._last + 1)
        self._last = value
        return str(value)


@dataclass
class GroceryListService:
    """Owns the grocery list and mirrors every change to storage.

    Mutations run under a lock: each one reads the current list, builds the
    new list and awaits the write before the next mutation starts.
    """

    store: JsonStore
    storage_key: str = GROCERY_ITEMS_KEY
    id_factory: Callable[[], str] = field(default_factory=TimeBasedIdFactory)
    _items: list[GroceryItem] = field(default_factory=list, init=False)
    _loaded: bool = field(default=False, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @property
    def loaded(self) -> bool:
        """Return True once the persisted list has been read."""
        return self._loaded

    @property
    def items(self) -> tuple[GroceryItem, ...]:
        """Return a snapshot of the current items."""
        return tuple(self._items)

    def progress(self) -> tuple[int, int]:
        """Return completed and total item counts."""
        completed = sum(1 for item in self._items if item.completed)
        return completed, len(self._items)

    async def load(self) -> tuple[GroceryItem, ...]:
        """Load persisted items, defaulting to an empty list."""
        async with self._lock:
            await self._read()
        return self.items

    async def add_item(self, name: str) -> GroceryItem | None:
        """Append a manually entered item; blank names are ignored."""
        cleaned = name.strip()
        if not cleaned:
            return None
        item = GroceryItem(
            id=self.id_factory(),
            name=cleaned,
            completed=False,
            created_at=datetime.now(tz=UTC),
        )
        async with self._lock:
            await self._ensure_loaded()
            await self._commit([*self._items, item])
        return item

    async def toggle_item_completion(self, item_id: str) -> GroceryItem | None:
        """Flip the completed flag of an item and return the updated item."""
        async with self._lock:
            await self._ensure_loaded()
            updated = [
                replace(item, completed=not item.completed)
                if item.id == item_id
                else item
                for item in self._items
            ]
            await self._commit(updated)
        return next((item for item in self._items if item.id == item_id), None)

    async def delete_item(self, item_id: str) -> bool:
        """Remove an item; return True when it existed."""
        async with self._lock:
            await self._ensure_loaded()
            updated = [item for item in self._items if item.id != item_id]
            removed = len(updated) != len(self._items)
            await self._commit(updated)
        return removed

    async def clear_completed_items(self) -> ClearResult:
        """Remove completed items, skipping the write when there are none."""
        async with self._lock:
            await self._ensure_loaded()
            remaining = [item for item in self._items if not item.completed]
            cleared = len(self._items) - len(remaining)
            if not cleared:
                return ClearResult(cleared=0, notice=NOTHING_TO_CLEAR)
            await self._commit(remaining)
        return ClearResult(cleared=cleared)

    async def add_ingredients_from_recipe(
        self, recipe: RecipeDetails, selected_indices: Iterable[int]
    ) -> list[GroceryItem]:
        """Append the selected ingredients of a recipe and persist once."""
        ingredients = recipe.extended_ingredients
        if not ingredients:
            raise NoIngredientsError("No ingredients found for this recipe")
        indices = sorted(
            {index for index in selected_indices if 0 <= index < len(ingredients)}
        )
        if not indices:
            raise NoIngredientsSelectedError(
                "Please select at least one ingredient to add to your grocery list"
            )
        created_at = datetime.now(tz=UTC)
        new_items = [
            GroceryItem(
                id=self.id_factory(),
                name=ingredients[index].describe(),
                completed=False,
                created_at=created_at,
                recipe_id=recipe.id,
                recipe_name=recipe.title,
            )
            for index in indices
        ]
        async with self._lock:
            await self._ensure_loaded()
            await self._commit([*self._items, *new_items])
        _logger.info(
            "Added %s ingredients from recipe %s to the grocery list",
            len(new_items),
            recipe.id,
        )
        return new_items

    async def _read(self) -> None:
        stored = await self.store.load(self.storage_key, default=[])
        rows = stored if isinstance(stored, list) else []
        self._items = [item for item in map(parse_item, rows) if item]
        self._loaded = True

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            _logger.warning(
                "Grocery list changed before load; reading %s first", self.storage_key
            )
            await self._read()

    async def _commit(self, items: list[GroceryItem]) -> None:
        self._items = items
        await self.store.save(self.storage_key, [item.to_payload() for item in items])


def parse_item(row: object) -> GroceryItem | None:
    """Parse a stored grocery row; rows without an id or name are dropped."""
    if not isinstance(row, Mapping):
        return None
    item_id = row.get("id")
    name = row.get("name")
    if item_id is None or not isinstance(name, str) or not name.strip():
        return None
    created_raw = row.get("createdAt")
    created_at = None
    if isinstance(created_raw, str) and created_raw:
        try:
            created_at = datetime.fromisoformat(created_raw.replace("Z", "+00:00"))
        except ValueError:
            _logger.warning("Ignoring malformed createdAt for item %s", item_id)
    recipe_id = row.get("recipeId")
    recipe_name = row.get("recipeName")
    return GroceryItem(
        id=str(item_id),
        name=name,
        completed=bool(row.get("completed", False)),
        created_at=created_at,
        recipe_id=recipe_id if isinstance(recipe_id, int) else None,
        recipe_name=recipe_name if isinstance(recipe_name, str) else None,
    )
