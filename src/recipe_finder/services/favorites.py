"""Favorites state manager."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from recipe_finder.domain.favorites import FavoriteRecipe
from recipe_finder.services.storage import JsonStore

FAVORITES_KEY = "favorites"
FAVORITE_IDS_KEY = "favoriteRecipes"

_logger = logging.getLogger(__name__)


@dataclass
class FavoritesService:
    """Keeps the favorites list in memory and mirrors it to storage."""

    store: JsonStore
    storage_key: str = FAVORITES_KEY
    id_list_key: str = FAVORITE_IDS_KEY
    _favorites: list[FavoriteRecipe] = field(default_factory=list, init=False)
    _loaded: bool = field(default=False, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @property
    def loaded(self) -> bool:
        """Return True once the persisted list has been read."""
        return self._loaded

    @property
    def favorites(self) -> tuple[FavoriteRecipe, ...]:
        """Return a snapshot of the current favorites."""
        return tuple(self._favorites)

    async def load(self) -> tuple[FavoriteRecipe, ...]:
        """Load persisted favorites, defaulting to an empty list."""
        async with self._lock:
            await self._read()
        return self.favorites

    def is_favorite(self, recipe_id: int) -> bool:
        """Return whether a recipe id is in the favorites list."""
        return any(item.id == recipe_id for item in self._favorites)

    async def add_favorite(
        self, recipe: FavoriteRecipe | Mapping[str, object] | None
    ) -> bool:
        """Add a recipe to favorites; return True when the list changed."""
        favorite = parse_favorite(recipe)
        if favorite is None:
            _logger.error("Invalid recipe object provided to add_favorite")
            return False
        async with self._lock:
            await self._ensure_loaded()
            if self.is_favorite(favorite.id):
                return False
            updated = [*self._favorites, favorite]
            self._favorites = updated
            await self._save(updated)
        return True

    async def remove_favorite(self, recipe_id: int) -> bool:
        """Remove a recipe from favorites; return True when it was present."""
        async with self._lock:
            await self._ensure_loaded()
            updated = [item for item in self._favorites if item.id != recipe_id]
            removed = len(updated) != len(self._favorites)
            self._favorites = updated
            await self._save(updated)
        return removed

    async def toggle_favorite(self, recipe: FavoriteRecipe) -> bool:
        """Flip the favorite state of a recipe and return the new state."""
        async with self._lock:
            await self._ensure_loaded()
            if self.is_favorite(recipe.id):
                updated = [item for item in self._favorites if item.id != recipe.id]
            else:
                updated = [*self._favorites, recipe]
            self._favorites = updated
            await self._save(updated)
        return self.is_favorite(recipe.id)

    async def _read(self) -> None:
        stored = await self.store.load(self.storage_key, default=[])
        favorites: list[FavoriteRecipe] = []
        seen: set[int] = set()
        for row in stored if isinstance(stored, list) else []:
            favorite = parse_favorite(row)
            if favorite is None or favorite.id in seen:
                continue
            seen.add(favorite.id)
            favorites.append(favorite)
        self._favorites = favorites
        self._loaded = True
        await self._report_divergence(seen)

    async def _ensure_loaded(self) -> None:
        # Caller holds the lock.
        if not self._loaded:
            _logger.warning(
                "Favorites changed before load; reading %s first", self.storage_key
            )
            await self._read()

    async def _save(self, favorites: list[FavoriteRecipe]) -> None:
        await self.store.save(
            self.storage_key, [item.to_payload() for item in favorites]
        )

    async def _report_divergence(self, known_ids: set[int]) -> None:
        """Warn when the id-list key holds favorites missing from this list."""
        stored_ids = await self.store.load(self.id_list_key, default=[])
        if not isinstance(stored_ids, list):
            return
        missing = sorted(
            {value for value in stored_ids if isinstance(value, int)} - known_ids
        )
        if missing:
            _logger.warning(
                "Favorites under %s and %s diverge: %s ids only in %s",
                self.storage_key,
                self.id_list_key,
                len(missing),
                self.id_list_key,
            )


@dataclass
class FavoriteIdsService:
    """Keeps the bare id list behind the browse heart and favorites screen.

    This list lives under its own key and is never merged with the full
    favorite records kept by ``FavoritesService``.
    """

    store: JsonStore
    storage_key: str = FAVORITE_IDS_KEY
    _ids: list[int] = field(default_factory=list, init=False)
    _loaded: bool = field(default=False, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(self._ids)

    async def load(self) -> tuple[int, ...]:
        """Load persisted ids, defaulting to an empty list."""
        async with self._lock:
            await self._read()
        return self.ids

    def contains(self, recipe_id: int) -> bool:
        return recipe_id in self._ids

    async def toggle(self, recipe_id: int) -> bool:
        """Add or remove an id and return whether it is now saved."""
        async with self._lock:
            await self._ensure_loaded()
            if recipe_id in self._ids:
                updated = [value for value in self._ids if value != recipe_id]
            else:
                updated = [*self._ids, recipe_id]
            await self._commit(updated)
        return recipe_id in self._ids

    async def remove(self, recipe_id: int) -> bool:
        """Drop an id; return True when it was saved."""
        async with self._lock:
            await self._ensure_loaded()
            updated = [value for value in self._ids if value != recipe_id]
            removed = len(updated) != len(self._ids)
            await self._commit(updated)
        return removed

    async def _read(self) -> None:
        stored = await self.store.load(self.storage_key, default=[])
        ids: list[int] = []
        for value in stored if isinstance(stored, list) else []:
            recipe_id = _to_int(value)
            if recipe_id and recipe_id not in ids:
                ids.append(recipe_id)
        self._ids = ids
        self._loaded = True

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            _logger.warning(
                "Favorite ids changed before load; reading %s first", self.storage_key
            )
            await self._read()

    async def _commit(self, ids: list[int]) -> None:
        self._ids = ids
        await self.store.save(self.storage_key, ids)


def parse_favorite(
    raw: FavoriteRecipe | Mapping[str, object] | None,
) -> FavoriteRecipe | None:
    """Build a favorite from a stored or submitted record; None without an id."""
    if isinstance(raw, FavoriteRecipe):
        return raw
    if not isinstance(raw, Mapping):
        return None
    recipe_id = _to_int(raw.get("id"))
    if not recipe_id:
        return None
    health_score = raw.get("healthScore")
    return FavoriteRecipe(
        id=recipe_id,
        title=str(raw.get("title") or ""),
        image=raw.get("image") if isinstance(raw.get("image"), str) else None,
        ready_in_minutes=_to_int(raw.get("readyInMinutes")),
        health_score=(
            float(health_score) if isinstance(health_score, int | float) else None
        ),
    )


def _to_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None
