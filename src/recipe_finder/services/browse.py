"""Recipe browsing state."""

import logging
from dataclasses import dataclass, field

from recipe_finder.domain.recipes import RecipeSummary
from recipe_finder.services.recipes import RecipeService

LOAD_ERROR = (
    "Failed to load recipes. Please check your internet connection or API key."
)
SEARCH_ERROR = (
    "Failed to search recipes. Please check your internet connection or API key."
)

_logger = logging.getLogger(__name__)


@dataclass
class RecipeBrowser:
    """Current recipe list shown on the browse screen."""

    recipe_service: RecipeService
    recipes: list[RecipeSummary] = field(default_factory=list)
    query: str = ""
    error: str | None = None

    async def refresh(self) -> list[RecipeSummary]:
        """Replace the list with random recipes; keep it on failure."""
        self.error = None
        try:
            self.recipes = await self.recipe_service.random()
        except Exception:
            _logger.exception("Error fetching recipes")
            self.error = LOAD_ERROR
        return self.recipes

    async def search(self, query: str) -> bool:
        """Run a remote search; return False when the query is blank."""
        if not query.strip():
            return False
        self.error = None
        self.query = query
        try:
            self.recipes = await self.recipe_service.search(query)
        except Exception:
            _logger.exception("Error searching recipes")
            self.error = SEARCH_ERROR
        return True

    async def clear_search(self) -> list[RecipeSummary]:
        """Forget the search query and reload random recipes."""
        self.query = ""
        return await self.refresh()

    def filtered(self, text: str | None) -> list[RecipeSummary]:
        """Filter the current list by a case-insensitive title substring."""
        needle = (text or "").strip().lower()
        if not needle:
            return list(self.recipes)
        return [recipe for recipe in self.recipes if needle in recipe.title.lower()]
