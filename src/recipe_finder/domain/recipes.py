"""Recipe domain models."""

from dataclasses import dataclass, field

DEFAULT_RECIPE_IMAGE = "https://spoonacular.com/recipeImages/default-image.jpg"


@dataclass(frozen=True)
class RecipeSummary:
    """Summary information about a recipe for list views."""

    id: int
    title: str
    image: str
    ready_in_minutes: int | None
    servings: int | None
    summary: str | None


@dataclass(frozen=True)
class Ingredient:
    """Ingredient line of a recipe."""

    id: int | None
    name: str
    original: str | None
    amount: float | None
    unit: str | None

    def describe(self) -> str:
        """Return the text used when the ingredient goes on a grocery list."""
        if self.original:
            return self.original
        amount = _format_amount(self.amount)
        parts = [part for part in (amount, self.unit, self.name) if part]
        return " ".join(parts)


@dataclass(frozen=True)
class InstructionStep:
    """Single numbered preparation step."""

    number: int
    step: str


@dataclass(frozen=True)
class Nutrient:
    """Nutrient amount per serving."""

    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class RecipeDetails:
    """Full recipe record with ingredients and instructions."""

    id: int
    title: str
    image: str
    ready_in_minutes: int | None
    servings: int | None
    summary: str | None
    health_score: float | None = None
    instructions: str | None = None
    extended_ingredients: list[Ingredient] = field(default_factory=list)
    analyzed_instructions: list[list[InstructionStep]] = field(default_factory=list)
    nutrients: list[Nutrient] = field(default_factory=list)


@dataclass(frozen=True)
class DetailResult:
    """Recipe detail lookup result, possibly masked by placeholder content."""

    recipe: RecipeDetails
    error: str | None = None
    is_placeholder: bool = False


def _format_amount(amount: float | None) -> str:
    if amount is None:
        return ""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)
