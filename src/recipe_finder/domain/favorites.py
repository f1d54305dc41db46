"""Domain models for favorite recipes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteRecipe:
    """Recipe summary a user has marked for quick access."""

    id: int
    title: str
    image: str | None = None
    ready_in_minutes: int | None = None
    health_score: float | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the stored JSON shape of the favorite."""
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "readyInMinutes": self.ready_in_minutes,
            "healthScore": self.health_score,
        }
