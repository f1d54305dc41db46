"""Grocery list export stubs."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote

from recipe_finder.domain.export import ExportOutcome, ExportTarget
from recipe_finder.domain.grocery import GroceryItem

SUPPORTED_TARGETS: tuple[ExportTarget, ...] = (
    ExportTarget(id="kroger", name="Kroger", logo="🛒", available=True),
    ExportTarget(id="walmart", name="Walmart", logo="🛒", available=False),
    ExportTarget(id="target", name="Target", logo="🎯", available=False),
    ExportTarget(id="amazon", name="Amazon Fresh", logo="📦", available=False),
    ExportTarget(id="instacart", name="Instacart", logo="🚚", available=True),
    ExportTarget(id="email", name="Email", logo="📧", available=True),
    ExportTarget(id="text", name="Text Message", logo="📱", available=True),
    ExportTarget(id="clipboard", name="Copy to Clipboard", logo="📋", available=True),
)

_STORE_WEBSITES = {
    "kroger": "https://www.kroger.com",
    "instacart": "https://www.instacart.com",
}

_logger = logging.getLogger(__name__)


class UnknownExportTargetError(ValueError):
    """Raised for an export target that does not exist."""


class ExportInputError(ValueError):
    """Raised when a target needs contact details that were not provided."""


class EmptyGroceryListError(ValueError):
    """Raised when there is nothing on the grocery list to export."""


@dataclass
class ExportService:
    """Turn export requests into URLs or acknowledgments.

    Nothing is delivered from here: callers open the returned URL, and no
    retry or confirmation happens.
    """

    targets: tuple[ExportTarget, ...] = SUPPORTED_TARGETS

    def get_target(self, target_id: str) -> ExportTarget:
        """Return a target by id."""
        for target in self.targets:
            if target.id == target_id:
                return target
        raise UnknownExportTargetError(f"Unknown export target: {target_id}")

    def export(
        self,
        target_id: str,
        items: Iterable[GroceryItem],
        email: str | None = None,
        phone: str | None = None,
    ) -> ExportOutcome:
        """Build the outcome for exporting the given items to a target."""
        target = self.get_target(target_id)
        items = list(items)
        if not items:
            raise EmptyGroceryListError(
                "Your grocery list is empty. Add some items before exporting."
            )
        if not target.available:
            return ExportOutcome(
                target=target.id,
                status="coming_soon",
                title="Coming Soon",
                message=(
                    f"Integration with {target.name} is coming soon! "
                    "We're working on connecting to their systems."
                ),
            )
        item_list = format_item_list(items)
        _logger.info("Exporting grocery list to %s", target.id)
        if target.id in _STORE_WEBSITES:
            return ExportOutcome(
                target=target.id,
                status="redirect",
                title=f"{target.name} Export",
                message=f"Open the {target.name} website to finish your order.",
                url=_STORE_WEBSITES[target.id],
            )
        if target.id == "email":
            if not email or not email.strip():
                raise ExportInputError("Please enter an email address")
            subject = quote("My Grocery List")
            body = quote(item_list)
            return ExportOutcome(
                target=target.id,
                status="open_url",
                title="Email",
                message="Opening your mail app.",
                url=f"mailto:{email.strip()}?subject={subject}&body={body}",
            )
        if target.id == "text":
            if not phone or not phone.strip():
                raise ExportInputError("Please enter a phone number")
            return ExportOutcome(
                target=target.id,
                status="open_url",
                title="Text Message",
                message="Opening your messages app.",
                url=f"sms:{phone.strip()}?body={quote(item_list)}",
            )
        return ExportOutcome(
            target=target.id,
            status="copied",
            title="List Copied",
            message="Your grocery list has been copied to clipboard!",
            content=item_list,
        )


def format_item_list(items: Iterable[GroceryItem]) -> str:
    """Return item names one per line."""
    return "\n".join(item.name for item in items)
