"""Tests for grocery list export stubs."""

from datetime import UTC, datetime

import pytest

from recipe_finder.domain.grocery import GroceryItem
from recipe_finder.services.export import (
    EmptyGroceryListError,
    ExportInputError,
    ExportService,
    UnknownExportTargetError,
)


def _items() -> list[GroceryItem]:
    now = datetime.now(tz=UTC)
    return [
        GroceryItem(id="1", name="Milk", completed=False, created_at=now),
        GroceryItem(id="2", name="Eggs & Ham", completed=True, created_at=now),
    ]


def test_unavailable_target_is_coming_soon() -> None:
    outcome = ExportService().export("walmart", _items())

    assert outcome.status == "coming_soon"
    assert "Walmart" in outcome.message
    assert outcome.url is None


def test_email_builds_mailto_url() -> None:
    outcome = ExportService().export("email", _items(), email="cook@example.com")

    assert outcome.status == "open_url"
    assert outcome.url == (
        "mailto:cook@example.com?subject=My%20Grocery%20List"
        "&body=Milk%0AEggs%20%26%20Ham"
    )


def test_text_requires_phone_number() -> None:
    with pytest.raises(ExportInputError):
        ExportService().export("text", _items(), phone=" ")

    outcome = ExportService().export("text", _items(), phone="5551234")
    assert outcome.url == "sms:5551234?body=Milk%0AEggs%20%26%20Ham"


def test_email_requires_address() -> None:
    with pytest.raises(ExportInputError):
        ExportService().export("email", _items())


def test_store_targets_redirect_to_website() -> None:
    outcome = ExportService().export("instacart", _items())

    assert outcome.status == "redirect"
    assert outcome.url == "https://www.instacart.com"


def test_clipboard_returns_item_text() -> None:
    outcome = ExportService().export("clipboard", _items())

    assert outcome.status == "copied"
    assert outcome.content == "Milk\nEggs & Ham"


def test_unknown_target_is_rejected() -> None:
    with pytest.raises(UnknownExportTargetError):
        ExportService().export("fax", _items())


def test_empty_list_is_not_exported() -> None:
    with pytest.raises(EmptyGroceryListError):
        ExportService().export("email", [], email="a@b.c")

    with pytest.raises(EmptyGroceryListError):
        ExportService().export("walmart", iter([]))
