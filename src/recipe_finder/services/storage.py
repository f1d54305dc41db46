"""Key-value persistence for JSON blobs."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Interface for the asynchronous string key-value store."""

    async def get_item(self, key: str) -> str | None:
        """Return the raw value stored under a key, if present."""

    async def set_item(self, key: str, value: str) -> None:
        """Store a raw value under a key, overwriting any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for local runs."""

    _values: dict[str, str]

    def __init__(self) -> None:
        self._values = {}

    async def get_item(self, key: str) -> str | None:
        """Return the stored value for a key."""
        return self._values.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Store a value for a key."""
        self._values[key] = value


@dataclass
class JsonStore:
    """Serialize JSON values into a key-value store.

    Storage failures never propagate: reads fall back to the default and
    writes report ``False`` so callers keep their in-memory state.
    """

    backend: KeyValueStore

    async def load(self, key: str, default: object = None) -> object:
        """Return the decoded value under a key or the default."""
        try:
            raw = await self.backend.get_item(key)
        except Exception:
            _logger.exception("Error loading %s from storage", key)
            return default
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError:
            _logger.exception("Stored value for %s is not valid JSON", key)
            return default

    async def save(self, key: str, value: object) -> bool:
        """Encode and store a value; return whether the write succeeded."""
        try:
            await self.backend.set_item(key, json.dumps(value))
        except Exception:
            _logger.exception("Error saving %s to storage", key)
            return False
        return True
