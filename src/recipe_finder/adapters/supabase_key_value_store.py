"""Supabase implementation of the key-value store."""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from recipe_finder.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase-backed store keeping one row per key."""

    client: Client
    table: str = "app_storage"

    async def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        return await asyncio.to_thread(self._get_item, key)

    async def set_item(self, key: str, value: str) -> None:
        """Upsert the value for a key."""
        await asyncio.to_thread(self._set_item, key, value)

    def _get_item(self, key: str) -> str | None:
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def _set_item(self, key: str, value: str) -> None:
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            )
            .execute()
        )
        if response.data is None:
            raise RuntimeError(f"Failed to store {key} in Supabase")
