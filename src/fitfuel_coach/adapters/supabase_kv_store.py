"""Supabase-backed key/value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fitfuel_coach.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase implementation storing values in the app_state table."""

    client: Client
    profile_key: str = "default"

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table("app_state")
            .select("value")
            .eq("profile_key", self.profile_key)
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table("app_state").upsert(
            {
                "profile_key": self.profile_key,
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="profile_key,key",
        ).execute()
