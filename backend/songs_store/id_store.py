from abc import ABC, abstractmethod
from typing import Optional

from supabase import create_client, Client

from .config import StoreConfig, DEFAULT_ID_TABLE, DEFAULT_ID_KEY


class DocumentIdStore(ABC):
    """Somewhere to remember the jsonstorage document id between requests."""

    @abstractmethod
    def load(self) -> Optional[str]:
        ...

    @abstractmethod
    def save(self, document_id: str) -> None:
        ...


class MemoryIdStore(DocumentIdStore):
    """Keeps the id for the lifetime of the process only."""

    def __init__(self, document_id: Optional[str] = None):
        self.document_id = document_id

    def load(self) -> Optional[str]:
        return self.document_id

    def save(self, document_id: str) -> None:
        self.document_id = document_id


class SupabaseIdStore(DocumentIdStore):
    """Persists the id as a single ``{key, value}`` row in a Supabase table.

    Expected table fields:
    - key (text, primary key)
    - value (text)

    The id is also cached in memory, so Supabase is only read once per
    process and a failed write still leaves the id usable until restart.
    """

    def __init__(self, client: Client, table: str = DEFAULT_ID_TABLE, key: str = DEFAULT_ID_KEY):
        self.client = client
        self.table = table
        self.key = key
        self._cache = MemoryIdStore()

    def load(self) -> Optional[str]:
        cached = self._cache.load()
        if cached:
            return cached

        try:
            response = self.client.table(self.table).select("value").eq("key", self.key).execute()
        except Exception as e:
            print(f"[jsonstorage] Error reading document id from Supabase: {str(e)}")
            return None

        rows = response.data or []
        if not rows or not rows[0].get("value"):
            return None

        self._cache.save(rows[0]["value"])
        return self._cache.load()

    def save(self, document_id: str) -> None:
        self._cache.save(document_id)
        try:
            self.client.table(self.table).upsert({"key": self.key, "value": document_id}).execute()
            print(f"[jsonstorage] Saved document id to Supabase table '{self.table}'")
        except Exception as e:
            print(f"[jsonstorage] Error saving document id to Supabase: {str(e)}")


def get_id_store(config: StoreConfig) -> DocumentIdStore:
    if not config.has_supabase:
        return MemoryIdStore()

    supabase: Client = create_client(config.supabase_url, config.supabase_service_key)
    return SupabaseIdStore(supabase, table=config.id_table, key=config.id_key)
