import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

JSONSTORAGE_BASE_URL = "https://api.jsonstorage.net/v1/json"
DEFAULT_ID_TABLE = "app_settings"
DEFAULT_ID_KEY = "jsonstorage_document_id"


def _env(name: str) -> Optional[str]:
    # Vercel hands unset variables through as empty strings
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class StoreConfig:
    """Settings for the songs proxy, read once per process.

    ``document_id`` is optional: when it is missing the proxy creates a new
    document on first use and prints the id so it can be copied into
    ``JSONSTORAGE_DOCUMENT_ID``.
    """

    document_id: Optional[str] = None
    api_key: Optional[str] = None
    base_url: str = JSONSTORAGE_BASE_URL
    timeout: Optional[float] = None
    supabase_url: Optional[str] = None
    supabase_service_key: Optional[str] = None
    id_table: str = DEFAULT_ID_TABLE
    id_key: str = DEFAULT_ID_KEY

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_key)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "StoreConfig":
        load_dotenv(dotenv_path)

        timeout = _env("JSONSTORAGE_TIMEOUT")
        return cls(
            document_id=_env("JSONSTORAGE_DOCUMENT_ID"),
            api_key=_env("JSONSTORAGE_API_KEY"),
            base_url=(_env("JSONSTORAGE_BASE_URL") or JSONSTORAGE_BASE_URL).rstrip("/"),
            timeout=float(timeout) if timeout else None,
            supabase_url=_env("SUPABASE_URL"),
            supabase_service_key=_env("SUPABASE_SERVICE_ROLE_KEY"),
            id_table=_env("JSONSTORAGE_ID_TABLE") or DEFAULT_ID_TABLE,
        )
