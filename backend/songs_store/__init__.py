from .config import StoreConfig
from .client import JsonStorageClient, parse_document_id
from .errors import StoreError, RemoteStorageError, IdParseError
from .id_store import DocumentIdStore, MemoryIdStore, SupabaseIdStore, get_id_store
from .proxy import SongsProxy, CORS_HEADERS
from .types import ProxyResponse

__all__ = [
    "StoreConfig",
    "JsonStorageClient",
    "parse_document_id",
    "StoreError",
    "RemoteStorageError",
    "IdParseError",
    "DocumentIdStore",
    "MemoryIdStore",
    "SupabaseIdStore",
    "get_id_store",
    "SongsProxy",
    "CORS_HEADERS",
    "ProxyResponse",
]
