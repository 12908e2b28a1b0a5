import json
import traceback
from typing import Any, Optional

from .client import JsonStorageClient, parse_document_id
from .config import StoreConfig
from .errors import RemoteStorageError
from .id_store import DocumentIdStore, get_id_store
from .types import ProxyResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,PUT,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

EMPTY_DOCUMENT = "[]"


def normalize_body(body: Any) -> str:
    """Turn an inbound PUT body into the JSON string sent upstream."""
    if body is None:
        return EMPTY_DOCUMENT
    if isinstance(body, bytes):
        return body.decode("utf-8")
    if isinstance(body, str):
        return body
    return json.dumps(body)


class SongsProxy:
    """Forwards songs reads and writes to a single jsonstorage document."""

    def __init__(
        self,
        config: StoreConfig,
        client: Optional[JsonStorageClient] = None,
        id_store: Optional[DocumentIdStore] = None,
    ):
        self.config = config
        self.client = client or JsonStorageClient(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout=config.timeout,
        )
        self.id_store = id_store if id_store is not None else get_id_store(config)

    # ------------------------------ Document id -------------------------------
    def resolve_document_id(self) -> str:
        if self.config.document_id:
            return self.config.document_id

        stored = self.id_store.load()
        if stored:
            return stored

        # No id anywhere yet: start a fresh document holding an empty list
        resp = self.client.create(EMPTY_DOCUMENT)
        if not resp.ok:
            raise RemoteStorageError("POST", resp.status_code, resp.text)

        document_id = parse_document_id(resp.json())
        self.id_store.save(document_id)

        # The running process cannot edit its own environment; copy this id
        # into the deployment settings by hand.
        print(f"[jsonstorage] Created new document. Set JSONSTORAGE_DOCUMENT_ID to: {document_id}")
        return document_id

    # -------------------------------- Requests --------------------------------
    def handle(self, method: str, body: Any = None) -> ProxyResponse:
        method = (method or "").upper()

        if method == "OPTIONS":
            return ProxyResponse(200, dict(CORS_HEADERS), empty=True)

        if method not in ("GET", "PUT"):
            return self._json(405, {"error": "Method Not Allowed"})

        try:
            if method == "GET":
                return self._json(200, self._get())
            return self._json(200, self._put(body))
        except Exception as e:
            print(f"[songs] Error handling {method}: {str(e)}")
            traceback.print_exc()
            return self._json(500, {"error": str(e) or "Internal Error"})

    def _get(self) -> Any:
        document_id = self.resolve_document_id()
        resp = self.client.fetch(document_id)

        if resp.status_code == 404:
            print(f"[jsonstorage] Document {document_id} not found, recreating")
            # A new document is created under a new id; that id is not kept,
            # so later requests still target the original one.
            created = self.client.create(EMPTY_DOCUMENT)
            if not created.ok:
                raise RemoteStorageError("recreate", created.status_code, created.text)
            return []

        return resp.json()

    def _put(self, body: Any) -> Any:
        document_id = self.resolve_document_id()
        payload = normalize_body(body)

        resp = self.client.overwrite(document_id, payload)

        if resp.status_code == 404:
            print(f"[jsonstorage] Document {document_id} not found, creating it with the new body")
            created = self.client.create(payload)
            if not created.ok:
                raise RemoteStorageError("POST after 404", created.status_code, created.text)
            resp = created

        if not resp.ok:
            raise RemoteStorageError("PUT/POST", resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError:
            return {}

    @staticmethod
    def _json(status: int, payload: Any) -> ProxyResponse:
        headers = dict(CORS_HEADERS)
        headers["Content-Type"] = "application/json"
        return ProxyResponse(status, headers, payload)
