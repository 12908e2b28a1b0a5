from typing import Any, Optional

import requests

from .config import JSONSTORAGE_BASE_URL
from .errors import IdParseError


def parse_document_id(data: Any) -> str:
    """Pull the document id out of a create response.

    jsonstorage has answered with ``{"id": ...}`` and with
    ``{"uri": ".../json/<id>"}`` depending on the API version, so both are
    accepted.
    """
    if not isinstance(data, dict):
        raise IdParseError()

    document_id = data.get("id")
    if not document_id and data.get("uri"):
        document_id = str(data["uri"]).rstrip("/").split("/")[-1]

    if not document_id:
        raise IdParseError()
    return str(document_id)


class JsonStorageClient:
    """Minimal client for the jsonstorage.net document API.

    Methods return the raw ``requests.Response``; deciding what a 404 or a
    5xx means is up to the caller.
    """

    def __init__(
        self,
        base_url: str = JSONSTORAGE_BASE_URL,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, with_body: bool) -> dict[str, str]:
        headers = {}
        if with_body:
            headers["Content-Type"] = "application/json"
        if self.api_key:
            headers["apiKey"] = self.api_key
        return headers

    def document_url(self, document_id: str) -> str:
        return f"{self.base_url}/{document_id}"

    def create(self, body: str) -> requests.Response:
        print(f"[jsonstorage] POST {self.base_url}")
        return self.session.request(
            "POST",
            self.base_url,
            headers=self._headers(with_body=True),
            data=body.encode("utf-8"),
            timeout=self.timeout,
        )

    def fetch(self, document_id: str) -> requests.Response:
        print(f"[jsonstorage] GET {self.document_url(document_id)}")
        return self.session.request(
            "GET",
            self.document_url(document_id),
            headers=self._headers(with_body=False),
            timeout=self.timeout,
        )

    def overwrite(self, document_id: str, body: str) -> requests.Response:
        print(f"[jsonstorage] PUT {self.document_url(document_id)}")
        return self.session.request(
            "PUT",
            self.document_url(document_id),
            headers=self._headers(with_body=True),
            data=body.encode("utf-8"),
            timeout=self.timeout,
        )
