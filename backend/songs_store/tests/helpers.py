"""Shared fakes for the songs_store tests."""

import json
from typing import Any
from unittest.mock import Mock

from ..client import JsonStorageClient
from ..config import StoreConfig
from ..id_store import MemoryIdStore
from ..proxy import SongsProxy

BASE_URL = "https://jsonstorage.test/v1/json"


def make_response(status: int = 200, payload: Any = None, text: str | None = None, bad_json: bool = False) -> Mock:
    """Create a stand-in for ``requests.Response``."""
    resp = Mock()
    resp.status_code = status
    resp.ok = status < 400
    if text is None:
        text = json.dumps(payload) if payload is not None else ""
    resp.text = text
    if bad_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = payload
    return resp


def make_proxy(responses, document_id: str | None = "doc-1", api_key: str | None = None, id_store=None):
    """Build a proxy whose HTTP session replays ``responses`` in order."""
    session = Mock()
    session.request.side_effect = list(responses)
    config = StoreConfig(document_id=document_id, api_key=api_key, base_url=BASE_URL)
    client = JsonStorageClient(base_url=BASE_URL, api_key=api_key, session=session)
    proxy = SongsProxy(config, client=client, id_store=id_store if id_store is not None else MemoryIdStore())
    return proxy, session


def calls(session: Mock) -> list[tuple[str, str, bytes | None]]:
    """(method, url, body) for every request the session saw."""
    return [
        (c.args[0], c.args[1], c.kwargs.get("data"))
        for c in session.request.call_args_list
    ]
