"""Tests for StoreConfig.from_env."""

import pytest
from unittest.mock import patch

from ..config import StoreConfig, JSONSTORAGE_BASE_URL

ENV_VARS = [
    "JSONSTORAGE_DOCUMENT_ID",
    "JSONSTORAGE_API_KEY",
    "JSONSTORAGE_BASE_URL",
    "JSONSTORAGE_TIMEOUT",
    "JSONSTORAGE_ID_TABLE",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch('songs_store.config.load_dotenv') as mock_load:
        yield mock_load


def test_defaults_when_unset():
    config = StoreConfig.from_env()

    assert config.document_id is None
    assert config.api_key is None
    assert config.base_url == JSONSTORAGE_BASE_URL
    assert config.timeout is None
    assert not config.has_supabase


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JSONSTORAGE_DOCUMENT_ID", "doc-42")
    monkeypatch.setenv("JSONSTORAGE_API_KEY", "key")
    monkeypatch.setenv("JSONSTORAGE_BASE_URL", "https://mirror.test/json/")
    monkeypatch.setenv("JSONSTORAGE_TIMEOUT", "2.5")
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")

    config = StoreConfig.from_env()

    assert config.document_id == "doc-42"
    assert config.api_key == "key"
    assert config.base_url == "https://mirror.test/json"
    assert config.timeout == 2.5
    assert config.has_supabase


def test_empty_strings_count_as_absent(monkeypatch):
    monkeypatch.setenv("JSONSTORAGE_DOCUMENT_ID", "")
    monkeypatch.setenv("JSONSTORAGE_API_KEY", "  ")

    config = StoreConfig.from_env()

    assert config.document_id is None
    assert config.api_key is None


def test_loads_dotenv_file(clean_env):
    StoreConfig.from_env("/tmp/songs.env")

    clean_env.assert_called_once_with("/tmp/songs.env")
