"""
Test configuration and fixtures for dotlink.
Every test gets its own data directory, so record and blacklist files never leak between tests.
"""

import json
from typing import Iterable, List

import pytest
from fastapi.testclient import TestClient

from main import app
from dotlink_app.config import settings
from dotlink_app.dependencies import clear_cached_dependencies
from dotlink_app.services.blacklist import BlacklistFilter
from dotlink_app.services.short_code_strategies import ShortCodeStrategy
from dotlink_app.storage.strategies import JSONFileRecordStore

TEST_BASE_URL = "https://dotlink.example"


class FixedShortCodeStrategy(ShortCodeStrategy):
    """Hands out predetermined codes in order, so assertions can name them."""

    def __init__(self, codes: Iterable[str]):
        self.codes: List[str] = list(codes)
        self.calls = 0

    def generate(self, sequence, existing_codes):
        code = self.codes[self.calls]
        self.calls += 1
        return code


@pytest.fixture(scope="function")
def data_dir(tmp_path, monkeypatch):
    """
    Point every file-backed setting at a fresh temporary directory.
    Cached singletons are dropped before and after so they pick up the new paths.
    """
    monkeypatch.setattr(settings, "urls_file_path", str(tmp_path / "urls.json"))
    monkeypatch.setattr(settings, "blacklist_file_path", str(tmp_path / "blacklist.json"))
    monkeypatch.setattr(settings, "database_url", f"sqlite:///{tmp_path / 'dotlink.db'}")
    monkeypatch.setattr(settings, "record_store_backend", "json")
    monkeypatch.setattr(settings, "short_code_strategy", "random")
    monkeypatch.setattr(settings, "base_url", TEST_BASE_URL)
    clear_cached_dependencies()

    yield tmp_path

    clear_cached_dependencies()


@pytest.fixture
def write_blacklist(data_dir):
    """Write the given terms as the blacklist file."""
    def _write(*terms: str):
        (data_dir / "blacklist.json").write_text(json.dumps(list(terms)), encoding="utf-8")
    return _write


@pytest.fixture
def urls_file(data_dir):
    return data_dir / "urls.json"


@pytest.fixture
def read_mappings(urls_file):
    """Parse the record file as the service left it."""
    def _read():
        return json.loads(urls_file.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def json_store(urls_file):
    store = JSONFileRecordStore(str(urls_file))
    store.initialize()
    return store


@pytest.fixture
def blacklist(data_dir):
    return BlacklistFilter(str(data_dir / "blacklist.json"))


@pytest.fixture(scope="function")
def client(data_dir):
    """
    Create a test client on top of the per-test data directory.
    Entering the client runs the app lifespan, which creates the empty record file.
    """
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
