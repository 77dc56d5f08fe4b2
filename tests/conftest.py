from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from countries_api.services.country_store import CountryStore, get_store

SAMPLE = [
    {"code": "US", "name": "United States", "capital": "Washington, D.C.", "region": "North America", "currency": "USD"},
    {"code": "DE", "name": "Germany", "capital": "Berlin", "region": "Europe", "currency": "EUR"},
    {"code": "fr", "name": "France", "capital": "Paris", "region": "Europe", "currency": "EUR"},
    {"code": "JP", "name": "Japan", "capital": "Tokyo", "region": "Asia", "currency": "JPY"},
]


@pytest.fixture
def store() -> CountryStore:
    return CountryStore.from_records(SAMPLE)


@pytest.fixture
def write_dataset(tmp_path):
    def _write(payload, name: str = "countries.json"):
        p = tmp_path / name
        p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return p

    return _write


@pytest.fixture
def fresh_store_cache():
    # drop the process-wide store before and after, so env overrides take effect and don't leak
    get_store.cache_clear()
    yield
    get_store.cache_clear()


@pytest.fixture
def client() -> TestClient:
    from countries_api.main import app

    return TestClient(app)
