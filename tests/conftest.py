"""Shared fixtures: a fresh location store and an API client bound to it."""
import pytest
from fastapi.testclient import TestClient

from recyclepro.store import LocationStore
from recyclepro.web.app import app
from recyclepro.web.common import get_location_store


@pytest.fixture
def store():
    return LocationStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_location_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
