"""Shared pytest fixtures for cart tests."""

import pytest
from fastapi.testclient import TestClient

from vibe_cart.core.config import Settings
from vibe_cart.database import MemoryCartStore, SqliteCartStore
from vibe_cart.main import create_app

USER = "demo"
RECEIPT_ID = "rcpt_test01"


def make_settings(**overrides) -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "vibe_cart.db")


@pytest.fixture(params=["memory", "sqlite"])
def store(request, db_path):
    """Each backend in turn; both must honour the same contract."""
    if request.param == "memory":
        backend = MemoryCartStore()
    else:
        backend = SqliteCartStore.open(db_path)
    yield backend
    backend.close()


@pytest.fixture
def settings(db_path) -> Settings:
    return make_settings(storage_backend="sqlite", db_path=db_path)


@pytest.fixture
def app(settings):
    return create_app(settings, id_factory=lambda: RECEIPT_ID)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
