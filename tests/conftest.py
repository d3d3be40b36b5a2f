"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from invoicebuddy.config import reset_settings
from invoicebuddy.core.services import TimestampIdGenerator
from invoicebuddy.infrastructure.storage.jsonfile import JsonRecordStore, reset_record_store


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point settings at a temporary data directory for every test."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_record_store()
    yield
    reset_settings()
    reset_record_store()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
async def store(data_dir: Path) -> JsonRecordStore:
    """Initialized JSON record store over an empty temp directory."""
    record_store = JsonRecordStore(data_dir)
    await record_store.initialize()
    return record_store


@pytest.fixture
def fixed_clock() -> Callable[[], float]:
    """Epoch seconds clock frozen at 2023-11-14T22:13:20Z."""
    return lambda: 1_700_000_000.0


@pytest.fixture
def id_generator(fixed_clock: Callable[[], float]) -> TimestampIdGenerator:
    return TimestampIdGenerator(clock=fixed_clock)


@pytest.fixture
async def client(store: JsonRecordStore) -> AsyncGenerator[AsyncClient, None]:
    """Async client for the app, backed by the temp record store."""
    from invoicebuddy.api.dependencies import get_store
    from invoicebuddy.api.main import app

    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def sample_customer() -> dict:
    return {
        "name": "Acme Corp",
        "email": "billing@acme.test",
        "phone": "555-0100",
        "address": "1 Main St",
    }


@pytest.fixture
def sample_product() -> dict:
    return {
        "name": "Widget",
        "category": "Hardware",
        "description": "A small widget",
        "price": 10.0,
    }
