"""Pytest configuration and fixtures."""

import json
import shutil
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from coursehub.core import container
from coursehub.domain.platform.document import Document
from coursehub.infrastructure.storage import JsonDocumentStore
from coursehub.main import app

SEED_FILE = Path(__file__).parent.parent / "database" / "base_dados.json"

# Date stamped on certificates issued during tests
TODAY = date(2025, 1, 15)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Copy the seed dataset to a fresh location for each test."""
    target = tmp_path / "database" / "base_dados.json"
    target.parent.mkdir()
    shutil.copy(SEED_FILE, target)
    return target


@pytest.fixture
def store(data_file: Path) -> JsonDocumentStore:
    return JsonDocumentStore(data_file)


@pytest.fixture
def document(store: JsonDocumentStore) -> Document:
    """Seed dataset loaded into the domain model."""
    return store.load()


@pytest.fixture
def read_stored(data_file: Path) -> Callable[[], dict[str, Any]]:
    """Return a reader for the raw persisted JSON."""

    def read() -> dict[str, Any]:
        return json.loads(data_file.read_text(encoding="utf-8"))

    return read


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client(store: JsonDocumentStore, today: date) -> Generator[TestClient, Any, None]:
    """Create a test client backed by the temporary document."""
    container.document_store.override(providers.Object(store))
    container.today.override(providers.Object(lambda: today))

    with TestClient(app) as test_client:
        yield test_client

    container.document_store.reset_override()
    container.today.reset_override()
