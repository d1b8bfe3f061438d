from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from school_portal_api.app.core.config import settings
from school_portal_api.app.core.db import Database
from school_portal_api.app.main import create_app


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PBKDF2 cheap in tests."""
    monkeypatch.setattr(settings, "password_hash_iterations", 1000)


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "school_portal_test.db")


@pytest.fixture
def db(db_path: str) -> Iterator[Database]:
    database = Database(db_path)
    yield database
    database.close()


@pytest.fixture
def client(db: Database) -> Iterator[TestClient]:
    app = create_app(db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "voornaam": "Jan",
        "tussenvoegsel": "van der",
        "achternaam": "Berg",
        "adres": "Stationsstraat 1, Utrecht",
        "wachtwoord": "geheim123",
        "email": "jan@example.nl",
        "telefoonnummer": "030-1234567",
        "mobiel_nummer": "06-12345678",
    }

