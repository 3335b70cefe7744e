"""Shared fixtures.

The database URL must be pinned before anything imports ``partnerlink``:
settings and the async engine are created at import time.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

_DB_PATH = Path(tempfile.mkdtemp(prefix="partnerlink-tests-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from partnerlink.main import app  # noqa: E402
from partnerlink.services.directory import directory_sessions  # noqa: E402


@pytest.fixture(autouse=True)
def reset_directory_sessions():
    directory_sessions.clear()
    yield
    directory_sessions.clear()


@pytest.fixture()
def client() -> TestClient:
    """A client against a fresh, empty database."""
    _DB_PATH.unlink(missing_ok=True)
    with TestClient(app) as test_client:
        yield test_client
    _DB_PATH.unlink(missing_ok=True)


@pytest.fixture()
def create_vendor(client: TestClient):
    """POST a vendor and return the created record body."""

    def _create(vendor_id: str, **fields) -> dict:
        payload = {"id": vendor_id, "name": f"Partner {vendor_id}", **fields}
        resp = client.post("/api/v1/vendors", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create
