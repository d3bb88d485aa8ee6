from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from danceface.app import create_app
from danceface.core import ADMIN_PASS, ADMIN_USER
from danceface.core.storage import (
    JsonRecordStore,
    get_leaderboard_store,
    get_whitelist_store,
)
from danceface.models import LeaderboardEntry, WhitelistEntry


@pytest.fixture
def leaderboard_store(tmp_path):
    return JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)


@pytest.fixture
def whitelist_store(tmp_path):
    return JsonRecordStore(tmp_path / "wallets.json", WhitelistEntry)


@pytest.fixture
def client(leaderboard_store, whitelist_store):
    app = create_app()
    app.dependency_overrides[get_leaderboard_store] = lambda: leaderboard_store
    app.dependency_overrides[get_whitelist_store] = lambda: whitelist_store
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/admin/login", json={"username": ADMIN_USER, "password": ADMIN_PASS}
    )
    return {"Authorization": response.json()["token"]}
