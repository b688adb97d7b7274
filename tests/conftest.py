import os

# must be set before taskboard.main is imported: the module-level app needs a secret
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.database import DEFAULT_USER, MemoryStore
from taskboard.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    return create_app(Settings(secret_key=TEST_SECRET), store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def token(client):
    r = client.post("/api/login", json={"email": DEFAULT_USER.email, "password": DEFAULT_USER.password})
    assert r.status_code == 200
    return r.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
