from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.main import create_app
from user_directory_api.app.services.user_store import UserStore


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def app(store: UserStore):
    # create_app seeds the empty store with user "1" (Alice).
    return create_app(Settings(api_prefix="", seed_user_name="Alice"), store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
