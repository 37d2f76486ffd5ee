"""Fixtures das rotas: app FastAPI com container em memória."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import AppContainer, build_container
from config.settings import AuthSettings, BaseSettings, NotificationSettings, StorageSettings

ADMIN_NAME = "admin"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def container() -> AppContainer:
    return build_container(
        BaseSettings(environment="test"),
        AuthSettings(
            jwt_secret="route-test-secret-with-32-characters!!",
            admin_username=ADMIN_NAME,
            admin_password=ADMIN_PASSWORD,
        ),
        StorageSettings(),
        NotificationSettings(queue_size=16),
    )


@pytest.fixture
def client(container: AppContainer) -> Iterator[TestClient]:
    with TestClient(create_app(container)) as test_client:
        yield test_client


def _bearer(client: TestClient, path: str, name: str, password: str) -> dict[str, str]:
    response = client.post(path, json={"user_name": name, "password": password})
    assert response.status_code in (200, 201), response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    return _bearer(client, "/auth/login", ADMIN_NAME, ADMIN_PASSWORD)


@pytest.fixture
def user_headers(client: TestClient) -> dict[str, str]:
    return _bearer(client, "/auth/register", "maria", "senha123")
