"""Configuração do pytest para o projeto Palpitheion."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.infra.crypto import HmacTokenIssuer  # noqa: E402
from app.infra.identity import MemoryIdentityProvider  # noqa: E402
from app.infra.notifications import MemoryNotificationChannel  # noqa: E402
from app.infra.stores import MemoryPalpiteStore  # noqa: E402
from app.protocols.identity import DEFAULT_ROLES  # noqa: E402
from app.services import (  # noqa: E402
    AdminOperations,
    AuthService,
    GuessService,
    ScoringEngine,
    VisibilityGate,
)

TEST_JWT_SECRET = "test-secret-with-at-least-32-characters!"
ADMIN_NAME = "admin"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def store() -> MemoryPalpiteStore:
    return MemoryPalpiteStore()


@pytest.fixture
def channel() -> MemoryNotificationChannel:
    return MemoryNotificationChannel()


@pytest.fixture
def gate(channel: MemoryNotificationChannel) -> VisibilityGate:
    return VisibilityGate(channel)


@pytest.fixture
def identity() -> MemoryIdentityProvider:
    provider = MemoryIdentityProvider()
    for role in DEFAULT_ROLES:
        provider.ensure_role(role)
    return provider


@pytest.fixture
def tokens() -> HmacTokenIssuer:
    return HmacTokenIssuer(TEST_JWT_SECRET, issuer="palpitheion", audience="palpitheion-web")


@pytest.fixture
def admin_ops(store: MemoryPalpiteStore) -> AdminOperations:
    return AdminOperations(store)


@pytest.fixture
def guess_service(
    store: MemoryPalpiteStore, identity: MemoryIdentityProvider, gate: VisibilityGate
) -> GuessService:
    return GuessService(store, store, identity, gate)


@pytest.fixture
def scoring(
    store: MemoryPalpiteStore, identity: MemoryIdentityProvider, gate: VisibilityGate
) -> ScoringEngine:
    return ScoringEngine(store, store, identity, gate)


@pytest.fixture
def auth_service(identity: MemoryIdentityProvider, tokens: HmacTokenIssuer) -> AuthService:
    return AuthService(identity, tokens)
