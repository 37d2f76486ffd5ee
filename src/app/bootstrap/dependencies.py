"""Composition root: conecta implementações concretas aos serviços.

Um único AppContainer por processo. Catálogo e palpites compartilham o
mesmo store para que cascatas entre eles sejam atômicas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_redis_client
from app.infra.crypto import HmacTokenIssuer
from app.infra.identity import MemoryIdentityProvider, RedisIdentityProvider
from app.infra.notifications import WebSocketNotificationChannel
from app.infra.stores import MemoryPalpiteStore, RedisPalpiteStore
from app.services import (
    AdminOperations,
    AuthService,
    CatalogQueries,
    GuessService,
    ScoringEngine,
    VisibilityGate,
)

if TYPE_CHECKING:
    from app.protocols.catalog_store import CatalogStoreProtocol
    from app.protocols.guess_store import GuessStoreProtocol
    from app.protocols.identity import IdentityProviderProtocol, TokenIssuerProtocol
    from app.protocols.notification import NotificationChannelProtocol
    from config.settings import (
        AuthSettings,
        BaseSettings,
        NotificationSettings,
        StorageSettings,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Serviços e infraestrutura compartilhados pela aplicação."""

    catalog_store: CatalogStoreProtocol
    guess_store: GuessStoreProtocol
    identity: IdentityProviderProtocol
    tokens: TokenIssuerProtocol
    channel: NotificationChannelProtocol
    gate: VisibilityGate
    admin: AdminOperations
    catalog: CatalogQueries
    guesses: GuessService
    scoring: ScoringEngine
    auth: AuthService
    admin_username: str = ""
    admin_password: str = ""


def create_palpite_store(
    storage: StorageSettings,
) -> MemoryPalpiteStore | RedisPalpiteStore:
    """Cria store de catálogo/palpites baseado na configuração."""
    if storage.backend == "redis":
        store = RedisPalpiteStore(
            create_redis_client(storage.redis_url),
            key_prefix=storage.redis_key_prefix,
        )
        logger.info("palpite_store_created", extra={"backend": "redis"})
        return store

    if storage.backend == "memory":
        logger.info("palpite_store_created", extra={"backend": "memory"})
        return MemoryPalpiteStore()

    msg = f"STORE_BACKEND inválido: {storage.backend}"
    raise ValueError(msg)


def create_identity_provider(
    storage: StorageSettings,
) -> MemoryIdentityProvider | RedisIdentityProvider:
    """Cria provedor de identidade no mesmo backend do store."""
    if storage.backend == "redis":
        provider = RedisIdentityProvider(
            create_redis_client(storage.redis_url),
            key_prefix=storage.redis_key_prefix,
        )
        logger.info("identity_provider_created", extra={"backend": "redis"})
        return provider

    if storage.backend == "memory":
        logger.info("identity_provider_created", extra={"backend": "memory"})
        return MemoryIdentityProvider()

    msg = f"STORE_BACKEND inválido: {storage.backend}"
    raise ValueError(msg)


def build_container(
    base: BaseSettings,
    auth: AuthSettings,
    storage: StorageSettings,
    notifications: NotificationSettings,
    *,
    store: MemoryPalpiteStore | RedisPalpiteStore | None = None,
    identity: IdentityProviderProtocol | None = None,
    channel: NotificationChannelProtocol | None = None,
) -> AppContainer:
    """Monta o grafo de dependências.

    Args:
        base: Settings base
        auth: Settings de autenticação
        storage: Settings de persistência
        notifications: Settings do canal em tempo real
        store: Store pronto (testes); padrão conforme `storage`
        identity: Provedor de identidade; padrão conforme `storage`
        channel: Canal de notificação (padrão: WebSocket)
    """
    palpite_store = store if store is not None else create_palpite_store(storage)
    identity_provider = identity if identity is not None else create_identity_provider(storage)
    notification_channel = (
        channel
        if channel is not None
        else WebSocketNotificationChannel(queue_size=notifications.queue_size)
    )

    tokens = HmacTokenIssuer(
        auth.signing_secret(base),
        issuer=auth.jwt_issuer or None,
        audience=auth.jwt_audience or None,
        expiration=auth.token_expiration,
    )
    gate = VisibilityGate(notification_channel)

    return AppContainer(
        catalog_store=palpite_store,
        guess_store=palpite_store,
        identity=identity_provider,
        tokens=tokens,
        channel=notification_channel,
        gate=gate,
        admin=AdminOperations(palpite_store),
        catalog=CatalogQueries(palpite_store),
        guesses=GuessService(palpite_store, palpite_store, identity_provider, gate),
        scoring=ScoringEngine(palpite_store, palpite_store, identity_provider, gate),
        auth=AuthService(identity_provider, tokens),
        admin_username=auth.admin_username,
        admin_password=auth.admin_password,
    )
