"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
monta o AppContainer com as implementações concretas.

Uso:
    from app.bootstrap import initialize_app, get_container

    # Na inicialização do serviço
    initialize_app()
    container = get_container()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.bootstrap.clients import close_redis_clients
from app.bootstrap.dependencies import (
    AppContainer,
    build_container,
    create_identity_provider,
    create_palpite_store,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_notification_settings,
    get_storage_settings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AppContainer",
    "build_container",
    "close_redis_clients",
    "create_identity_provider",
    "create_palpite_store",
    "get_container",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"auth: {error}" for error in get_auth_settings().validate(base))
    errors.extend(f"storage: {error}" for error in get_storage_settings().validate(base))
    errors.extend(f"notifications: {error}" for error in get_notification_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if not base.is_development:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_container() -> AppContainer:
    """Obtém o container da aplicação (singleton)."""
    return build_container(
        get_base_settings(),
        get_auth_settings(),
        get_storage_settings(),
        get_notification_settings(),
    )
