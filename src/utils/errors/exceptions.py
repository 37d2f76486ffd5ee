"""Exceções de domínio e de infraestrutura do Palpitheion.

A camada HTTP traduz cada tipo para um status code (ver api/errors.py).
"""

from __future__ import annotations


class PalpitheionError(Exception):
    """Base para erros de domínio expostos ao cliente."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PalpitheionError):
    """Entrada inválida ou ausente (ex.: nome vazio, indicado fora da categoria)."""

    kind = "validation_error"


class NotFoundError(PalpitheionError):
    """Id ou nome referenciado não existe."""

    kind = "not_found"


class ConflictError(PalpitheionError):
    """Conflito de unicidade (ex.: nome de usuário já em uso)."""

    kind = "conflict"


class ForbiddenError(PalpitheionError):
    """Acesso negado: palpites bloqueados/liberados ou role insuficiente."""

    kind = "forbidden"


class AuthenticationError(PalpitheionError):
    """Credenciais ou token inválidos."""

    kind = "authentication_error"


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class StoreUnavailableError(InfrastructureError):
    """Falha de conexão/timeout ao acessar o backend de persistência."""
