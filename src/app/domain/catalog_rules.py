"""Regras puras de integridade referencial do catálogo.

Funções sem IO compartilhadas pelos backends de persistência (memória e
Redis). Cada função recebe o estado atual e devolve apenas o que muda,
para que o backend aplique tudo numa única operação atômica.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.models import Category, Guess


def detach_nominee(categories: Iterable[Category], nominee_id: int) -> list[Category]:
    """Remove o indicado de todas as categorias, zerando vencedores que o referenciam.

    Returns:
        Apenas as categorias alteradas, já com o novo estado.
    """
    changed: list[Category] = []
    for category in categories:
        if nominee_id not in category.nominee_ids and category.winner_id != nominee_id:
            continue
        winner_id = None if category.winner_id == nominee_id else category.winner_id
        changed.append(
            replace(
                category,
                nominee_ids=category.nominee_ids - {nominee_id},
                winner_id=winner_id,
            )
        )
    return changed


def guesses_for_nominee(guesses: Iterable[Guess], nominee_id: int) -> list[Guess]:
    """Palpites que apontam para o indicado (removidos em cascata)."""
    return [guess for guess in guesses if guess.nominee_id == nominee_id]


def guesses_for_category(guesses: Iterable[Guess], category_id: int) -> list[Guess]:
    """Palpites da categoria (removidos em cascata)."""
    return [guess for guess in guesses if guess.category_id == category_id]


def associate(category: Category, nominee_id: int) -> Category | None:
    """Associa indicado à categoria.

    Returns:
        Nova categoria, ou None se a associação já existia (idempotente).
    """
    if nominee_id in category.nominee_ids:
        return None
    return replace(category, nominee_ids=category.nominee_ids | {nominee_id})


def with_winner(category: Category, nominee_id: int | None) -> Category | None:
    """Define (ou limpa, com None) o vencedor da categoria.

    Returns:
        Nova categoria, ou None se o indicado não pertence à categoria.
    """
    if nominee_id is not None and nominee_id not in category.nominee_ids:
        return None
    return replace(category, winner_id=nominee_id)


def winners_by_category(categories: Iterable[Category]) -> dict[int, int]:
    """Mapa category_id -> winner_id apenas para categorias com vencedor."""
    return {c.id: c.winner_id for c in categories if c.winner_id is not None}
