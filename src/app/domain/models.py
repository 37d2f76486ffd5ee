"""Modelos de domínio do bolão: Categoria, Indicado, Palpite e Usuário.

Entidades imutáveis; mudanças produzem novas instâncias via
`dataclasses.replace`. Serialização `to_dict`/`from_dict` é usada pelos
backends de persistência.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Nominee:
    """Indicado que pode concorrer em uma ou mais categorias.

    Atributos:
        id: Identificador sequencial
        name: Nome de exibição
        small_image_url: Link opcional para imagem pequena
        large_image_url: Link opcional para imagem grande
    """

    id: int
    name: str
    small_image_url: str | None = None
    large_image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializa para persistência."""
        return {
            "id": self.id,
            "name": self.name,
            "small_image_url": self.small_image_url,
            "large_image_url": self.large_image_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Nominee:
        """Deserializa de persistência."""
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            small_image_url=data.get("small_image_url"),
            large_image_url=data.get("large_image_url"),
        )


@dataclass(frozen=True, slots=True)
class Category:
    """Categoria votável com seus indicados e vencedor opcional.

    Invariante: `winner_id` é None ou pertence a `nominee_ids`.

    Atributos:
        id: Identificador sequencial
        name: Nome obrigatório (não vazio)
        description: Descrição opcional
        nominee_ids: Conjunto de indicados associados (ordem irrelevante)
        winner_id: Indicado vencedor, quando definido
    """

    id: int
    name: str
    description: str | None = None
    nominee_ids: frozenset[int] = field(default_factory=frozenset)
    winner_id: int | None = None

    @property
    def has_winner(self) -> bool:
        return self.winner_id is not None

    def to_dict(self) -> dict[str, Any]:
        """Serializa para persistência."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "nominee_ids": sorted(self.nominee_ids),
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        """Deserializa de persistência."""
        winner_id = data.get("winner_id")
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            description=data.get("description"),
            nominee_ids=frozenset(int(i) for i in data.get("nominee_ids", [])),
            winner_id=int(winner_id) if winner_id is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Guess:
    """Palpite de um usuário para o vencedor de uma categoria.

    No máximo um palpite por par (user_id, category_id).
    """

    id: int
    user_id: str
    category_id: int
    nominee_id: int

    @property
    def key(self) -> str:
        """Chave única do par (usuário, categoria)."""
        return guess_key(self.user_id, self.category_id)

    def to_dict(self) -> dict[str, Any]:
        """Serializa para persistência."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "category_id": self.category_id,
            "nominee_id": self.nominee_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Guess:
        """Deserializa de persistência."""
        return cls(
            id=int(data["id"]),
            user_id=str(data["user_id"]),
            category_id=int(data["category_id"]),
            nominee_id=int(data["nominee_id"]),
        )


@dataclass(frozen=True, slots=True)
class User:
    """Usuário opaco (id + nome) fornecido pelo provedor de identidade."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class CategoryGuess:
    """Visão de uma categoria com o palpite de um usuário (ou None)."""

    category: Category
    guess: Guess | None = None


@dataclass(frozen=True, slots=True)
class UserScore:
    """Pontuação (palpites certos) de um usuário."""

    user: User
    score: int


def guess_key(user_id: str, category_id: int) -> str:
    """Chave canônica de um palpite."""
    return f"{user_id}:{category_id}"
