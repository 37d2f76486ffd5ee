"""Domínio do bolão: entidades imutáveis e regras puras do catálogo."""

from app.domain.models import (
    Category,
    CategoryGuess,
    Guess,
    Nominee,
    User,
    UserScore,
    guess_key,
)

__all__ = [
    "Category",
    "CategoryGuess",
    "Guess",
    "Nominee",
    "User",
    "UserScore",
    "guess_key",
]
