"""Protocolo de persistência de palpites.

Invariante: no máximo um palpite por (user_id, category_id).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.models import Guess


class GuessStoreProtocol(ABC):
    """Contrato síncrono de palpites."""

    @abstractmethod
    def upsert_guess(self, user_id: str, category_id: int, nominee_id: int) -> Guess | None:
        """Grava (ou sobrescreve) o palpite do par (usuário, categoria).

        A verificação de que o indicado pertence à categoria e a escrita
        são atômicas. Reenvio mantém o id do palpite original.

        Returns:
            Palpite gravado, ou None se o indicado não pertence à categoria.
        """

    @abstractmethod
    def get_guess(self, user_id: str, category_id: int) -> Guess | None: ...

    @abstractmethod
    def list_guesses_for_user(self, user_id: str) -> list[Guess]: ...

    @abstractmethod
    def list_guesses_for_category(self, category_id: int) -> list[Guess]: ...

    @abstractmethod
    def list_guesses(self) -> list[Guess]: ...
