"""Palpites dos usuários: envio (upsert) e consultas.

Política de reenvio: upsert. Um novo envio para o mesmo par
(usuário, categoria) troca o indicado escolhido e mantém o id do palpite.

Consultas de palpites alheios exigem o gate bloqueado; envio exige o gate
desbloqueado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.models import CategoryGuess
from utils.errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from app.domain.models import Guess, User
    from app.protocols.catalog_store import CatalogStoreProtocol
    from app.protocols.guess_store import GuessStoreProtocol
    from app.protocols.identity import IdentityProviderProtocol
    from app.services.visibility_gate import VisibilityGate

logger = logging.getLogger(__name__)


class GuessService:
    """Orquestra catálogo, palpites e gate de visibilidade."""

    def __init__(
        self,
        catalog: CatalogStoreProtocol,
        guesses: GuessStoreProtocol,
        identity: IdentityProviderProtocol,
        gate: VisibilityGate,
    ) -> None:
        self._catalog = catalog
        self._guesses = guesses
        self._identity = identity
        self._gate = gate

    def _catalog_view(self, user_id: str) -> list[CategoryGuess]:
        # Cobertura total do catálogo: categorias sem palpite vêm com None
        by_category = {g.category_id: g for g in self._guesses.list_guesses_for_user(user_id)}
        return [
            CategoryGuess(category=category, guess=by_category.get(category.id))
            for category in self._catalog.list_categories()
        ]

    def my_guesses(self, user_id: str) -> list[CategoryGuess]:
        """Todas as categorias com o palpite do usuário (ou None)."""
        return self._catalog_view(user_id)

    def my_guess_for_category(self, user_id: str, category_id: int) -> CategoryGuess:
        category = self._catalog.get_category(category_id)
        if category is None:
            raise NotFoundError("Categoria não encontrada.")
        return CategoryGuess(category=category, guess=self._guesses.get_guess(user_id, category_id))

    def guesses_for_user(self, user_name: str) -> tuple[User, list[CategoryGuess]]:
        """Palpites de outro usuário, visíveis apenas com o gate bloqueado.

        Raises:
            ForbiddenError: Gate desbloqueado.
            NotFoundError: Usuário inexistente.
        """
        self._gate.ensure_guesses_visible()

        user = self._identity.find_user_by_name(user_name)
        if user is None:
            raise NotFoundError("Usuário não encontrado.")
        return user, self._catalog_view(user.id)

    def guesses_for_category(self, category_id: int) -> list[Guess]:
        """Todos os palpites de uma categoria (gate bloqueado).

        Raises:
            ForbiddenError: Gate desbloqueado.
            NotFoundError: Categoria inexistente.
        """
        self._gate.ensure_guesses_visible()

        if self._catalog.get_category(category_id) is None:
            raise NotFoundError("Categoria não encontrada.")
        return self._guesses.list_guesses_for_category(category_id)

    def submit_guess(self, user_id: str, category_id: int, nominee_id: int) -> Guess:
        """Grava o palpite do usuário (upsert).

        Raises:
            ForbiddenError: Palpites bloqueados.
            NotFoundError: Categoria ou indicado inexistente.
            ValidationError: Indicado não pertence à categoria.
        """
        self._gate.ensure_guesses_open()

        if self._catalog.get_category(category_id) is None:
            raise NotFoundError("Categoria não encontrada.")
        if self._catalog.get_nominee(nominee_id) is None:
            raise NotFoundError("Indicado não encontrado.")

        guess = self._guesses.upsert_guess(user_id, category_id, nominee_id)
        if guess is None:
            raise ValidationError("Indicado não pertence à categoria.")

        logger.info(
            "guess_saved",
            extra={"guess_id": guess.id, "category_id": category_id, "nominee_id": nominee_id},
        )
        return guess
