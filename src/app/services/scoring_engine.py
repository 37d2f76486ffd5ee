"""Motor de pontuação: palpites certos por usuário.

Um palpite conta se a categoria tem vencedor definido e o indicado
escolhido é esse vencedor. Tudo é recalculado a cada chamada a partir do
estado atual dos stores; trocar o vencedor reflete no próximo cálculo sem
migrar palpites.
"""

from __future__ import annotations

import time
from collections import Counter
from typing import TYPE_CHECKING

from app.domain import catalog_rules
from app.domain.models import UserScore
from app.observability.metrics import record_count, record_latency
from utils.errors import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from app.domain.models import Guess, User
    from app.protocols.catalog_store import CatalogStoreProtocol
    from app.protocols.guess_store import GuessStoreProtocol
    from app.protocols.identity import IdentityProviderProtocol
    from app.services.visibility_gate import VisibilityGate

COMPONENT = "scoring_engine"


def is_correct(guess: Guess, winners: Mapping[int, int]) -> bool:
    winner_id = winners.get(guess.category_id)
    return winner_id is not None and guess.nominee_id == winner_id


def count_correct(guesses: Iterable[Guess], winners: Mapping[int, int]) -> int:
    """Quantidade de palpites certos dado o mapa categoria -> vencedor."""
    return sum(1 for guess in guesses if is_correct(guess, winners))


class ScoringEngine:
    """Calcula pontuações a partir dos stores de catálogo e palpites."""

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

    def _winners(self) -> dict[int, int]:
        return catalog_rules.winners_by_category(self._catalog.list_categories())

    def score_for_user(self, user_id: str) -> int:
        start = time.perf_counter()
        score = count_correct(self._guesses.list_guesses_for_user(user_id), self._winners())
        record_latency(COMPONENT, "score_for_user", (time.perf_counter() - start) * 1000)
        return score

    def leaderboard(self, users: Iterable[User] | None = None) -> dict[str, int]:
        """Mapa user_id -> pontuação.

        Usuários conhecidos pelo provedor de identidade sem acertos aparecem
        com 0.

        Args:
            users: Universo de usuários (padrão: todos do provedor)
        """
        start = time.perf_counter()
        winners = self._winners()
        guesses = self._guesses.list_guesses()
        correct = Counter(guess.user_id for guess in guesses if is_correct(guess, winners))
        universe = self._identity.list_users() if users is None else users
        board = {user.id: 0 for user in universe}
        board.update(correct)
        record_count(COMPONENT, "guesses_evaluated", len(guesses))
        record_latency(COMPONENT, "leaderboard", (time.perf_counter() - start) * 1000)
        return board

    def ranking(self) -> list[UserScore]:
        """Ranking público (gate bloqueado), em ordem decrescente de acertos.

        Raises:
            ForbiddenError: Gate desbloqueado.
        """
        self._gate.ensure_guesses_visible()

        users = self._identity.list_users()
        board = self.leaderboard(users)
        scores = [UserScore(user=user, score=board.get(user.id, 0)) for user in users]
        return sorted(scores, key=lambda s: (-s.score, s.user.name.casefold()))

    def my_score(self, user_id: str) -> UserScore:
        user = self._identity.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("Usuário não encontrado.")
        return UserScore(user=user, score=self.score_for_user(user_id))
