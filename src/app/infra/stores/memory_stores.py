"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
Todas as mutações (incluindo cascatas) rodam sob um único RLock.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace

from app.domain import catalog_rules
from app.domain.models import Category, Guess, Nominee, guess_key
from app.protocols.catalog_store import CatalogStoreProtocol
from app.protocols.guess_store import GuessStoreProtocol


class MemoryPalpiteStore(CatalogStoreProtocol, GuessStoreProtocol):
    """Catálogo e palpites em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._categories: dict[int, Category] = {}
        self._nominees: dict[int, Nominee] = {}
        self._guesses: dict[str, Guess] = {}  # "user_id:category_id" -> Guess
        self._category_ids = itertools.count(1)
        self._nominee_ids = itertools.count(1)
        self._guess_ids = itertools.count(1)

    # ──────────────────────────────────────────────────────────────
    # Categorias
    # ──────────────────────────────────────────────────────────────

    def add_category(self, name: str, description: str | None = None) -> Category:
        with self._lock:
            category = Category(id=next(self._category_ids), name=name, description=description)
            self._categories[category.id] = category
        return category

    def get_category(self, category_id: int) -> Category | None:
        with self._lock:
            return self._categories.get(category_id)

    def list_categories(self) -> list[Category]:
        with self._lock:
            return sorted(self._categories.values(), key=lambda c: c.id)

    def update_category(
        self, category_id: int, name: str, description: str | None = None
    ) -> bool:
        with self._lock:
            current = self._categories.get(category_id)
            if current is None:
                return False
            self._categories[category_id] = replace(current, name=name, description=description)
        return True

    def delete_category(self, category_id: int) -> bool:
        with self._lock:
            if category_id not in self._categories:
                return False
            for guess in catalog_rules.guesses_for_category(self._guesses.values(), category_id):
                del self._guesses[guess.key]
            del self._categories[category_id]
        return True

    # ──────────────────────────────────────────────────────────────
    # Indicados
    # ──────────────────────────────────────────────────────────────

    def add_nominee(
        self,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> Nominee:
        with self._lock:
            nominee = Nominee(
                id=next(self._nominee_ids),
                name=name,
                small_image_url=small_image_url,
                large_image_url=large_image_url,
            )
            self._nominees[nominee.id] = nominee
        return nominee

    def get_nominee(self, nominee_id: int) -> Nominee | None:
        with self._lock:
            return self._nominees.get(nominee_id)

    def list_nominees(self) -> list[Nominee]:
        with self._lock:
            return sorted(self._nominees.values(), key=lambda n: n.id)

    def update_nominee(
        self,
        nominee_id: int,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> bool:
        with self._lock:
            current = self._nominees.get(nominee_id)
            if current is None:
                return False
            self._nominees[nominee_id] = replace(
                current,
                name=name,
                small_image_url=small_image_url,
                large_image_url=large_image_url,
            )
        return True

    def delete_nominee(self, nominee_id: int) -> bool:
        with self._lock:
            if nominee_id not in self._nominees:
                return False
            for guess in catalog_rules.guesses_for_nominee(self._guesses.values(), nominee_id):
                del self._guesses[guess.key]
            self._detach_locked(nominee_id)
            del self._nominees[nominee_id]
        return True

    # ──────────────────────────────────────────────────────────────
    # Associação e vencedor
    # ──────────────────────────────────────────────────────────────

    def associate_nominee(self, category_id: int, nominee_id: int) -> bool:
        with self._lock:
            category = self._categories.get(category_id)
            if category is None or nominee_id not in self._nominees:
                return False
            updated = catalog_rules.associate(category, nominee_id)
            if updated is None:
                return False
            self._categories[category_id] = updated
        return True

    def detach_nominee(self, nominee_id: int) -> list[int]:
        with self._lock:
            return self._detach_locked(nominee_id)

    def _detach_locked(self, nominee_id: int) -> list[int]:
        changed = catalog_rules.detach_nominee(self._categories.values(), nominee_id)
        for category in changed:
            self._categories[category.id] = category
        return [category.id for category in changed]

    def set_winner(self, category_id: int, nominee_id: int | None) -> bool:
        with self._lock:
            category = self._categories.get(category_id)
            if category is None:
                return False
            updated = catalog_rules.with_winner(category, nominee_id)
            if updated is None:
                return False
            self._categories[category_id] = updated
        return True

    def categories_for_nominee(self, nominee_id: int) -> list[int]:
        with self._lock:
            return sorted(c.id for c in self._categories.values() if nominee_id in c.nominee_ids)

    # ──────────────────────────────────────────────────────────────
    # Palpites
    # ──────────────────────────────────────────────────────────────

    def upsert_guess(self, user_id: str, category_id: int, nominee_id: int) -> Guess | None:
        with self._lock:
            category = self._categories.get(category_id)
            if category is None or nominee_id not in category.nominee_ids:
                return None
            key = guess_key(user_id, category_id)
            current = self._guesses.get(key)
            guess_id = current.id if current is not None else next(self._guess_ids)
            guess = Guess(
                id=guess_id,
                user_id=user_id,
                category_id=category_id,
                nominee_id=nominee_id,
            )
            self._guesses[key] = guess
        return guess

    def get_guess(self, user_id: str, category_id: int) -> Guess | None:
        with self._lock:
            return self._guesses.get(guess_key(user_id, category_id))

    def list_guesses_for_user(self, user_id: str) -> list[Guess]:
        with self._lock:
            return sorted(
                (g for g in self._guesses.values() if g.user_id == user_id),
                key=lambda g: g.category_id,
            )

    def list_guesses_for_category(self, category_id: int) -> list[Guess]:
        with self._lock:
            return sorted(
                catalog_rules.guesses_for_category(self._guesses.values(), category_id),
                key=lambda g: g.id,
            )

    def list_guesses(self) -> list[Guess]:
        with self._lock:
            return sorted(self._guesses.values(), key=lambda g: g.id)
