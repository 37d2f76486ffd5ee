"""Redis Palpite Store: catálogo e palpites persistidos em Redis.

Entidades serializadas como JSON em três hashes:
    {prefix}:categories  id -> Category
    {prefix}:nominees    id -> Nominee
    {prefix}:guesses     "user_id:category_id" -> Guess

Ids vêm de INCR em {prefix}:seq:<tipo>. Toda mutação com leitura prévia
roda em transação otimista (WATCH/MULTI/EXEC), de modo que cascatas e o
check-and-set do vencedor são atômicos mesmo com várias réplicas.
"""

from __future__ import annotations

import json
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from app.domain import catalog_rules
from app.domain.models import Category, Guess, Nominee, guess_key
from app.infra.stores.redis_base import RedisKeyspace
from app.protocols.catalog_store import CatalogStoreProtocol
from app.protocols.guess_store import GuessStoreProtocol

if TYPE_CHECKING:
    from redis.client import Pipeline

CATEGORIES = "categories"
NOMINEES = "nominees"
GUESSES = "guesses"


def _dump(entity: Category | Nominee | Guess) -> str:
    return json.dumps(entity.to_dict(), ensure_ascii=False)


class RedisPalpiteStore(RedisKeyspace, CatalogStoreProtocol, GuessStoreProtocol):
    """Catálogo e palpites em Redis (staging/production)."""

    def _next_id(self, kind: str) -> int:
        return int(self._call("next_id", lambda: self._redis.incr(self._key(f"seq:{kind}"))))

    # ──────────────────────────────────────────────────────────────
    # Leitura de hashes
    # ──────────────────────────────────────────────────────────────

    def _read_all(self, client: Any, name: str) -> list[dict[str, Any]]:
        raw = client.hgetall(self._key(name)) or {}
        return [json.loads(value) for value in raw.values()]

    def _read_one(self, client: Any, name: str, field: str | int) -> dict[str, Any] | None:
        raw = client.hget(self._key(name), str(field))
        if raw is None:
            return None
        return json.loads(raw)

    def _categories(self, client: Any) -> list[Category]:
        return [Category.from_dict(data) for data in self._read_all(client, CATEGORIES)]

    def _guesses(self, client: Any) -> list[Guess]:
        return [Guess.from_dict(data) for data in self._read_all(client, GUESSES)]

    # ──────────────────────────────────────────────────────────────
    # Categorias
    # ──────────────────────────────────────────────────────────────

    def add_category(self, name: str, description: str | None = None) -> Category:
        category = Category(id=self._next_id("category"), name=name, description=description)
        self._call(
            "add_category",
            lambda: self._redis.hset(self._key(CATEGORIES), str(category.id), _dump(category)),
        )
        return category

    def get_category(self, category_id: int) -> Category | None:
        data = self._call(
            "get_category", lambda: self._read_one(self._redis, CATEGORIES, category_id)
        )
        return Category.from_dict(data) if data is not None else None

    def list_categories(self) -> list[Category]:
        categories = self._call("list_categories", lambda: self._categories(self._redis))
        return sorted(categories, key=lambda c: c.id)

    def update_category(
        self, category_id: int, name: str, description: str | None = None
    ) -> bool:
        def _update(pipe: Pipeline) -> bool:
            data = self._read_one(pipe, CATEGORIES, category_id)
            if data is None:
                return False
            updated = replace(Category.from_dict(data), name=name, description=description)
            pipe.multi()
            pipe.hset(self._key(CATEGORIES), str(category_id), _dump(updated))
            return True

        return self._transaction("update_category", _update, CATEGORIES)

    def delete_category(self, category_id: int) -> bool:
        def _delete(pipe: Pipeline) -> bool:
            if self._read_one(pipe, CATEGORIES, category_id) is None:
                return False
            doomed = catalog_rules.guesses_for_category(self._guesses(pipe), category_id)
            pipe.multi()
            if doomed:
                pipe.hdel(self._key(GUESSES), *[guess.key for guess in doomed])
            pipe.hdel(self._key(CATEGORIES), str(category_id))
            return True

        return self._transaction("delete_category", _delete, CATEGORIES, GUESSES)

    # ──────────────────────────────────────────────────────────────
    # Indicados
    # ──────────────────────────────────────────────────────────────

    def add_nominee(
        self,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> Nominee:
        nominee = Nominee(
            id=self._next_id("nominee"),
            name=name,
            small_image_url=small_image_url,
            large_image_url=large_image_url,
        )
        self._call(
            "add_nominee",
            lambda: self._redis.hset(self._key(NOMINEES), str(nominee.id), _dump(nominee)),
        )
        return nominee

    def get_nominee(self, nominee_id: int) -> Nominee | None:
        data = self._call("get_nominee", lambda: self._read_one(self._redis, NOMINEES, nominee_id))
        return Nominee.from_dict(data) if data is not None else None

    def list_nominees(self) -> list[Nominee]:
        nominees = self._call(
            "list_nominees",
            lambda: [Nominee.from_dict(data) for data in self._read_all(self._redis, NOMINEES)],
        )
        return sorted(nominees, key=lambda n: n.id)

    def update_nominee(
        self,
        nominee_id: int,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> bool:
        def _update(pipe: Pipeline) -> bool:
            if self._read_one(pipe, NOMINEES, nominee_id) is None:
                return False
            updated = Nominee(
                id=nominee_id,
                name=name,
                small_image_url=small_image_url,
                large_image_url=large_image_url,
            )
            pipe.multi()
            pipe.hset(self._key(NOMINEES), str(nominee_id), _dump(updated))
            return True

        return self._transaction("update_nominee", _update, NOMINEES)

    def delete_nominee(self, nominee_id: int) -> bool:
        def _delete(pipe: Pipeline) -> bool:
            if self._read_one(pipe, NOMINEES, nominee_id) is None:
                return False
            doomed = catalog_rules.guesses_for_nominee(self._guesses(pipe), nominee_id)
            changed = catalog_rules.detach_nominee(self._categories(pipe), nominee_id)
            pipe.multi()
            if doomed:
                pipe.hdel(self._key(GUESSES), *[guess.key for guess in doomed])
            self._write_categories(pipe, changed)
            pipe.hdel(self._key(NOMINEES), str(nominee_id))
            return True

        return self._transaction("delete_nominee", _delete, NOMINEES, CATEGORIES, GUESSES)

    def _write_categories(self, pipe: Pipeline, categories: list[Category]) -> None:
        if not categories:
            return
        mapping = {str(category.id): _dump(category) for category in categories}
        pipe.hset(self._key(CATEGORIES), mapping=mapping)

    # ──────────────────────────────────────────────────────────────
    # Associação e vencedor
    # ──────────────────────────────────────────────────────────────

    def associate_nominee(self, category_id: int, nominee_id: int) -> bool:
        def _associate(pipe: Pipeline) -> bool:
            data = self._read_one(pipe, CATEGORIES, category_id)
            if data is None or self._read_one(pipe, NOMINEES, nominee_id) is None:
                return False
            updated = catalog_rules.associate(Category.from_dict(data), nominee_id)
            if updated is None:
                return False
            pipe.multi()
            pipe.hset(self._key(CATEGORIES), str(category_id), _dump(updated))
            return True

        return self._transaction("associate_nominee", _associate, CATEGORIES, NOMINEES)

    def detach_nominee(self, nominee_id: int) -> list[int]:
        def _detach(pipe: Pipeline) -> list[int]:
            changed = catalog_rules.detach_nominee(self._categories(pipe), nominee_id)
            pipe.multi()
            self._write_categories(pipe, changed)
            return [category.id for category in changed]

        return self._transaction("detach_nominee", _detach, CATEGORIES)

    def set_winner(self, category_id: int, nominee_id: int | None) -> bool:
        def _set(pipe: Pipeline) -> bool:
            data = self._read_one(pipe, CATEGORIES, category_id)
            if data is None:
                return False
            updated = catalog_rules.with_winner(Category.from_dict(data), nominee_id)
            if updated is None:
                return False
            pipe.multi()
            pipe.hset(self._key(CATEGORIES), str(category_id), _dump(updated))
            return True

        return self._transaction("set_winner", _set, CATEGORIES)

    def categories_for_nominee(self, nominee_id: int) -> list[int]:
        return sorted(c.id for c in self.list_categories() if nominee_id in c.nominee_ids)

    # ──────────────────────────────────────────────────────────────
    # Palpites
    # ──────────────────────────────────────────────────────────────

    def upsert_guess(self, user_id: str, category_id: int, nominee_id: int) -> Guess | None:
        key = guess_key(user_id, category_id)

        def _upsert(pipe: Pipeline) -> Guess | None:
            data = self._read_one(pipe, CATEGORIES, category_id)
            if data is None or nominee_id not in Category.from_dict(data).nominee_ids:
                return None
            current = self._read_one(pipe, GUESSES, key)
            guess_id = int(current["id"]) if current is not None else self._next_id("guess")
            guess = Guess(
                id=guess_id,
                user_id=user_id,
                category_id=category_id,
                nominee_id=nominee_id,
            )
            pipe.multi()
            pipe.hset(self._key(GUESSES), key, _dump(guess))
            return guess

        return self._transaction("upsert_guess", _upsert, CATEGORIES, GUESSES)

    def get_guess(self, user_id: str, category_id: int) -> Guess | None:
        data = self._call(
            "get_guess",
            lambda: self._read_one(self._redis, GUESSES, guess_key(user_id, category_id)),
        )
        return Guess.from_dict(data) if data is not None else None

    def list_guesses_for_user(self, user_id: str) -> list[Guess]:
        return sorted(
            (g for g in self.list_guesses() if g.user_id == user_id),
            key=lambda g: g.category_id,
        )

    def list_guesses_for_category(self, category_id: int) -> list[Guess]:
        return catalog_rules.guesses_for_category(self.list_guesses(), category_id)

    def list_guesses(self) -> list[Guess]:
        guesses = self._call("list_guesses", lambda: self._guesses(self._redis))
        return sorted(guesses, key=lambda g: g.id)
