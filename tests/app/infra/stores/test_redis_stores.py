"""Testes do RedisPalpiteStore com mock."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.domain.models import Category, Guess, Nominee
from app.infra.stores.redis_stores import RedisPalpiteStore
from utils.errors import StoreUnavailableError

PREFIX = "palpitheion"


def _hashes(
    categories: list[Category] | None = None,
    nominees: list[Nominee] | None = None,
    guesses: list[Guess] | None = None,
) -> dict[str, dict[str, bytes]]:
    def encode(entities: list[Any], key: Any) -> dict[str, bytes]:
        return {str(key(e)): json.dumps(e.to_dict()).encode("utf-8") for e in entities}

    return {
        f"{PREFIX}:categories": encode(categories or [], lambda c: c.id),
        f"{PREFIX}:nominees": encode(nominees or [], lambda n: n.id),
        f"{PREFIX}:guesses": encode(guesses or [], lambda g: g.key),
    }


def _mock_redis(data: dict[str, dict[str, bytes]]) -> tuple[MagicMock, MagicMock]:
    """Cliente e pipeline mockados lendo de `data`; transaction executa a função."""
    pipe = MagicMock()
    pipe.hget.side_effect = lambda key, field: data.get(key, {}).get(field)
    pipe.hgetall.side_effect = lambda key: dict(data.get(key, {}))

    redis_client = MagicMock()
    redis_client.hget.side_effect = pipe.hget.side_effect
    redis_client.hgetall.side_effect = pipe.hgetall.side_effect
    redis_client.transaction.side_effect = (
        lambda func, *keys, value_from_callable=False: func(pipe)
    )
    return redis_client, pipe


class TestRedisPalpiteStore:
    """Testes do RedisPalpiteStore."""

    def test_add_category_uses_sequence_and_hash(self) -> None:
        redis_client, _ = _mock_redis({})
        redis_client.incr.return_value = 7
        store = RedisPalpiteStore(redis_client)

        category = store.add_category("Melhor Filme")

        assert category.id == 7
        redis_client.incr.assert_called_once_with(f"{PREFIX}:seq:category")
        key, field, raw = redis_client.hset.call_args[0]
        assert key == f"{PREFIX}:categories"
        assert field == "7"
        assert json.loads(raw)["name"] == "Melhor Filme"

    def test_get_category_missing_returns_none(self) -> None:
        redis_client, _ = _mock_redis({})
        store = RedisPalpiteStore(redis_client)

        assert store.get_category(1) is None

    def test_list_categories_sorted(self) -> None:
        data = _hashes(categories=[Category(id=2, name="B"), Category(id=1, name="A")])
        redis_client, _ = _mock_redis(data)

        categories = RedisPalpiteStore(redis_client).list_categories()

        assert [c.id for c in categories] == [1, 2]

    def test_set_winner_outside_category_writes_nothing(self) -> None:
        data = _hashes(categories=[Category(id=1, name="A", nominee_ids=frozenset({5}))])
        redis_client, pipe = _mock_redis(data)

        assert RedisPalpiteStore(redis_client).set_winner(1, 6) is False
        pipe.multi.assert_not_called()
        pipe.hset.assert_not_called()

    def test_set_winner_watches_categories(self) -> None:
        data = _hashes(categories=[Category(id=1, name="A", nominee_ids=frozenset({5}))])
        redis_client, pipe = _mock_redis(data)

        assert RedisPalpiteStore(redis_client).set_winner(1, 5) is True

        assert redis_client.transaction.call_args[0][1:] == (f"{PREFIX}:categories",)
        pipe.multi.assert_called_once()
        _, field, raw = pipe.hset.call_args[0]
        assert field == "1"
        assert json.loads(raw)["winner_id"] == 5

    def test_delete_nominee_cascades_in_one_transaction(self) -> None:
        """Remove palpites, desvincula das categorias e limpa o vencedor."""
        data = _hashes(
            categories=[Category(id=1, name="A", nominee_ids=frozenset({5, 6}), winner_id=5)],
            nominees=[Nominee(id=5, name="N5"), Nominee(id=6, name="N6")],
            guesses=[
                Guess(id=1, user_id="u1", category_id=1, nominee_id=5),
                Guess(id=2, user_id="u2", category_id=1, nominee_id=6),
            ],
        )
        redis_client, pipe = _mock_redis(data)

        assert RedisPalpiteStore(redis_client).delete_nominee(5) is True

        pipe.hdel.assert_any_call(f"{PREFIX}:guesses", "u1:1")
        pipe.hdel.assert_any_call(f"{PREFIX}:nominees", "5")
        mapping = pipe.hset.call_args.kwargs["mapping"]
        updated = json.loads(mapping["1"])
        assert updated["nominee_ids"] == [6]
        assert updated["winner_id"] is None

    def test_upsert_guess_keeps_existing_id(self) -> None:
        data = _hashes(
            categories=[Category(id=1, name="A", nominee_ids=frozenset({5, 6}))],
            guesses=[Guess(id=9, user_id="u1", category_id=1, nominee_id=5)],
        )
        redis_client, pipe = _mock_redis(data)

        guess = RedisPalpiteStore(redis_client).upsert_guess("u1", 1, 6)

        assert guess == Guess(id=9, user_id="u1", category_id=1, nominee_id=6)
        redis_client.incr.assert_not_called()
        pipe.hset.assert_called_once()

    def test_upsert_guess_rejects_nominee_outside_category(self) -> None:
        data = _hashes(categories=[Category(id=1, name="A", nominee_ids=frozenset({5}))])
        redis_client, pipe = _mock_redis(data)

        assert RedisPalpiteStore(redis_client).upsert_guess("u1", 1, 6) is None
        pipe.hset.assert_not_called()

    def test_custom_prefix(self) -> None:
        redis_client, _ = _mock_redis({})
        store = RedisPalpiteStore(redis_client, key_prefix="oscar")

        store.get_nominee(3)

        redis_client.hget.assert_called_once_with("oscar:nominees", "3")

    def test_redis_error_raises_store_unavailable(self) -> None:
        redis_client = MagicMock()
        redis_client.hgetall.side_effect = RedisConnectionError("down")
        store = RedisPalpiteStore(redis_client)

        with pytest.raises(StoreUnavailableError):
            store.list_guesses()
