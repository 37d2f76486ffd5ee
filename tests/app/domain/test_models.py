"""Testes dos modelos de domínio."""

from __future__ import annotations

from app.domain.models import Category, Guess, Nominee, guess_key


class TestSerialization:
    """to_dict/from_dict usados pelo backend Redis."""

    def test_category_from_dict_normalizes_ids(self) -> None:
        category = Category.from_dict(
            {"id": "3", "name": "Melhor Filme", "nominee_ids": ["2", 1], "winner_id": "2"}
        )

        assert category.id == 3
        assert category.nominee_ids == frozenset({1, 2})
        assert category.winner_id == 2
        assert category.description is None

    def test_category_to_dict_sorts_nominees(self) -> None:
        category = Category(id=1, name="X", nominee_ids=frozenset({3, 1, 2}))

        assert category.to_dict()["nominee_ids"] == [1, 2, 3]

    def test_nominee_optional_images(self) -> None:
        nominee = Nominee.from_dict({"id": 7, "name": "Duna"})

        assert nominee.small_image_url is None
        assert nominee.large_image_url is None

    def test_guess_key_is_user_and_category(self) -> None:
        guess = Guess(id=1, user_id="abc", category_id=4, nominee_id=9)

        assert guess.key == guess_key("abc", 4) == "abc:4"
        assert Guess.from_dict(guess.to_dict()) == guess
