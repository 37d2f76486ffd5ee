"""Testes das regras puras do catálogo."""

from __future__ import annotations

from app.domain import catalog_rules
from app.domain.models import Category, Guess


def _category(category_id: int, nominees: set[int], winner: int | None = None) -> Category:
    return Category(
        id=category_id,
        name=f"Categoria {category_id}",
        nominee_ids=frozenset(nominees),
        winner_id=winner,
    )


class TestDetachNominee:
    """Testes de detach_nominee."""

    def test_returns_only_changed_categories(self) -> None:
        categories = [_category(1, {10, 11}), _category(2, {12})]

        changed = catalog_rules.detach_nominee(categories, 10)

        assert [c.id for c in changed] == [1]
        assert changed[0].nominee_ids == frozenset({11})

    def test_clears_winner_pointing_to_nominee(self) -> None:
        """Vencedor que referencia o indicado removido deve ser limpo."""
        changed = catalog_rules.detach_nominee([_category(1, {10, 11}, winner=10)], 10)

        assert changed[0].winner_id is None

    def test_keeps_other_winner(self) -> None:
        changed = catalog_rules.detach_nominee([_category(1, {10, 11}, winner=11)], 10)

        assert changed[0].winner_id == 11

    def test_unrelated_nominee_changes_nothing(self) -> None:
        assert catalog_rules.detach_nominee([_category(1, {10})], 99) == []


class TestAssociate:
    """Testes de associate."""

    def test_adds_nominee(self) -> None:
        updated = catalog_rules.associate(_category(1, set()), 5)

        assert updated is not None
        assert updated.nominee_ids == frozenset({5})

    def test_existing_association_returns_none(self) -> None:
        """Associação repetida é no-op."""
        assert catalog_rules.associate(_category(1, {5}), 5) is None


class TestWithWinner:
    """Testes de with_winner."""

    def test_sets_associated_nominee(self) -> None:
        updated = catalog_rules.with_winner(_category(1, {5, 6}), 6)

        assert updated is not None
        assert updated.winner_id == 6

    def test_rejects_nominee_outside_category(self) -> None:
        assert catalog_rules.with_winner(_category(1, {5}), 7) is None

    def test_none_clears_winner(self) -> None:
        updated = catalog_rules.with_winner(_category(1, {5}, winner=5), None)

        assert updated is not None
        assert updated.has_winner is False


class TestGuessFilters:
    """Testes dos filtros de palpites e do mapa de vencedores."""

    def test_guesses_for_nominee_and_category(self) -> None:
        guesses = [
            Guess(id=1, user_id="u1", category_id=1, nominee_id=10),
            Guess(id=2, user_id="u2", category_id=1, nominee_id=11),
            Guess(id=3, user_id="u1", category_id=2, nominee_id=10),
        ]

        assert [g.id for g in catalog_rules.guesses_for_nominee(guesses, 10)] == [1, 3]
        assert [g.id for g in catalog_rules.guesses_for_category(guesses, 1)] == [1, 2]

    def test_winners_by_category_skips_unset(self) -> None:
        categories = [_category(1, {10}, winner=10), _category(2, {11})]

        assert catalog_rules.winners_by_category(categories) == {1: 10}
