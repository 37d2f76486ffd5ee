"""Operações administrativas e consultas do catálogo.

AdminOperations assume chamador já autorizado (role Admin verificada na
borda HTTP). Integridade referencial das cascatas é garantida pelo store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import NotFoundError, ValidationError

if TYPE_CHECKING:
    from app.domain.models import Category, Nominee
    from app.protocols.catalog_store import CatalogStoreProtocol

logger = logging.getLogger(__name__)


def _required_name(name: str | None) -> str:
    clean = (name or "").strip()
    if not clean:
        raise ValidationError("Nome é obrigatório.")
    return clean


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    clean = value.strip()
    return clean or None


@dataclass(frozen=True, slots=True)
class NomineeView:
    """Indicado com as categorias em que concorre."""

    nominee: Nominee
    category_ids: tuple[int, ...]


class AdminOperations:
    """CRUD de categorias/indicados e definição de vencedores."""

    def __init__(self, catalog: CatalogStoreProtocol) -> None:
        self._catalog = catalog

    # Categorias

    def create_category(self, name: str, description: str | None = None) -> Category:
        category = self._catalog.add_category(_required_name(name), _optional_text(description))
        logger.info("category_created", extra={"category_id": category.id})
        return category

    def edit_category(self, category_id: int, name: str, description: str | None = None) -> None:
        clean_name = _required_name(name)
        if not self._catalog.update_category(category_id, clean_name, _optional_text(description)):
            raise NotFoundError("Categoria não encontrada.")
        logger.info("category_updated", extra={"category_id": category_id})

    def delete_category(self, category_id: int) -> None:
        if not self._catalog.delete_category(category_id):
            raise NotFoundError("Categoria não encontrada.")
        logger.info("category_deleted", extra={"category_id": category_id})

    # Indicados

    def create_nominee(
        self,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> Nominee:
        nominee = self._catalog.add_nominee(
            _required_name(name),
            _optional_text(small_image_url),
            _optional_text(large_image_url),
        )
        logger.info("nominee_created", extra={"nominee_id": nominee.id})
        return nominee

    def edit_nominee(
        self,
        nominee_id: int,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> None:
        clean_name = _required_name(name)
        updated = self._catalog.update_nominee(
            nominee_id,
            clean_name,
            _optional_text(small_image_url),
            _optional_text(large_image_url),
        )
        if not updated:
            raise NotFoundError("Indicado não encontrado.")
        logger.info("nominee_updated", extra={"nominee_id": nominee_id})

    def delete_nominee(self, nominee_id: int) -> None:
        if not self._catalog.delete_nominee(nominee_id):
            raise NotFoundError("Indicado não encontrado.")
        logger.info("nominee_deleted", extra={"nominee_id": nominee_id})

    # Associação e vencedor

    def add_nominee_to_category(self, category_id: int, nominee_id: int) -> None:
        """Associa indicado à categoria; no-op se já associado."""
        if self._catalog.get_category(category_id) is None:
            raise NotFoundError("Categoria não encontrada.")
        if self._catalog.get_nominee(nominee_id) is None:
            raise NotFoundError("Indicado não encontrado.")

        created = self._catalog.associate_nominee(category_id, nominee_id)
        logger.info(
            "nominee_associated",
            extra={
                "category_id": category_id,
                "nominee_id": nominee_id,
                "association_created": created,
            },
        )

    def remove_nominee_everywhere(self, nominee_id: int) -> None:
        """Desvincula o indicado de todas as categorias (o indicado continua existindo)."""
        if self._catalog.get_nominee(nominee_id) is None:
            raise NotFoundError("Indicado não encontrado.")

        category_ids = self._catalog.detach_nominee(nominee_id)
        logger.info(
            "nominee_detached",
            extra={"nominee_id": nominee_id, "category_ids": category_ids},
        )

    def set_category_winner(self, category_id: int, nominee_id: int | None) -> None:
        """Define o vencedor; None limpa.

        Raises:
            NotFoundError: Categoria inexistente.
            ValidationError: Indicado não pertence à categoria.
        """
        if self._catalog.get_category(category_id) is None:
            raise NotFoundError("Categoria não encontrada.")

        if not self._catalog.set_winner(category_id, nominee_id):
            raise ValidationError("Indicado não pertence à categoria.")

        event = "category_winner_cleared" if nominee_id is None else "category_winner_set"
        logger.info(event, extra={"category_id": category_id, "nominee_id": nominee_id})


class CatalogQueries:
    """Leituras públicas do catálogo."""

    def __init__(self, catalog: CatalogStoreProtocol) -> None:
        self._catalog = catalog

    def list_categories(self) -> list[Category]:
        return self._catalog.list_categories()

    def get_category(self, category_id: int) -> Category:
        category = self._catalog.get_category(category_id)
        if category is None:
            raise NotFoundError("Categoria não encontrada.")
        return category

    def list_nominees(self) -> list[NomineeView]:
        categories = self._catalog.list_categories()
        return [
            NomineeView(
                nominee=nominee,
                category_ids=tuple(c.id for c in categories if nominee.id in c.nominee_ids),
            )
            for nominee in self._catalog.list_nominees()
        ]

    def get_nominee(self, nominee_id: int) -> NomineeView:
        nominee = self._catalog.get_nominee(nominee_id)
        if nominee is None:
            raise NotFoundError("Indicado não encontrado.")
        return NomineeView(
            nominee=nominee,
            category_ids=tuple(self._catalog.categories_for_nominee(nominee_id)),
        )

    def nominees_by_id(self) -> dict[int, Nominee]:
        """Mapa id -> indicado, usado para montar as visões de categoria."""
        return {nominee.id: nominee for nominee in self._catalog.list_nominees()}
