"""Protocolo de persistência do catálogo (categorias, indicados, vencedores).

Operações de escrita que envolvem cascata ou check-and-set devem ser
atômicas no backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.models import Category, Nominee


class CatalogStoreProtocol(ABC):
    """Contrato síncrono do catálogo."""

    # Categorias

    @abstractmethod
    def add_category(self, name: str, description: str | None = None) -> Category: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Category | None: ...

    @abstractmethod
    def list_categories(self) -> list[Category]: ...

    @abstractmethod
    def update_category(
        self, category_id: int, name: str, description: str | None = None
    ) -> bool:
        """Atualiza nome/descrição. Retorna False se a categoria não existe."""

    @abstractmethod
    def delete_category(self, category_id: int) -> bool:
        """Remove a categoria, seus palpites e associações (sem apagar indicados).

        Returns:
            False se a categoria não existe.
        """

    # Indicados

    @abstractmethod
    def add_nominee(
        self,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> Nominee: ...

    @abstractmethod
    def get_nominee(self, nominee_id: int) -> Nominee | None: ...

    @abstractmethod
    def list_nominees(self) -> list[Nominee]: ...

    @abstractmethod
    def update_nominee(
        self,
        nominee_id: int,
        name: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> bool:
        """Atualiza o indicado. Retorna False se não existe."""

    @abstractmethod
    def delete_nominee(self, nominee_id: int) -> bool:
        """Remove o indicado em cascata: palpites, associações e vencedores.

        Returns:
            False se o indicado não existe.
        """

    # Associação N:N e vencedor

    @abstractmethod
    def associate_nominee(self, category_id: int, nominee_id: int) -> bool:
        """Associa indicado à categoria.

        Returns:
            True se a associação foi criada; False se já existia.
        """

    @abstractmethod
    def detach_nominee(self, nominee_id: int) -> list[int]:
        """Desvincula o indicado de todas as categorias, zerando vencedores.

        Returns:
            Ids das categorias alteradas.
        """

    @abstractmethod
    def set_winner(self, category_id: int, nominee_id: int | None) -> bool:
        """Define (ou limpa) o vencedor com verificação atômica de associação.

        Returns:
            False se a categoria não existe ou o indicado não pertence a ela.
        """

    @abstractmethod
    def categories_for_nominee(self, nominee_id: int) -> list[int]:
        """Ids das categorias em que o indicado está associado."""
