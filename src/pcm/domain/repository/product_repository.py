"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pcm.domain.model.product import Product, SortOrder


class ProductRepository(ABC):

    @abstractmethod
    def create(self, candidate: Product) -> int:
        """Validate *candidate*, assign it the next id and store it.

        Raises ValidationError without consuming an id when a rule fails.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, order: SortOrder = SortOrder.BY_ID) -> list[Product]:
        """Return a copy of the catalog in the requested order."""

    @abstractmethod
    def update(self, product_id: int, fields: Product) -> bool:
        """Replace every field but the id. False if the id is unknown."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product. False if the id is unknown."""

    @abstractmethod
    def find_by_name(self, text: str) -> list[Product]:
        """Case-insensitive substring match on the name."""

    @abstractmethod
    def find_by_category(self, category: str) -> list[Product]:
        """Case-insensitive exact match on the category."""

    @abstractmethod
    def find_by_price_range(self, min_price: float, max_price: float) -> list[Product]:
        """Products priced within the inclusive range."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored products."""
