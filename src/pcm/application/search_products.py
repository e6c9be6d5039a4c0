"""Application service: Search Products use cases (queries)."""

from __future__ import annotations

from pcm.application.dto import ProductDTO
from pcm.domain.model.product import Product
from pcm.domain.repository.product_repository import ProductRepository


def _to_dtos(products: list[Product]) -> list[ProductDTO]:
    return [ProductDTO.from_domain(p) for p in products]


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_name(self, text: str) -> list[ProductDTO]:
        """Products whose name contains *text*, ignoring case."""
        return _to_dtos(self._product_repo.find_by_name(text))

    def by_category(self, category: str) -> list[ProductDTO]:
        """Products in exactly this category, ignoring case."""
        return _to_dtos(self._product_repo.find_by_category(category))

    def by_price_range(self, min_price: float, max_price: float) -> list[ProductDTO]:
        """Products priced between the bounds, both included.

        An inverted range simply matches nothing.
        """
        return _to_dtos(self._product_repo.find_by_price_range(min_price, max_price))
