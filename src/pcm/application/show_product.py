"""Application service: Show Product use case (query)."""

from __future__ import annotations

from pcm.application.dto import ProductDTO
from pcm.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO | None:
        """Return the product, or None when no product has this id."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return None
        return ProductDTO.from_domain(product)
