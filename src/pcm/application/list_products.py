"""Application service: List Products use case (query)."""

from __future__ import annotations

from pcm.application.dto import ProductDTO
from pcm.domain.model.product import SortOrder
from pcm.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, order: SortOrder = SortOrder.BY_ID) -> list[ProductDTO]:
        return [ProductDTO.from_domain(p) for p in self._product_repo.list_all(order)]
