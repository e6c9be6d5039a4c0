"""In-memory implementation of ProductRepository.

This is the authoritative catalog for a running shell. Products are kept
in insertion order, which is also ascending id order because ids are
handed out by a counter that only moves forward.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from pcm.domain.model.product import Product, SortOrder
from pcm.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)

_SORT_KEYS = {
    SortOrder.BY_NAME: lambda p: p.name,
    SortOrder.BY_PRICE: lambda p: p.price,
}


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._next_id = 1

    # --- ProductRepository interface ------------------------------------------

    def create(self, candidate: Product) -> int:
        candidate.validate()

        product = replace(candidate, id=self._next_id)
        self._next_id += 1
        self._products.append(product)
        log.debug("product_created", product_id=product.id, name=product.name)
        return product.id

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._find(product_id)
        return replace(product) if product is not None else None

    def list_all(self, order: SortOrder = SortOrder.BY_ID) -> list[Product]:
        snapshot = [replace(p) for p in self._products]
        if order is SortOrder.BY_ID:
            return snapshot
        # sorted() is stable, so ties keep insertion order
        return sorted(snapshot, key=_SORT_KEYS[order])

    def update(self, product_id: int, fields: Product) -> bool:
        existing = self._find(product_id)
        if existing is None:
            return False

        fields.validate()
        existing.replace_fields(fields)
        log.debug("product_updated", product_id=product_id)
        return True

    def delete(self, product_id: int) -> bool:
        existing = self._find(product_id)
        if existing is None:
            return False

        self._products.remove(existing)
        log.debug("product_deleted", product_id=product_id)
        return True

    def find_by_name(self, text: str) -> list[Product]:
        needle = text.lower()
        return [replace(p) for p in self._products if needle in p.name.lower()]

    def find_by_category(self, category: str) -> list[Product]:
        wanted = category.lower()
        return [replace(p) for p in self._products if p.category.lower() == wanted]

    def find_by_price_range(self, min_price: float, max_price: float) -> list[Product]:
        return [
            replace(p) for p in self._products
            if min_price <= p.price <= max_price
        ]

    def __len__(self) -> int:
        return len(self._products)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
