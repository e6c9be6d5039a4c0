"""Application service: Add Product use case."""

from __future__ import annotations

from pcm.application.dto import CommandResult, ProductDTO, ProductSpec
from pcm.domain.exceptions import ValidationError
from pcm.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> CommandResult:
        """Add a new product to the catalog."""
        try:
            product_id = self._product_repo.create(spec.to_domain())
        except ValidationError as exc:
            return CommandResult.failure(str(exc))

        return CommandResult.success(
            ProductDTO.from_domain(self._product_repo.get_by_id(product_id))
        )
