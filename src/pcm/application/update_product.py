"""Application service: Update Product use case."""

from __future__ import annotations

from pcm.application.dto import CommandResult, ProductDTO, ProductSpec
from pcm.domain.exceptions import ValidationError
from pcm.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, spec: ProductSpec) -> CommandResult:
        """Replace every field of a product except its id.

        The new fields go through the same rules as a new product, so an
        update can never bring invalid data into the catalog.
        """
        try:
            updated = self._product_repo.update(product_id, spec.to_domain())
        except ValidationError as exc:
            return CommandResult.failure(str(exc))

        if not updated:
            return CommandResult.failure(f"Product with ID {product_id} not found")

        return CommandResult.success(
            ProductDTO.from_domain(self._product_repo.get_by_id(product_id))
        )
