"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the console shell and the application layer
without handing out live domain objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from pcm.domain.model.product import Product


@dataclass(frozen=True)
class ProductSpec:
    """Input: the user-supplied fields of a product (no id)."""

    name: str
    price: float
    stock_quantity: int
    category: str

    def to_domain(self) -> Product:
        return Product(
            name=self.name,
            price=self.price,
            stock_quantity=self.stock_quantity,
            category=self.category,
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    price: float
    stock_quantity: int
    category: str

    @property
    def display_price(self) -> str:
        return f"${self.price:.2f}"

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            stock_quantity=product.stock_quantity,
            category=product.category,
        )


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a write use case.

    Validation failures are routine, so they come back here instead of
    being raised at the shell.
    """

    ok: bool
    product: ProductDTO | None = None
    error: str | None = None

    @staticmethod
    def success(product: ProductDTO) -> CommandResult:
        return CommandResult(ok=True, product=product)

    @staticmethod
    def failure(error: str) -> CommandResult:
        return CommandResult(ok=False, error=error)
