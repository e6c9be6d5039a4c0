"""Product entity.

The only thing the catalog manages. A product gets its id from the
repository; every other field can be replaced through an update.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pcm.domain.exceptions import ValidationError

MIN_NAME_LENGTH = 2
MAX_TEXT_LENGTH = 200


class SortOrder(Enum):
    BY_ID = "id"
    BY_NAME = "name"
    BY_PRICE = "price"


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is ``None`` until the repository accepts the product.
    Kept as a mutable dataclass because updates replace fields in place.
    """

    name: str
    price: float
    stock_quantity: int
    category: str
    id: int | None = None

    def validate(self) -> None:
        """Check every attribute rule, raising on the first violation."""
        if self.name is None or len(self.name.strip()) < MIN_NAME_LENGTH:
            raise ValidationError("name too short")
        if len(self.name) > MAX_TEXT_LENGTH:
            raise ValidationError("name too long")
        if not self.price > 0:
            raise ValidationError("price must be positive")
        if not math.isfinite(self.price):
            raise ValidationError("price must be a finite number")
        if self.stock_quantity < 0:
            raise ValidationError("stock cannot be negative")
        if self.category is None or not self.category.strip():
            raise ValidationError("category required")
        if len(self.category) > MAX_TEXT_LENGTH:
            raise ValidationError("category too long")

    def replace_fields(self, other: Product) -> None:
        """Copy everything but the id from *other*."""
        self.name = other.name
        self.price = other.price
        self.stock_quantity = other.stock_quantity
        self.category = other.category
