"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from pcm.infrastructure.persistence.csv_product_file import CsvProductFile
from pcm.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

DATA_FILE_NAME = "products.txt"


def default_data_file() -> Path:
    """The product file lives in the directory the shell was started from."""
    return Path.cwd() / DATA_FILE_NAME


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def product_file(file_path: Path | None = None) -> CsvProductFile:
    return CsvProductFile(file_path or default_data_file())
