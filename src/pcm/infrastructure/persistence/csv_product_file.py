"""Line-oriented product file.

One product per line as ``id,name,price,stock_quantity,category``.
Fields are written through the csv module, so a name or category holding
a comma is quoted instead of breaking the record.

Lines are parsed one at a time, so a damaged line never takes the lines
after it down with it. A line with exactly five comma-separated fields and
no quoted field is taken as written, which keeps files in the plain comma
layout (quotes inside names included) loading unchanged. Files that are not
valid UTF-8 are read as Latin-1, the charset older catalog files were
written in.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from pathlib import Path

import structlog

from pcm.domain.exceptions import PersistenceError, ValidationError
from pcm.domain.model.product import Product
from pcm.domain.repository.product_repository import ProductRepository

log = structlog.get_logger(__name__)

FIELD_COUNT = 5
LEGACY_ENCODING = "latin-1"


@dataclass(frozen=True)
class LoadReport:
    loaded: int
    skipped: int


def _is_quoted(field: str) -> bool:
    return len(field) >= 2 and field.startswith('"') and field.endswith('"')


def split_record(line: str) -> list[str]:
    """Split one line into fields.

    Raises csv.Error when a quoted field is never closed.
    """
    fields = line.split(",")
    if len(fields) == FIELD_COUNT and not any(_is_quoted(f) for f in fields):
        return fields
    return next(csv.reader([line], strict=True))


class CsvProductFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def path(self) -> Path:
        return self._file_path

    def load_into(self, repo: ProductRepository) -> LoadReport:
        """Re-create every stored product through ``repo.create``.

        Stored ids are ignored; the repository hands out fresh ones.
        A missing file counts as an empty catalog and is created empty.
        """
        self._ensure_file()
        text = self._read_text()

        loaded = skipped = 0
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                row = split_record(line)
            except csv.Error as exc:
                log.warning("record_skipped", line=line_no, reason=str(exc))
                skipped += 1
                continue
            product = self._to_domain(row, line_no)
            if product is None:
                skipped += 1
                continue
            try:
                repo.create(product)
            except ValidationError as exc:
                log.warning("record_skipped", line=line_no, reason=str(exc))
                skipped += 1
                continue
            loaded += 1

        log.info("catalog_loaded", path=str(self._file_path), loaded=loaded, skipped=skipped)
        return LoadReport(loaded=loaded, skipped=skipped)

    def save_from(self, repo: ProductRepository) -> int:
        """Overwrite the file with the whole catalog. Returns the record count."""
        products = repo.list_all()
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for p in products:
            writer.writerow(self._to_row(p))

        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(buffer.getvalue(), encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(
                f"Could not save products to {self._file_path}: {exc}",
                self._file_path,
            ) from exc

        log.info("catalog_saved", path=str(self._file_path), count=len(products))
        return len(products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> list[str]:
        return [
            str(product.id),
            product.name,
            repr(product.price),
            str(product.stock_quantity),
            product.category,
        ]

    @staticmethod
    def _to_domain(row: list[str], line_no: int) -> Product | None:
        if len(row) != FIELD_COUNT:
            log.warning("record_skipped", line=line_no, reason=f"expected {FIELD_COUNT} fields, got {len(row)}")
            return None

        _, name, price, stock, category = row
        try:
            return Product(
                name=name,
                price=float(price),
                stock_quantity=int(stock),
                category=category,
            )
        except ValueError as exc:
            log.warning("record_skipped", line=line_no, reason=str(exc))
            return None

    # --- File helpers ---------------------------------------------------------

    def _read_text(self) -> str:
        try:
            raw = self._file_path.read_bytes()
        except OSError as exc:
            raise PersistenceError(
                f"Could not read products from {self._file_path}: {exc}",
                self._file_path,
            ) from exc

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            log.warning("legacy_encoding", path=str(self._file_path), encoding=LEGACY_ENCODING)
            return raw.decode(LEGACY_ENCODING)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(
                f"Could not create {self._file_path}: {exc}",
                self._file_path,
            ) from exc
        log.info("catalog_file_created", path=str(self._file_path))
