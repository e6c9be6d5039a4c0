"""Interactive numbered menu over the product catalog."""

from __future__ import annotations

from collections.abc import Callable

import click
import structlog

from pcm.application.add_product import AddProductHandler
from pcm.application.delete_product import DeleteProductHandler
from pcm.application.dto import ProductDTO, ProductSpec
from pcm.application.list_products import ListProductsHandler
from pcm.application.search_products import SearchProductsHandler
from pcm.application.show_product import ShowProductHandler
from pcm.application.update_product import UpdateProductHandler
from pcm.domain.exceptions import PersistenceError
from pcm.domain.model.product import SortOrder
from pcm.domain.repository.product_repository import ProductRepository
from pcm.infrastructure.persistence.csv_product_file import CsvProductFile

log = structlog.get_logger(__name__)

EXIT_OPTION = 11

MENU_TEXT = """
 1. Add product
 2. Find product by ID
 3. List products (by ID)
 4. List products (by name)
 5. List products (by price)
 6. Update product
 7. Delete product
 8. Search by name
 9. Search by category
10. Search by price range
11. Exit and save
"""


def render_products(products: list[ProductDTO]) -> None:
    """Shared table formatting for product listings."""
    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Stock':>7}  {'Category':<16}")
    click.echo("-" * 68)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.display_price:>10} {p.stock_quantity:>7}  {p.category:<16}"
        )


def _prompt_text(label: str, default: str | None = None) -> str:
    return click.prompt(label, default=default).strip()


class ProductMenu:

    def __init__(self, product_repo: ProductRepository, product_file: CsvProductFile) -> None:
        self._product_repo = product_repo
        self._product_file = product_file
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_product,
            2: self.find_by_id,
            3: lambda: self.list_products(SortOrder.BY_ID),
            4: lambda: self.list_products(SortOrder.BY_NAME),
            5: lambda: self.list_products(SortOrder.BY_PRICE),
            6: self.update_product,
            7: self.delete_product,
            8: self.search_by_name,
            9: self.search_by_category,
            10: self.search_by_price_range,
        }

    def run(self) -> None:
        """Loop until the exit option (or end of input), then save."""
        while True:
            try:
                click.echo(MENU_TEXT)
                choice = click.prompt("Choose an option", type=int)
                click.echo()
                if choice == EXIT_OPTION:
                    break
                action = self._actions.get(choice)
                if action is None:
                    click.echo("Invalid option.")
                    continue
                action()
            except click.Abort:
                click.echo()
                break

        click.echo("Exiting...")
        self.save()

    # --- Menu actions ---------------------------------------------------------

    def add_product(self) -> None:
        click.echo("=== Add Product ===")
        spec = ProductSpec(
            name=_prompt_text("Name"),
            price=click.prompt("Price", type=float),
            stock_quantity=click.prompt("Stock quantity", type=int),
            category=_prompt_text("Category"),
        )
        result = AddProductHandler(self._product_repo).handle(spec)
        if not result.ok:
            click.echo(f"Error: {result.error}")
            return
        click.echo(f"Product #{result.product.id} '{result.product.name}' added.")

    def find_by_id(self) -> None:
        click.echo("=== Find Product ===")
        product_id = click.prompt("Product ID", type=int)
        product = ShowProductHandler(self._product_repo).handle(product_id)
        if product is None:
            click.echo(f"Product with ID {product_id} not found.")
            return
        render_products([product])

    def list_products(self, order: SortOrder) -> None:
        click.echo(f"=== Products (by {order.value}) ===")
        products = ListProductsHandler(self._product_repo).handle(order)
        if not products:
            click.echo("No products found.")
            return
        render_products(products)

    def update_product(self) -> None:
        click.echo("=== Update Product ===")
        product_id = click.prompt("Product ID", type=int)
        current = ShowProductHandler(self._product_repo).handle(product_id)
        if current is None:
            click.echo(f"Product with ID {product_id} not found.")
            return

        spec = ProductSpec(
            name=_prompt_text("New name", default=current.name),
            price=click.prompt("New price", type=float, default=current.price),
            stock_quantity=click.prompt(
                "New stock quantity", type=int, default=current.stock_quantity
            ),
            category=_prompt_text("New category", default=current.category),
        )
        result = UpdateProductHandler(self._product_repo).handle(product_id, spec)
        if not result.ok:
            click.echo(f"Error: {result.error}")
            return
        click.echo(f"Product #{product_id} updated.")

    def delete_product(self) -> None:
        click.echo("=== Delete Product ===")
        product_id = click.prompt("Product ID", type=int)
        if DeleteProductHandler(self._product_repo).handle(product_id):
            click.echo(f"Product #{product_id} deleted.")
        else:
            click.echo(f"Product with ID {product_id} not found.")

    def search_by_name(self) -> None:
        click.echo("=== Search by Name ===")
        text = click.prompt("Name or part of it", default="", show_default=False).strip()
        products = SearchProductsHandler(self._product_repo).by_name(text)
        if not products:
            click.echo(f'No products found with name "{text}".')
            return
        render_products(products)

    def search_by_category(self) -> None:
        click.echo("=== Search by Category ===")
        category = _prompt_text("Category")
        products = SearchProductsHandler(self._product_repo).by_category(category)
        if not products:
            click.echo(f'No products found in category "{category}".')
            return
        render_products(products)

    def search_by_price_range(self) -> None:
        click.echo("=== Search by Price Range ===")
        min_price = click.prompt("Minimum price", type=float)
        max_price = click.prompt("Maximum price", type=float)
        products = SearchProductsHandler(self._product_repo).by_price_range(min_price, max_price)
        if not products:
            click.echo(f"No products found priced between {min_price} and {max_price}.")
            return
        render_products(products)

    # --- Persistence ----------------------------------------------------------

    def save(self) -> bool:
        """Write the catalog out, offering a retry when the write fails."""
        while True:
            try:
                count = self._product_file.save_from(self._product_repo)
            except PersistenceError as exc:
                log.error("catalog_save_failed", path=str(exc.path), error=str(exc))
                click.echo(f"Error: {exc}", err=True)
                if self._confirm_retry():
                    continue
                click.echo("Catalog was NOT saved.", err=True)
                return False
            click.echo(f"Saved {count} product(s) to {self._product_file.path}.")
            return True

    @staticmethod
    def _confirm_retry() -> bool:
        try:
            return click.confirm("Retry saving?", default=True)
        except click.Abort:
            return False
