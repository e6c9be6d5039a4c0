"""Console entry point for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from pcm.application.list_products import ListProductsHandler
from pcm.domain.exceptions import PersistenceError
from pcm.domain.model.product import SortOrder
from pcm.infrastructure.bootstrap import product_file, product_repository
from pcm.infrastructure.cli.menu import ProductMenu, render_products
from pcm.infrastructure.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="PCM_DATA_FILE",
    default=None,
    help="Product file (default: ./products.txt).",
)
@click.option("--verbose", is_flag=True, envvar="PCM_VERBOSE", help="Enable debug logging.")
@click.option("--log-json", is_flag=True, help="Emit log lines as JSON.")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, verbose: bool, log_json: bool) -> None:
    """PCM — Product Catalog Manager

    Without a subcommand, opens the interactive menu. The catalog is
    loaded from the product file on start and written back on exit.
    """
    configure_logging(verbose=verbose, log_json=log_json)
    ctx.obj = {"data_file": data_file}

    if ctx.invoked_subcommand is None:
        repo = product_repository()
        store = product_file(data_file)
        try:
            report = store.load_into(repo)
        except PersistenceError as exc:
            log.warning("catalog_load_failed", path=str(exc.path), error=str(exc))
            click.echo(f"Warning: {exc}. Starting with an empty catalog.", err=True)
        else:
            click.echo(f"Loaded {report.loaded} product(s) from {store.path}.")
            if report.skipped:
                click.echo(f"Skipped {report.skipped} unreadable record(s).", err=True)

        ProductMenu(repo, store).run()


@cli.command("list")
@click.option(
    "--sort",
    type=click.Choice([order.value for order in SortOrder]),
    default=SortOrder.BY_ID.value,
    show_default=True,
    help="Sort order.",
)
@click.pass_obj
def product_list(obj: dict, sort: str) -> None:
    """List all products in the product file."""
    repo = product_repository()
    try:
        product_file(obj["data_file"]).load_into(repo)
    except PersistenceError as exc:
        raise click.ClickException(str(exc))

    products = ListProductsHandler(repo).handle(SortOrder(sort))
    if not products:
        click.echo("No products found.")
        return
    render_products(products)
