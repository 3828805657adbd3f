# src/cli/runner.py

"""Headless catalog runner that reuses the TUI's query engine."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.models.filter_state import CatalogQuery, FilterState
from src.models.product import Product
from src.services.catalog_service import CatalogService

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def build_query(
    search: str,
    category: str | None = None,
    price_from: str | None = None,
    price_to: str | None = None,
    brands: list[str] | None = None,
    ratings: list[int] | None = None,
    page: int = 1,
) -> CatalogQuery:
    """Build a CatalogQuery by applying the same toggles the TUI uses."""
    filters = FilterState()
    if category:
        filters = filters.toggle_category(category)
    if price_from is not None:
        filters = filters.with_price_from(price_from)
    if price_to is not None:
        filters = filters.with_price_to(price_to)
    for brand in dict.fromkeys(brands or []):
        filters = filters.toggle_brand(brand)
    for rating in dict.fromkeys(ratings or []):
        filters = filters.toggle_rating(rating)
    return CatalogQuery(search=search, filters=filters, page=page)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "title": p.title,
            "price": p.price,
            "rating": p.rating,
            "brand": p.brand,
            "category": p.category,
            "thumbnail": p.thumbnail,
        }
        for p in products
    ]


def _print_table(products: list[Product], page: int) -> None:
    """Render a Rich table of the visible page to stdout."""
    table = Table(
        title=f"Page {page}",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Brand", style="magenta")
    table.add_column("Category")

    for idx, p in enumerate(products, 1):
        table.add_row(
            str(idx),
            p.title[:60],
            f"${p.price:,.2f}",
            f"{p.rating:.2f}",
            p.brand or "—",
            p.category,
        )

    Console().print(table)


async def cli_search(
    query: CatalogQuery,
    output_format: str,
) -> int:
    """Run one query cycle and return an exit code (0=ok, 1=fail)."""
    service = CatalogService()

    _err.print(
        f"[bold]Searching:[/bold] {query.search or '(all)'}  "
        f"[dim]page={query.page}[/dim]"
    )
    result = await service.refresh(query)
    if not result.ok:
        _err.print("[red]Product fetch failed, see log for details.[/red]")
        return 1

    _err.print(
        f"[green]✓ {len(result.products)} shown, "
        f"{result.matched_count} matched of {result.fetched_count} fetched"
        f"[/green]"
    )

    if output_format == "table":
        _print_table(result.products, query.page)
    else:
        json.dump(
            _products_to_dicts(result.products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def list_categories() -> int:
    """Print the category tabs, one per line."""
    service = CatalogService()
    categories = await service.load_categories()
    if not categories:
        _err.print("[yellow]No categories available.[/yellow]")
        return 1
    for name in categories:
        sys.stdout.write(f"{name}\n")
    return 0
