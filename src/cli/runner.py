# src/cli/runner.py

"""Headless CLI runner that renders action results to the terminal."""

import json
import logging
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from src.actions import product_actions
from src.models.action_result import ActionResult, Failure, Success
from src.models.filters import ProductFilters
from src.models.product import Product

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_products_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Rating", justify="center")
    table.add_column("Category", style="magenta")

    for p in products:
        table.add_row(
            str(p.id),
            p.title[:60],
            f"${p.price:,.2f}",
            f"{p.rating.rate:.1f} ({p.rating.count})",
            p.category,
        )

    Console().print(table)


def _print_strings_table(values: list[str], title: str) -> None:
    """Render a single-column Rich table to stdout."""
    table = Table(title=title, title_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Value")
    for idx, value in enumerate(values, 1):
        table.add_row(str(idx), value)
    Console().print(table)


def _to_jsonable(data: Any) -> Any:
    """Convert Products (or lists of them) to plain JSON values."""
    if isinstance(data, Product):
        return data.to_dict()
    if isinstance(data, list):
        return [_to_jsonable(item) for item in data]
    return data


def render(
    result: ActionResult[Any],
    output_format: str,
    title: str,
) -> int:
    """Print *result* and return an exit code (0=ok, 1=fail)."""
    if isinstance(result, Failure):
        _err.print(f"[red]Error: {result.error}[/red]")
        return 1

    data = result.data
    items = data if isinstance(data, list) else [data]
    if not items:
        _err.print("[yellow]No results.[/yellow]")
    else:
        _err.print(f"[green]✓ {len(items)} result(s)[/green]")

    if output_format == "table":
        if all(isinstance(item, Product) for item in items):
            _print_products_table(items, title)
        else:
            _print_strings_table([str(item) for item in items], title)
    else:
        json.dump(
            _to_jsonable(data),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def run_products(
    category: str | None,
    min_price: float | None,
    max_price: float | None,
    search: str | None,
    sort_by: str | None,
    sort_order: str,
    output_format: str,
) -> int:
    """List the catalog with optional filters applied."""
    filters = ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,  # type: ignore[arg-type]
        sort_order=sort_order,  # type: ignore[arg-type]
    )
    result = await product_actions.get_products_action(filters)
    return render(result, output_format, "Products")


async def run_product(product_id: str, output_format: str) -> int:
    """Show a single product."""
    result = await product_actions.get_product_by_id_action(product_id)
    return render(result, output_format, f"Product {product_id}")


async def run_categories(output_format: str) -> int:
    """List the catalog categories."""
    result = await product_actions.get_categories_action()
    return render(result, output_format, "Categories")


async def run_category(category: str, output_format: str) -> int:
    """List products in one category."""
    result = await product_actions.get_products_by_category_action(
        category
    )
    return render(result, output_format, f"Category: {category}")


async def run_featured(limit: int, output_format: str) -> int:
    """List the best-rated products."""
    result = await product_actions.get_featured_products_action(limit)
    return render(result, output_format, "Featured")


async def run_search(term: str, output_format: str) -> int:
    """Free-text search across title, description and category."""
    result = await product_actions.search_products_action(term)
    return render(result, output_format, f"Search: {term}")


async def run_static_params(output_format: str) -> int:
    """Print every product id for page pre-generation."""
    service = product_actions.get_service()
    ids = await service.get_static_params()
    return render(Success(ids), output_format, "Static params")
