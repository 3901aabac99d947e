# main.py

"""Entry point for the storefront catalog CLI."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse the demo storefront catalog.",
        epilog=f"Upstream API: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    products = commands.add_parser(
        "products", help="List products with optional filters."
    )
    products.add_argument("--category", default=None)
    products.add_argument(
        "--min-price", type=float, default=None, dest="min_price"
    )
    products.add_argument(
        "--max-price", type=float, default=None, dest="max_price"
    )
    products.add_argument("--search", default=None)
    products.add_argument(
        "--sort-by",
        choices=["price", "rating", "name"],
        default=None,
        dest="sort_by",
    )
    products.add_argument(
        "--order",
        choices=["asc", "desc"],
        default="asc",
        dest="sort_order",
    )

    product = commands.add_parser("product", help="Show one product.")
    product.add_argument("product_id")

    commands.add_parser("categories", help="List categories.")

    category = commands.add_parser(
        "category", help="List products in a category."
    )
    category.add_argument("name")

    featured = commands.add_parser(
        "featured", help="List the best-rated products."
    )
    featured.add_argument(
        "--limit", type=int, default=Settings.FEATURED_LIMIT
    )

    search = commands.add_parser("search", help="Free-text search.")
    search.add_argument("term")

    commands.add_parser(
        "static-params", help="Print every product id."
    )
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    """Run the coroutine matching the chosen sub-command."""
    from src.cli import runner

    fmt = args.output_format
    if args.command == "products":
        coro = runner.run_products(
            args.category,
            args.min_price,
            args.max_price,
            args.search,
            args.sort_by,
            args.sort_order,
            fmt,
        )
    elif args.command == "product":
        coro = runner.run_product(args.product_id, fmt)
    elif args.command == "categories":
        coro = runner.run_categories(fmt)
    elif args.command == "category":
        coro = runner.run_category(args.name, fmt)
    elif args.command == "featured":
        coro = runner.run_featured(args.limit, fmt)
    elif args.command == "search":
        coro = runner.run_search(args.term, fmt)
    else:
        coro = runner.run_static_params(fmt)
    return asyncio.run(coro)


def main() -> None:
    """Parse arguments, run the sub-command and exit with its code."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    try:
        exit_code = _dispatch(args)
    except Exception:
        logger.critical("Fatal error during CLI run", exc_info=True)
        raise
    finally:
        logger.info("storefront shutting down")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
