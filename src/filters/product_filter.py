# src/filters/product_filter.py

"""In-memory catalog filtering, text search and sorting."""

import logging

from src.models.filters import ProductFilters, SortBy, SortOrder
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Apply ProductFilters to a product listing."""

    @staticmethod
    def apply(
        products: list[Product],
        filters: ProductFilters,
    ) -> list[Product]:
        """Narrow and order *products* according to *filters*.

        Stages run in a fixed order: category, minimum price,
        maximum price, text search, then sort. A stage is skipped
        when its field is unset. The input list is never modified.
        """
        filtered = list(products)

        if filters.category:
            wanted = filters.category.lower()
            filtered = [
                p for p in filtered if p.category.lower() == wanted
            ]

        if filters.min_price is not None:
            minimum = filters.min_price
            filtered = [p for p in filtered if p.price >= minimum]

        if filters.max_price is not None:
            maximum = filters.max_price
            filtered = [p for p in filtered if p.price <= maximum]

        if filters.search:
            filtered = ProductFilter.search(filtered, filters.search)

        if filters.sort_by:
            filtered = ProductFilter.sort(
                filtered, filters.sort_by, filters.sort_order
            )

        logger.debug(
            "Filters kept %d of %d products",
            len(filtered),
            len(products),
        )
        return filtered

    @staticmethod
    def search(products: list[Product], term: str) -> list[Product]:
        """Keep products whose title, description or category contains *term*."""
        needle = term.lower()
        return [
            p
            for p in products
            if needle in p.title.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
        ]

    @staticmethod
    def sort(
        products: list[Product],
        sort_by: SortBy,
        order: SortOrder = "asc",
    ) -> list[Product]:
        """Return a stably sorted copy of *products*."""
        reverse = order == "desc"
        if sort_by == "price":
            return sorted(products, key=lambda p: p.price, reverse=reverse)
        if sort_by == "rating":
            return sorted(
                products, key=lambda p: p.rating.rate, reverse=reverse
            )
        if sort_by == "name":
            return sorted(
                products, key=lambda p: p.title.casefold(), reverse=reverse
            )
        return list(products)
