# src/services/product_service.py

"""Catalog queries over the upstream API with client-side filtering."""

import logging
from typing import Any

from src.api.api_client import ApiClient
from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.filters.product_validator import ProductValidator
from src.models.filters import ProductFilters
from src.models.product import Product
from src.storage.query_cache import ResponseCache
from src.utils.exceptions import ProductNotFoundError, ProductServiceError

logger = logging.getLogger("storefront.service")


class ProductService:
    """Fetches products and categories and applies query semantics.

    Primary lookups (the full listing and single products) raise
    :class:`ProductServiceError` on failure. Secondary lookups feed
    optional UI affordances and degrade to an empty list instead.
    """

    def __init__(
        self,
        client: ApiClient | None = None,
        cache: ResponseCache | None = None,
    ) -> None:
        self.client = client or ApiClient()
        self.cache = cache

    # ── Private helpers ──────────────────────────────────

    async def _get(self, endpoint: str) -> Any:
        """GET *endpoint*, served from the cache when one is configured."""
        if self.cache is not None:
            cached = self.cache.get(endpoint)
            if cached is not None:
                return cached
        payload = await self.client.get(endpoint)
        if self.cache is not None and payload is not None:
            self.cache.store(endpoint, payload)
        return payload

    async def _get_product_list(self, endpoint: str) -> list[Product]:
        """GET a JSON array of products and parse it."""
        payload = await self._get(endpoint)
        if not isinstance(payload, list):
            raise ProductServiceError(
                f"Expected a product list from {endpoint}, "
                f"got {type(payload).__name__}"
            )
        products, _dropped = ProductValidator.validate(payload)
        return products

    # ── Primary lookups ──────────────────────────────────

    async def get_all_products(
        self, filters: ProductFilters | None = None,
    ) -> list[Product]:
        """Return the full catalog, narrowed by *filters* when given."""
        try:
            products = await self._get_product_list("/products")
        except Exception as exc:
            logger.error("Failed to fetch products: %s", exc, exc_info=True)
            raise ProductServiceError(
                "Could not load products. Please try again later."
            ) from exc

        if filters is not None:
            return ProductFilter.apply(products, filters)
        return products

    async def get_product_by_id(self, product_id: int | str) -> Product:
        """Return one product, raising ProductNotFoundError if absent."""
        product_id = str(product_id)
        try:
            payload = await self._get(f"/products/{product_id}")
        except Exception as exc:
            logger.error(
                "Failed to fetch product %s: %s",
                product_id,
                exc,
                exc_info=True,
            )
            raise ProductServiceError(
                f"Could not load product {product_id}."
            ) from exc

        if not payload:
            raise ProductNotFoundError(product_id)
        try:
            return Product.from_dict(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.error(
                "Malformed product %s: %s", product_id, exc
            )
            raise ProductServiceError(
                f"Could not load product {product_id}."
            ) from exc

    # ── Secondary lookups (degrade to empty) ─────────────

    async def get_categories(self) -> list[str]:
        """Return the distinct category names, or ``[]`` on failure."""
        try:
            payload = await self._get("/products/categories")
        except Exception as exc:
            logger.error("Failed to fetch categories: %s", exc)
            return []
        if not isinstance(payload, list):
            logger.error(
                "Unexpected categories payload: %r", payload
            )
            return []
        return [str(category) for category in payload]

    async def get_products_by_category(
        self, category: str,
    ) -> list[Product]:
        """Return products of *category* as filtered by the API."""
        try:
            return await self._get_product_list(
                f"/products/category/{category}"
            )
        except Exception as exc:
            logger.error(
                "Failed to fetch products in category %s: %s",
                category,
                exc,
            )
            return []

    async def get_featured_products(
        self, limit: int = Settings.FEATURED_LIMIT,
    ) -> list[Product]:
        """Return the *limit* best-rated products."""
        try:
            products = await self.get_all_products()
        except ProductServiceError as exc:
            logger.error("Failed to fetch featured products: %s", exc)
            return []
        ranked = ProductFilter.sort(products, "rating", "desc")
        return ranked[:limit]

    async def get_static_params(self) -> list[str]:
        """Return every product id as text, for page pre-generation."""
        try:
            products = await self.get_all_products()
        except ProductServiceError as exc:
            logger.error("Failed to build static params: %s", exc)
            return []
        return [str(product.id) for product in products]
