# src/actions/product_actions.py

"""Caller-facing actions that turn catalog outcomes into ActionResults.

Nothing here raises: every action returns either ``Success`` with its
payload or ``Failure`` with a message fit to show a user.
"""

import logging

from src.models.action_result import ActionResult, Failure, Success
from src.models.filters import ProductFilters
from src.models.product import Product
from src.services.product_service import ProductService
from src.storage.query_cache import ResponseCache
from src.utils.exceptions import StorefrontError

logger = logging.getLogger("storefront.actions")

_default_service: ProductService | None = None


def get_service() -> ProductService:
    """Return the shared, cache-backed ProductService."""
    global _default_service
    if _default_service is None:
        _default_service = ProductService(cache=ResponseCache())
    return _default_service


async def get_products_action(
    filters: ProductFilters | None = None,
    service: ProductService | None = None,
) -> ActionResult[list[Product]]:
    service = service or get_service()
    try:
        return Success(await service.get_all_products(filters))
    except StorefrontError as exc:
        logger.error("get_products action failed: %s", exc)
        return Failure(str(exc) or "Error loading products")
    except Exception:
        logger.exception("Unexpected error in get_products action")
        return Failure("Error loading products")


async def get_product_by_id_action(
    product_id: int | str,
    service: ProductService | None = None,
) -> ActionResult[Product]:
    service = service or get_service()
    try:
        return Success(await service.get_product_by_id(product_id))
    except StorefrontError as exc:
        logger.error(
            "get_product_by_id(%s) action failed: %s", product_id, exc
        )
        return Failure(str(exc) or f"Error loading product {product_id}")
    except Exception:
        logger.exception(
            "Unexpected error in get_product_by_id(%s) action", product_id
        )
        return Failure(f"Error loading product {product_id}")


async def get_categories_action(
    service: ProductService | None = None,
) -> ActionResult[list[str]]:
    service = service or get_service()
    try:
        return Success(await service.get_categories())
    except Exception as exc:
        logger.error("get_categories action failed: %s", exc)
        return Failure("Error loading categories")


async def get_products_by_category_action(
    category: str,
    service: ProductService | None = None,
) -> ActionResult[list[Product]]:
    service = service or get_service()
    try:
        return Success(await service.get_products_by_category(category))
    except Exception as exc:
        logger.error(
            "get_products_by_category(%s) action failed: %s", category, exc
        )
        return Failure(f"Error loading products in category {category}")


async def get_featured_products_action(
    limit: int = 4,
    service: ProductService | None = None,
) -> ActionResult[list[Product]]:
    service = service or get_service()
    try:
        return Success(await service.get_featured_products(limit))
    except Exception as exc:
        logger.error("get_featured_products action failed: %s", exc)
        return Failure("Error loading featured products")


async def search_products_action(
    term: str,
    service: ProductService | None = None,
) -> ActionResult[list[Product]]:
    """Search the catalog; a blank term yields an empty success."""
    if not term or not term.strip():
        return Success([])
    service = service or get_service()
    try:
        products = await service.get_all_products(
            ProductFilters(search=term.strip())
        )
    except Exception as exc:
        logger.error("search_products(%r) action failed: %s", term, exc)
        return Failure("Error searching products")
    return Success(products)


async def revalidate_products_action(
    path: str | None = None,
    service: ProductService | None = None,
) -> int:
    """Discard cached catalog responses so the next read refetches.

    With *path* only endpoints under that prefix are dropped. Returns
    the number of entries removed.
    """
    service = service or get_service()
    if service.cache is None:
        return 0
    if path:
        removed = service.cache.invalidate(path)
    else:
        removed = service.cache.clear()
    logger.info("Product cache revalidated (%d entries dropped)", removed)
    return removed
