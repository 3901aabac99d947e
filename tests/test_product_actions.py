# tests/test_product_actions.py

"""Tests for the action layer's Success/Failure mapping."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from src.actions import product_actions
from src.models.action_result import Failure, Success
from src.models.filters import ProductFilters
from src.models.product import Product
from src.services.product_service import ProductService
from src.storage.query_cache import ResponseCache
from src.utils.exceptions import ProductNotFoundError, ProductServiceError

PRODUCT = Product(id=1, title="Mug", price=9.5, category="kitchen")


def _service() -> MagicMock:
    """Mocked ProductService with async methods."""
    service = MagicMock(spec=ProductService)
    service.get_all_products = AsyncMock(return_value=[PRODUCT])
    service.get_product_by_id = AsyncMock(return_value=PRODUCT)
    service.get_categories = AsyncMock(return_value=["kitchen"])
    service.get_products_by_category = AsyncMock(return_value=[PRODUCT])
    service.get_featured_products = AsyncMock(return_value=[PRODUCT])
    return service


class TestActionsSuccess(unittest.IsolatedAsyncioTestCase):
    """Successful service calls become Success results."""

    async def test_get_products(self) -> None:
        """Filters are forwarded and data wrapped."""
        service = _service()
        filters = ProductFilters(category="kitchen")
        result = await product_actions.get_products_action(filters, service)
        self.assertEqual(result, Success([PRODUCT]))
        self.assertTrue(result.ok)
        service.get_all_products.assert_awaited_once_with(filters)

    async def test_get_product_by_id(self) -> None:
        """A found product is wrapped."""
        result = await product_actions.get_product_by_id_action(1, _service())
        self.assertIsInstance(result, Success)
        assert isinstance(result, Success)
        self.assertEqual(result.data, PRODUCT)

    async def test_get_categories(self) -> None:
        """Categories are wrapped."""
        result = await product_actions.get_categories_action(_service())
        self.assertEqual(result, Success(["kitchen"]))

    async def test_get_products_by_category(self) -> None:
        """Category listings are wrapped."""
        result = await product_actions.get_products_by_category_action(
            "kitchen", _service()
        )
        self.assertEqual(result, Success([PRODUCT]))

    async def test_get_featured_products(self) -> None:
        """The limit is forwarded."""
        service = _service()
        result = await product_actions.get_featured_products_action(
            2, service
        )
        self.assertEqual(result, Success([PRODUCT]))
        service.get_featured_products.assert_awaited_once_with(2)


class TestActionsFailure(unittest.IsolatedAsyncioTestCase):
    """Service errors become Failure results."""

    async def test_get_products_failure_message(self) -> None:
        """The service's user-facing message is passed through."""
        service = _service()
        service.get_all_products.side_effect = ProductServiceError(
            "Could not load products. Please try again later."
        )
        result = await product_actions.get_products_action(None, service)
        self.assertEqual(
            result,
            Failure("Could not load products. Please try again later."),
        )
        self.assertFalse(result.ok)

    async def test_not_found_message(self) -> None:
        """Not-found errors keep their descriptive message."""
        service = _service()
        service.get_product_by_id.side_effect = ProductNotFoundError("999")
        result = await product_actions.get_product_by_id_action(
            "999", service
        )
        self.assertIsInstance(result, Failure)
        assert isinstance(result, Failure)
        self.assertIn("999", result.error)

    async def test_featured_failure_generic_message(self) -> None:
        """Secondary actions use a fixed message on failure."""
        service = _service()
        service.get_featured_products.side_effect = ProductServiceError("x")
        result = await product_actions.get_featured_products_action(
            4, service
        )
        self.assertEqual(result, Failure("Error loading featured products"))

    async def test_category_failure_names_category(self) -> None:
        """The category appears in the failure message."""
        service = _service()
        service.get_products_by_category.side_effect = ProductServiceError(
            "x"
        )
        result = await product_actions.get_products_by_category_action(
            "kitchen", service
        )
        self.assertEqual(
            result, Failure("Error loading products in category kitchen")
        )

    async def test_bad_filter_value_becomes_failure(self) -> None:
        """A non-text category fails inside filtering, not at the caller."""
        client = MagicMock()
        client.get = AsyncMock(
            return_value=[
                {
                    "id": 1,
                    "title": "Mug",
                    "price": 9.5,
                    "image": "",
                    "category": "kitchen",
                    "description": "",
                    "rating": {"rate": 4.0, "count": 3},
                }
            ]
        )
        service = ProductService(client=client)
        with self.assertLogs("storefront.actions", level="ERROR"):
            result = await product_actions.get_products_action(
                ProductFilters(category=5),  # type: ignore[arg-type]
                service,
            )
        self.assertEqual(result, Failure("Error loading products"))

    async def test_unexpected_error_hides_details(self) -> None:
        """Non-storefront errors map to a generic message."""
        service = _service()
        service.get_product_by_id.side_effect = KeyError("internal")
        with self.assertLogs("storefront.actions", level="ERROR"):
            result = await product_actions.get_product_by_id_action(
                "7", service
            )
        self.assertEqual(result, Failure("Error loading product 7"))


class TestSearchAction(unittest.IsolatedAsyncioTestCase):
    """search_products_action behaviour."""

    async def test_blank_term_short_circuits(self) -> None:
        """Whitespace-only terms return an empty success."""
        service = _service()
        result = await product_actions.search_products_action("   ", service)
        self.assertEqual(result, Success([]))
        service.get_all_products.assert_not_awaited()

    async def test_term_is_trimmed(self) -> None:
        """The search filter receives the trimmed term."""
        service = _service()
        await product_actions.search_products_action("  mug ", service)
        service.get_all_products.assert_awaited_once_with(
            ProductFilters(search="mug")
        )

    async def test_failure(self) -> None:
        """Errors map to a fixed search failure message."""
        service = _service()
        service.get_all_products.side_effect = ProductServiceError("x")
        result = await product_actions.search_products_action("mug", service)
        self.assertEqual(result, Failure("Error searching products"))


class TestRevalidate(unittest.IsolatedAsyncioTestCase):
    """revalidate_products_action purges cached responses."""

    def _cached_service(self) -> ProductService:
        cache = ResponseCache(ttl=60)
        cache.store("/products", [])
        cache.store("/products/1", {})
        cache.store("/other", [])
        return ProductService(client=MagicMock(), cache=cache)

    async def test_clear_all(self) -> None:
        """No path clears everything."""
        service = self._cached_service()
        removed = await product_actions.revalidate_products_action(
            service=service
        )
        self.assertEqual(removed, 3)

    async def test_clear_prefix(self) -> None:
        """A path only clears endpoints under it."""
        service = self._cached_service()
        removed = await product_actions.revalidate_products_action(
            "/products", service
        )
        self.assertEqual(removed, 2)
        assert service.cache is not None
        self.assertEqual(len(service.cache), 1)

    async def test_no_cache(self) -> None:
        """A service without cache has nothing to drop."""
        service = ProductService(client=MagicMock())
        self.assertEqual(
            await product_actions.revalidate_products_action(service=service),
            0,
        )


class TestDefaultService(unittest.TestCase):
    """get_service builds one shared cache-backed service."""

    def test_shared_instance(self) -> None:
        """Repeated calls return the same service."""
        first = product_actions.get_service()
        self.assertIs(first, product_actions.get_service())
        self.assertIsInstance(first.cache, ResponseCache)


if __name__ == "__main__":
    unittest.main()
