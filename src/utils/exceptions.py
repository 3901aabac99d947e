# src/utils/exceptions.py

"""Exception hierarchy for the storefront client."""


class StorefrontError(Exception):
    """Base exception for the project."""


class ProductServiceError(StorefrontError):
    """Raised when the catalog cannot be loaded from the upstream API."""


class ProductNotFoundError(ProductServiceError):
    """Raised when a single product lookup yields no product."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")
