# src/filters/product_validator.py

"""Product validation: turn raw API records into Products, dropping bad ones."""

import logging
from typing import Any

from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class ProductValidator:
    """Parse upstream records and drop those that are malformed."""

    @staticmethod
    def validate(
        records: list[Any],
    ) -> tuple[list[Product], int]:
        """Build Products from *records*, skipping unusable entries.

        Returns the valid products and the count of dropped records.
        """
        valid: list[Product] = []
        dropped = 0

        for record in records:
            if not isinstance(record, dict):
                logger.debug(
                    "Dropped non-object record: %r", record
                )
                dropped += 1
                continue
            try:
                valid.append(Product.from_dict(record))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.debug(
                    "Dropped malformed product (id=%s): %s",
                    record.get("id"),
                    exc,
                )
                dropped += 1

        if dropped:
            logger.info(
                "Validation dropped %d invalid products",
                dropped,
            )

        return valid, dropped
