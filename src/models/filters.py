# src/models/filters.py

"""Query options for narrowing and ordering the catalog."""

from dataclasses import dataclass
from typing import Literal

SortBy = Literal["price", "rating", "name"]
SortOrder = Literal["asc", "desc"]


@dataclass
class ProductFilters:
    """Optional criteria applied client-side to a product listing.

    Every field left as ``None`` skips its filtering stage.
    """

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    sort_by: SortBy | None = None
    sort_order: SortOrder = "asc"
