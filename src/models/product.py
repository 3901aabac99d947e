# src/models/product.py

"""Product data model for inter-module data flow."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rating:
    """Average review score and number of reviews."""

    rate: float
    count: int


@dataclass(frozen=True)
class Product:
    """A single catalog entry as served by the upstream API."""

    id: int
    title: str
    price: float
    image: str = ""
    category: str = ""
    description: str = ""
    rating: Rating = Rating(rate=0.0, count=0)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from an upstream JSON object.

        Every field of the upstream shape is required. Raises
        ``KeyError``, ``TypeError`` or ``ValueError`` when the record is
        missing fields or carries values of the wrong shape.
        """
        raw_rating: dict[str, Any] = data["rating"]
        price = float(data["price"])
        if price < 0:
            raise ValueError(f"negative price {price!r}")
        count = int(raw_rating["count"])
        if count < 0:
            raise ValueError(f"negative rating count {count!r}")
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            price=price,
            image=str(data["image"]),
            category=str(data["category"]),
            description=str(data["description"]),
            rating=Rating(rate=float(raw_rating["rate"]), count=count),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the upstream JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "image": self.image,
            "category": self.category,
            "description": self.description,
            "rating": {
                "rate": self.rating.rate,
                "count": self.rating.count,
            },
        }
