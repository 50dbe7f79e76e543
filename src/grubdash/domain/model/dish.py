"""Dish entity.

Dishes live independently of orders: orders reference them by ``dishId``
inside their line items but never own them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.value_objects import (
    canonical_id,
    is_positive_integer,
    is_present,
)


@dataclass
class Dish:
    """A dish on the menu.

    ``price`` is an integer amount in currency minor units. The ``id`` is
    assigned once by the create handler and never changes afterwards.
    """

    id: str
    name: str
    description: str
    price: int
    image_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "image_url": self.image_url,
        }

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Dish:
        """Reconstitute a stored dish, e.g. from seed data."""
        for key in ("id", "name", "description", "price", "image_url"):
            if not is_present(raw.get(key)):
                raise ValidationError(f"Dish must include a {key}")
        if not is_positive_integer(raw["price"]):
            raise ValidationError(
                "Dish must have a price that is an integer greater than 0"
            )
        return Dish(
            id=canonical_id(raw["id"]),
            name=raw["name"],
            description=raw["description"],
            price=int(raw["price"]),
            image_url=raw["image_url"],
        )
