"""Request payload structures.

Each endpoint's ``data`` object is read into one of these before the
terminal handler touches the store. Every field is optional here because
presence is a guard's decision, not the parser's; by the time a terminal
handler runs, its guards have already proven the fields it reads.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DishPayload:
    """Input: the fields a client may send for a dish."""

    id: Any = None
    name: str | None = None
    description: str | None = None
    price: Any = None
    image_url: str | None = None

    @staticmethod
    def from_data(data: Mapping[str, Any]) -> DishPayload:
        return DishPayload(
            id=data.get("id"),
            name=data.get("name"),
            description=data.get("description"),
            price=data.get("price"),
            image_url=data.get("image_url"),
        )


@dataclass(frozen=True)
class OrderPayload:
    """Input: the fields a client may send for an order."""

    id: Any = None
    deliver_to: str | None = None
    mobile_number: str | None = None
    dishes: Any = None
    status: str | None = None

    @staticmethod
    def from_data(data: Mapping[str, Any]) -> OrderPayload:
        return OrderPayload(
            id=data.get("id"),
            deliver_to=data.get("deliverTo"),
            mobile_number=data.get("mobileNumber"),
            dishes=data.get("dishes"),
            status=data.get("status"),
        )
