"""Test doubles and builders shared across the suite.

Stores are the real in-memory implementation: it has no I/O, so there is
nothing to fake. Id generation is replaced with a predictable sequence.
"""

from __future__ import annotations

from typing import Any

from grubdash.domain.model.dish import Dish
from grubdash.domain.model.order import Order, OrderStatus


class SequentialIds:
    """Hands out "1", "2", "3", ... so tests can predict new ids."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self.issued: list[str] = []

    def __call__(self) -> str:
        value = str(self._next)
        self._next += 1
        self.issued.append(value)
        return value


def make_dish(dish_id: str = "d1", **overrides: Any) -> Dish:
    fields: dict[str, Any] = {
        "name": "Taco",
        "description": "Corn tortilla, carnitas",
        "price": 3,
        "image_url": "https://example.com/taco.jpg",
    }
    fields.update(overrides)
    return Dish(id=dish_id, **fields)


def make_order(
    order_id: str = "o1",
    status: OrderStatus = OrderStatus.PENDING,
    **overrides: Any,
) -> Order:
    fields: dict[str, Any] = {
        "deliver_to": "308 Negra Arroyo Lane",
        "mobile_number": "(505) 143-3369",
        "dishes": [{"dishId": "d1", "quantity": 2}],
    }
    fields.update(overrides)
    return Order(id=order_id, status=status, **fields)


def dish_data(**overrides: Any) -> dict[str, Any]:
    """A valid create/update body for a dish (the object under ``data``)."""
    data: dict[str, Any] = {
        "name": "Taco",
        "description": "x",
        "price": 3,
        "image_url": "u",
    }
    data.update(overrides)
    return data


def order_data(**overrides: Any) -> dict[str, Any]:
    """A valid create/update body for an order (the object under ``data``)."""
    data: dict[str, Any] = {
        "deliverTo": "1600 Pennsylvania Avenue NW",
        "mobileNumber": "(202) 456-1111",
        "status": "preparing",
        "dishes": [{"dishId": "d1", "quantity": 1}],
    }
    data.update(overrides)
    return data
