"""Order entity and its status lifecycle.

Statuses progress ``pending -> preparing -> out-for-delivery -> delivered``.
Only two lifecycle rules are enforced: a delivered order is frozen, and an
order can only be deleted while it is still pending.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any

from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.value_objects import (
    canonical_id,
    is_positive_integer,
    is_present,
)


def copy_line_items(dishes: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Deep-copy validated line items, storing each quantity as an ``int``."""
    items = copy.deepcopy(dishes)
    for item in items:
        item["quantity"] = int(item["quantity"])
    return items


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return value in cls.values()


@dataclass
class Order:
    """A delivery order.

    ``dishes`` holds the line items exactly as submitted (``dishId``,
    ``quantity`` and any extra keys the client sent); only the quantities
    are validated.
    """

    id: str
    deliver_to: str
    mobile_number: str
    dishes: list[dict[str, Any]]
    status: OrderStatus = OrderStatus.PENDING

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "deliverTo": self.deliver_to,
            "mobileNumber": self.mobile_number,
            "status": self.status.value,
            # line items are mutable dicts; never hand out the stored ones
            "dishes": copy.deepcopy(self.dishes),
        }

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Order:
        """Reconstitute a stored order, e.g. from seed data."""
        for key in ("id", "deliverTo", "mobileNumber", "dishes"):
            if not is_present(raw.get(key)):
                raise ValidationError(f"Order must include a {key}")
        dishes = raw["dishes"]
        if not isinstance(dishes, list) or not dishes:
            raise ValidationError("Order must include at least one dish")
        for index, item in enumerate(dishes):
            if not isinstance(item, dict) or not is_positive_integer(item.get("quantity")):
                raise ValidationError(
                    f"Dish {index} must have a quantity that is an integer greater than 0"
                )
        status = raw.get("status", OrderStatus.PENDING.value)
        if not OrderStatus.is_valid(status):
            raise ValidationError(
                "Order must have a status of " + ", ".join(OrderStatus.values())
            )
        return Order(
            id=canonical_id(raw["id"]),
            deliver_to=raw["deliverTo"],
            mobile_number=raw["mobileNumber"],
            dishes=copy_line_items(dishes),
            status=OrderStatus(status),
        )
