"""Order pipelines: list, create, read, update and delete.

On top of field validation, orders carry a status lifecycle. The pipelines
enforce two rules from it: a delivered order can no longer be updated,
and only a pending order can be deleted. Any of the four statuses is
accepted on update otherwise; forward-only progression is not enforced.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from grubdash.application.dto import OrderPayload
from grubdash.application.guards import BodyDataHas, EntityExists, IdMatchesRoute
from grubdash.application.pipeline import (
    Guard,
    InboundRequest,
    Outcome,
    Pipeline,
    RequestContext,
)
from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.order import Order, OrderStatus, copy_line_items
from grubdash.domain.model.value_objects import is_positive_integer
from grubdash.domain.repository.resource_store import ResourceStore

logger = logging.getLogger(__name__)

RESOURCE = "Order"
ROUTE_PARAM = "orderId"
REQUIRED_FIELDS = ("deliverTo", "mobileNumber", "dishes")


class DishesIsValid(Guard):

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        dishes = request.data.get("dishes")
        if not isinstance(dishes, list) or not dishes:
            raise ValidationError("Order must include at least one dish")


class QuantityIsValid(Guard):
    """Reports the first line item whose quantity is not a positive integer."""

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        for index, item in enumerate(request.data.get("dishes") or []):
            quantity = item.get("quantity") if isinstance(item, dict) else None
            if not is_positive_integer(quantity):
                raise ValidationError(
                    f"Dish {index} must have a quantity that is an integer greater than 0"
                )


class StatusIsValid(Guard):

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        if not OrderStatus.is_valid(request.data.get("status")):
            raise ValidationError(
                "Order must have a status of " + ", ".join(OrderStatus.values())
            )


class StatusNotDelivered(Guard):
    """Checks the stored status, not the one in the request body."""

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        if context.entity.is_delivered:
            raise ValidationError("A delivered order cannot be changed")


class StatusIsPending(Guard):

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        if not context.entity.is_pending:
            raise ValidationError("An order cannot be deleted unless it is pending")


class OrderHandlers:
    """Builds one Pipeline per order operation over a shared store."""

    def __init__(self, order_store: ResourceStore[Order], next_id: Callable[[], str]) -> None:
        self._store = order_store
        self._next_id = next_id

        exists = EntityExists(RESOURCE, order_store, ROUTE_PARAM)
        line_items: list[Guard] = [
            *(BodyDataHas(RESOURCE, f) for f in REQUIRED_FIELDS),
            DishesIsValid(),
            QuantityIsValid(),
        ]

        self.list = Pipeline("list orders", [], self._list, order_store)
        self.create = Pipeline("create order", line_items, self._create, order_store)
        self.read = Pipeline("read order", [exists], self._read, order_store)
        self.update = Pipeline(
            "update order",
            [
                exists,
                *line_items,
                IdMatchesRoute(RESOURCE, ROUTE_PARAM),
                StatusIsValid(),
                StatusNotDelivered(),
            ],
            self._update,
            order_store,
        )
        self.delete = Pipeline(
            "delete order", [exists, StatusIsPending()], self._delete, order_store
        )

    # --- Terminal handlers ----------------------------------------------------

    def _list(self, request: InboundRequest, context: RequestContext) -> Outcome:
        return Outcome(200, [order.to_dict() for order in self._store.list_all()])

    def _create(self, request: InboundRequest, context: RequestContext) -> Outcome:
        payload = OrderPayload.from_data(request.data)
        # New orders always start pending; a client-sent status is ignored.
        order = Order(
            id=self._next_id(),
            deliver_to=payload.deliver_to,  # type: ignore[arg-type]
            mobile_number=payload.mobile_number,  # type: ignore[arg-type]
            dishes=copy_line_items(payload.dishes),
            status=OrderStatus.PENDING,
        )
        self._store.append(order)
        logger.info("Created order %s with %d line item(s)", order.id, len(order.dishes))
        return Outcome(201, order.to_dict())

    def _read(self, request: InboundRequest, context: RequestContext) -> Outcome:
        return Outcome(200, context.entity.to_dict())

    def _update(self, request: InboundRequest, context: RequestContext) -> Outcome:
        payload = OrderPayload.from_data(request.data)
        order = self._store.update(
            context.entity,
            deliver_to=payload.deliver_to,
            mobile_number=payload.mobile_number,
            dishes=copy_line_items(payload.dishes),
            status=OrderStatus(payload.status),
        )
        logger.info("Updated order %s (status=%s)", order.id, order.status.value)
        return Outcome(200, order.to_dict())

    def _delete(self, request: InboundRequest, context: RequestContext) -> Outcome:
        index = self._store.find_index_by_id(context.entity.id)
        self._store.remove_at(index)  # type: ignore[arg-type]
        logger.info("Deleted order %s", context.entity.id)
        return Outcome(204)
