"""Dish pipelines: list, create, read and update.

Dishes have no lifecycle beyond CRUD and are never deleted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from grubdash.application.dto import DishPayload
from grubdash.application.guards import BodyDataHas, EntityExists, IdMatchesRoute
from grubdash.application.pipeline import (
    Guard,
    InboundRequest,
    Outcome,
    Pipeline,
    RequestContext,
)
from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.dish import Dish
from grubdash.domain.model.value_objects import is_positive_integer
from grubdash.domain.repository.resource_store import ResourceStore

logger = logging.getLogger(__name__)

RESOURCE = "Dish"
ROUTE_PARAM = "dishId"
REQUIRED_FIELDS = ("name", "description", "price", "image_url")


class PriceIsValid(Guard):

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        if not is_positive_integer(request.data.get("price")):
            raise ValidationError(
                "Dish must have a price that is an integer greater than 0"
            )


class DishHandlers:
    """Builds one Pipeline per dish operation over a shared store."""

    def __init__(self, dish_store: ResourceStore[Dish], next_id: Callable[[], str]) -> None:
        self._store = dish_store
        self._next_id = next_id

        exists = EntityExists(RESOURCE, dish_store, ROUTE_PARAM)
        fields: list[Guard] = [BodyDataHas(RESOURCE, f) for f in REQUIRED_FIELDS]

        self.list = Pipeline("list dishes", [], self._list, dish_store)
        self.create = Pipeline(
            "create dish", [*fields, PriceIsValid()], self._create, dish_store
        )
        self.read = Pipeline("read dish", [exists], self._read, dish_store)
        self.update = Pipeline(
            "update dish",
            [exists, *fields, PriceIsValid(), IdMatchesRoute(RESOURCE, ROUTE_PARAM)],
            self._update,
            dish_store,
        )

    # --- Terminal handlers ----------------------------------------------------

    def _list(self, request: InboundRequest, context: RequestContext) -> Outcome:
        return Outcome(200, [dish.to_dict() for dish in self._store.list_all()])

    def _create(self, request: InboundRequest, context: RequestContext) -> Outcome:
        payload = DishPayload.from_data(request.data)
        dish = Dish(
            id=self._next_id(),
            name=payload.name,  # type: ignore[arg-type]
            description=payload.description,  # type: ignore[arg-type]
            price=int(payload.price),
            image_url=payload.image_url,  # type: ignore[arg-type]
        )
        self._store.append(dish)
        logger.info("Created dish %s (%s)", dish.id, dish.name)
        return Outcome(201, dish.to_dict())

    def _read(self, request: InboundRequest, context: RequestContext) -> Outcome:
        return Outcome(200, context.entity.to_dict())

    def _update(self, request: InboundRequest, context: RequestContext) -> Outcome:
        payload = DishPayload.from_data(request.data)
        dish = self._store.update(
            context.entity,
            name=payload.name,
            description=payload.description,
            price=int(payload.price),
            image_url=payload.image_url,
        )
        logger.info("Updated dish %s", dish.id)
        return Outcome(200, dish.to_dict())
