"""Guards shared by the dish and order pipelines.

Each guard is parameterized by the resource name ("Dish", "Order") so the
error messages read naturally for either collection.
"""

from __future__ import annotations

from typing import Any

from grubdash.application.pipeline import Guard, InboundRequest, RequestContext
from grubdash.domain.exceptions import EntityNotFoundError, ValidationError
from grubdash.domain.model.value_objects import canonical_id, is_present
from grubdash.domain.repository.resource_store import ResourceStore


class BodyDataHas(Guard):
    """Fails unless ``data[field]`` is present (see ``is_present``)."""

    def __init__(self, resource: str, field: str) -> None:
        self.resource = resource
        self.field = field

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        if is_present(request.data.get(self.field)):
            return
        raise ValidationError(f"{self.resource} must include a {self.field}")

    def __repr__(self) -> str:
        return f"BodyDataHas({self.field!r})"


class EntityExists(Guard):
    """Looks the route id up and stashes the entity on the context."""

    def __init__(self, resource: str, store: ResourceStore[Any], param: str) -> None:
        self.resource = resource
        self.store = store
        self.param = param

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        entity_id = request.params[self.param]
        entity = self.store.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(f"{self.resource} id not found: {entity_id}")
        context.entity = entity


class IdMatchesRoute(Guard):
    """A body ``id`` is optional, but when given it must equal the route id."""

    def __init__(self, resource: str, param: str) -> None:
        self.resource = resource
        self.param = param

    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        body_id = request.data.get("id")
        route_id = request.params[self.param]
        # null, false and "" mean no id was sent; 0 is a real id
        if body_id is None or body_id is False or body_id == "":
            return
        if canonical_id(body_id) == route_id:
            return
        raise ValidationError(
            f"{self.resource} id does not match route id. "
            f"{self.resource}: {body_id}, Route: {route_id}"
        )
