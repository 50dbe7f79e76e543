"""Unit tests for the guards shared by both pipelines."""

import pytest

from grubdash.application.guards import BodyDataHas, EntityExists, IdMatchesRoute
from grubdash.application.pipeline import InboundRequest, RequestContext
from grubdash.domain.exceptions import EntityNotFoundError, ValidationError
from grubdash.infrastructure.persistence.in_memory_store import InMemoryStore
from tests.fakes import make_dish


def _check(guard, data=None, **params):
    context = RequestContext()
    guard.evaluate(InboundRequest(data=data or {}, params=params), context)
    return context


class TestBodyDataHas:

    def test_present_field_passes(self):
        _check(BodyDataHas("Dish", "name"), {"name": "Taco"})

    @pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": None}, {"other": "x"}])
    def test_absent_or_blank_field_fails(self, data):
        with pytest.raises(ValidationError, match="^Dish must include a name$"):
            _check(BodyDataHas("Dish", "name"), data)

    def test_zero_counts_as_missing(self):
        with pytest.raises(ValidationError, match="Dish must include a price"):
            _check(BodyDataHas("Dish", "price"), {"price": 0})

    def test_message_names_resource(self):
        with pytest.raises(ValidationError, match="Order must include a deliverTo"):
            _check(BodyDataHas("Order", "deliverTo"))


class TestEntityExists:

    def test_found_entity_stashed(self):
        dish = make_dish("d1")
        store = InMemoryStore([dish])
        context = _check(EntityExists("Dish", store, "dishId"), dishId="d1")
        assert context.entity is dish

    def test_unknown_id_is_404(self):
        store = InMemoryStore([make_dish("d1")])
        with pytest.raises(EntityNotFoundError, match="Dish id not found: nope") as excinfo:
            _check(EntityExists("Dish", store, "dishId"), dishId="nope")
        assert excinfo.value.status_code == 404


class TestIdMatchesRoute:

    @pytest.mark.parametrize(
        "data", [{}, {"id": None}, {"id": ""}, {"id": False}, {"id": "7"}]
    )
    def test_absent_or_matching_id_passes(self, data):
        _check(IdMatchesRoute("Dish", "dishId"), data, dishId="7")

    def test_numeric_body_id_compared_as_string(self):
        _check(IdMatchesRoute("Order", "orderId"), {"id": 7}, orderId="7")

    def test_zero_body_id_is_compared(self):
        with pytest.raises(ValidationError, match="Order: 0, Route: 7"):
            _check(IdMatchesRoute("Order", "orderId"), {"id": 0}, orderId="7")

    def test_mismatch_fails(self):
        guard = IdMatchesRoute("Dish", "dishId")
        with pytest.raises(ValidationError) as excinfo:
            _check(guard, {"id": "8"}, dishId="7")
        assert excinfo.value.message == (
            "Dish id does not match route id. Dish: 8, Route: 7"
        )
