"""Unit tests for the Order entity and its status lifecycle."""

import pytest

from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.order import Order, OrderStatus
from tests.fakes import make_order


class TestOrderStatus:

    def test_values_in_lifecycle_order(self):
        assert OrderStatus.values() == [
            "pending",
            "preparing",
            "out-for-delivery",
            "delivered",
        ]

    @pytest.mark.parametrize("value", ["pending", "delivered", "out-for-delivery"])
    def test_known_values_valid(self, value):
        assert OrderStatus.is_valid(value)

    @pytest.mark.parametrize("value", ["invalid", "", None, "PENDING"])
    def test_unknown_values_invalid(self, value):
        assert not OrderStatus.is_valid(value)


class TestOrderState:

    def test_default_status_is_pending(self):
        order = Order(id="o1", deliver_to="x", mobile_number="y", dishes=[{"quantity": 1}])
        assert order.status == OrderStatus.PENDING
        assert order.is_pending
        assert not order.is_delivered

    def test_delivered(self):
        order = make_order(status=OrderStatus.DELIVERED)
        assert order.is_delivered
        assert not order.is_pending


class TestOrderSerialization:

    def test_to_dict_uses_api_field_names(self):
        order = make_order("o1", status=OrderStatus.PREPARING)
        assert order.to_dict() == {
            "id": "o1",
            "deliverTo": "308 Negra Arroyo Lane",
            "mobileNumber": "(505) 143-3369",
            "status": "preparing",
            "dishes": [{"dishId": "d1", "quantity": 2}],
        }

    def test_to_dict_copies_line_items(self):
        order = make_order()
        snapshot = order.to_dict()
        snapshot["dishes"][0]["quantity"] = 99
        assert order.dishes[0]["quantity"] == 2

    def test_extra_line_item_keys_preserved(self):
        order = make_order(dishes=[{"dishId": "d1", "quantity": 1, "name": "Taco"}])
        assert order.to_dict()["dishes"][0]["name"] == "Taco"


class TestOrderFromDict:

    def _raw(self, **overrides):
        raw = make_order("o1").to_dict()
        raw.update(overrides)
        return raw

    def test_round_trip(self):
        order = make_order("o1", status=OrderStatus.OUT_FOR_DELIVERY)
        assert Order.from_dict(order.to_dict()) == order

    def test_missing_status_defaults_to_pending(self):
        raw = self._raw()
        del raw["status"]
        assert Order.from_dict(raw).status == OrderStatus.PENDING

    def test_empty_dishes_rejected(self):
        with pytest.raises(ValidationError, match="at least one dish"):
            Order.from_dict(self._raw(dishes=[]))

    def test_bad_quantity_reports_index(self):
        dishes = [{"dishId": "a", "quantity": 1}, {"dishId": "b", "quantity": 0}]
        with pytest.raises(ValidationError, match="Dish 1 must have a quantity"):
            Order.from_dict(self._raw(dishes=dishes))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="must have a status of"):
            Order.from_dict(self._raw(status="lost"))
