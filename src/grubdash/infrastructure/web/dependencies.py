from __future__ import annotations

from fastapi import Request

from grubdash.application.dish_handlers import DishHandlers
from grubdash.application.order_handlers import OrderHandlers


def get_dish_handlers(request: Request) -> DishHandlers:
    return request.app.state.container.dishes


def get_order_handlers(request: Request) -> OrderHandlers:
    return request.app.state.container.orders
