"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Stores are built once per application and injected into the handlers;
nothing reaches them through module-level globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from grubdash.application.dish_handlers import DishHandlers
from grubdash.application.order_handlers import OrderHandlers
from grubdash.domain.model.dish import Dish
from grubdash.domain.model.order import Order
from grubdash.infrastructure.config import Settings
from grubdash.infrastructure.ids import next_id
from grubdash.infrastructure.persistence.in_memory_store import InMemoryStore
from grubdash.infrastructure.persistence.seed import load_dishes, load_orders

logger = logging.getLogger(__name__)


@dataclass
class Container:
    dish_store: InMemoryStore[Dish]
    order_store: InMemoryStore[Order]
    dishes: DishHandlers
    orders: OrderHandlers


def build_stores(settings: Settings) -> tuple[InMemoryStore[Dish], InMemoryStore[Order]]:
    dishes: list[Dish] = []
    orders: list[Order] = []
    if _seed_available(settings.DISHES_SEED_FILE):
        dishes = load_dishes(settings.DISHES_SEED_FILE)  # type: ignore[arg-type]
        logger.info("Seeded %d dish(es) from %s", len(dishes), settings.DISHES_SEED_FILE)
    if _seed_available(settings.ORDERS_SEED_FILE):
        orders = load_orders(settings.ORDERS_SEED_FILE)  # type: ignore[arg-type]
        logger.info("Seeded %d order(s) from %s", len(orders), settings.ORDERS_SEED_FILE)
    return InMemoryStore(dishes), InMemoryStore(orders)


def _seed_available(path: Path | None) -> bool:
    if path is None:
        return False
    if not path.is_file():
        logger.warning("Seed file %s not found; starting empty", path)
        return False
    return True


def build_container(
    settings: Settings,
    dish_store: InMemoryStore[Dish] | None = None,
    order_store: InMemoryStore[Order] | None = None,
) -> Container:
    if dish_store is None or order_store is None:
        seeded_dishes, seeded_orders = build_stores(settings)
        dish_store = dish_store if dish_store is not None else seeded_dishes
        order_store = order_store if order_store is not None else seeded_orders
    return Container(
        dish_store=dish_store,
        order_store=order_store,
        dishes=DishHandlers(dish_store, next_id),
        orders=OrderHandlers(order_store, next_id),
    )
