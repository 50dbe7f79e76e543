"""Dishes API. Dishes can be listed, created, read and updated."""

from fastapi import APIRouter, Depends, Response

from grubdash.application.dish_handlers import DishHandlers
from grubdash.infrastructure.web.dependencies import get_dish_handlers
from grubdash.infrastructure.web.responses import render
from grubdash.infrastructure.web.schemas import Envelope, to_request

router = APIRouter(prefix="/dishes", tags=["dishes"])


@router.get("")
def list_dishes(handlers: DishHandlers = Depends(get_dish_handlers)) -> Response:
    return render(handlers.list.run(to_request(None)))


@router.post("")
def create_dish(
    payload: Envelope | None = None,
    handlers: DishHandlers = Depends(get_dish_handlers),
) -> Response:
    return render(handlers.create.run(to_request(payload)))


@router.get("/{dishId}")
def read_dish(dishId: str, handlers: DishHandlers = Depends(get_dish_handlers)) -> Response:
    return render(handlers.read.run(to_request(None, dishId=dishId)))


@router.put("/{dishId}")
def update_dish(
    dishId: str,
    payload: Envelope | None = None,
    handlers: DishHandlers = Depends(get_dish_handlers),
) -> Response:
    return render(handlers.update.run(to_request(payload, dishId=dishId)))
