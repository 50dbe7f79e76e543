"""Orders API.

Orders follow the status lifecycle pending -> preparing ->
out-for-delivery -> delivered. Delivered orders are frozen and only pending
orders can be deleted.
"""

from fastapi import APIRouter, Depends, Response

from grubdash.application.order_handlers import OrderHandlers
from grubdash.infrastructure.web.dependencies import get_order_handlers
from grubdash.infrastructure.web.responses import render
from grubdash.infrastructure.web.schemas import Envelope, to_request

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("")
def list_orders(handlers: OrderHandlers = Depends(get_order_handlers)) -> Response:
    return render(handlers.list.run(to_request(None)))


@router.post("")
def create_order(
    payload: Envelope | None = None,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    return render(handlers.create.run(to_request(payload)))


@router.get("/{orderId}")
def read_order(orderId: str, handlers: OrderHandlers = Depends(get_order_handlers)) -> Response:
    return render(handlers.read.run(to_request(None, orderId=orderId)))


@router.put("/{orderId}")
def update_order(
    orderId: str,
    payload: Envelope | None = None,
    handlers: OrderHandlers = Depends(get_order_handlers),
) -> Response:
    return render(handlers.update.run(to_request(payload, orderId=orderId)))


@router.delete("/{orderId}", status_code=204)
def delete_order(orderId: str, handlers: OrderHandlers = Depends(get_order_handlers)) -> Response:
    return render(handlers.delete.run(to_request(None, orderId=orderId)))
