"""
GrubDash API: FastAPI application factory.

Endpoints:
    - GET/POST /dishes, GET/PUT /dishes/{dishId}
    - GET/POST /orders, GET/PUT/DELETE /orders/{orderId}
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from grubdash.infrastructure.bootstrap import Container, build_container
from grubdash.infrastructure.config import Settings, get_settings
from grubdash.infrastructure.web import dishes, orders
from grubdash.infrastructure.web.responses import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    container = container or build_container(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.container = container

    register_error_handlers(app)
    app.include_router(dishes.router)
    app.include_router(orders.router)

    logger.info(
        "%s ready with %d dish(es) and %d order(s)",
        settings.APP_NAME,
        len(container.dish_store),
        len(container.order_store),
    )
    return app
