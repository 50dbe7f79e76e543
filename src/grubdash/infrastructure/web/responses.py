"""Rendering of pipeline results and failures as JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.application.pipeline import Outcome
from grubdash.domain.exceptions import DomainException

logger = logging.getLogger(__name__)


def render(outcome: Outcome) -> Response:
    if outcome.data is None:
        return Response(status_code=outcome.status_code)
    return JSONResponse(status_code=outcome.status_code, content={"data": outcome.data})


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
        return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid request body: {message}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"Path not found: {request.url.path}"
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = f"{request.method} not allowed for {request.url.path}"
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )
