"""Pydantic request envelope.

Every request body has the shape ``{"data": {...}}``. Only the envelope is
typed here; the fields inside ``data`` are checked by the pipelines so they
can fail with their own messages instead of a generic schema error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from grubdash.application.pipeline import InboundRequest


class Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: dict[str, Any] | None = None


def to_request(payload: Envelope | None, **params: str) -> InboundRequest:
    body = payload.model_dump() if payload is not None else None
    return InboundRequest.from_body(body, **params)
