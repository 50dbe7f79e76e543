"""The validator chain.

A Pipeline is an ordered list of guards followed by one terminal handler.
Each guard either returns (pass) or raises a DomainException (fail). The
first failure ends the run: remaining guards and the terminal handler are
skipped and the exception propagates to whoever renders errors. Guards
never mutate the store, so a failed run leaves it untouched.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any

from grubdash.domain.exceptions import DomainException, ValidationError
from grubdash.domain.repository.resource_store import ResourceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InboundRequest:
    """What a pipeline sees of an HTTP request.

    ``data`` is the object under the body's ``data`` key (empty when the
    body or the key is missing); ``params`` are the route parameters.
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)

    @staticmethod
    def from_body(body: Mapping[str, Any] | None, **params: str) -> InboundRequest:
        data = (body or {}).get("data") or {}
        if not isinstance(data, Mapping):
            raise ValidationError("Request body data must be an object")
        return InboundRequest(data=data, params=params)


@dataclass
class RequestContext:
    """Per-request scratch space shared by guards and the terminal handler."""

    entity: Any = None
    values: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Outcome:
    """Result of a successful pipeline run. ``data`` is None for "no content"."""

    status_code: int
    data: Any = None


class Guard(ABC):

    @abstractmethod
    def evaluate(self, request: InboundRequest, context: RequestContext) -> None:
        """Return to pass; raise a DomainException to stop the chain."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


Terminal = Callable[[InboundRequest, RequestContext], Outcome]


class Pipeline:

    def __init__(
        self,
        name: str,
        guards: Sequence[Guard],
        terminal: Terminal,
        store: ResourceStore[Any] | None = None,
    ) -> None:
        self.name = name
        self.guards = tuple(guards)
        self._terminal = terminal
        self._store = store

    def run(self, request: InboundRequest) -> Outcome:
        """Run every guard in order, then the terminal handler.

        When a store is attached the whole run holds its lock, so no other
        request can touch the collection between validation and mutation.
        """
        context = RequestContext()
        lock = self._store.locked() if self._store is not None else nullcontext()
        with lock:
            for guard in self.guards:
                try:
                    guard.evaluate(request, context)
                except DomainException as exc:
                    logger.debug(
                        "%s rejected by %r: %s (%d)",
                        self.name, guard, exc.message, exc.status_code,
                    )
                    raise
            return self._terminal(request, context)

    def __repr__(self) -> str:
        return f"Pipeline({self.name!r}, guards={list(self.guards)!r})"
