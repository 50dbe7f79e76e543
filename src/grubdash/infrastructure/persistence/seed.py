"""Loads seed data for the in-memory stores from JSON files.

A seed file holds a JSON array of records in the same shape the API
returns. Records are reconstituted through the entity ``from_dict``
factories, so seed data obeys the same invariants as created data.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from grubdash.domain.exceptions import ValidationError
from grubdash.domain.model.dish import Dish
from grubdash.domain.model.order import Order

T = TypeVar("T")


def load_dishes(path: Path) -> list[Dish]:
    return _load(path, Dish.from_dict)


def load_orders(path: Path) -> list[Order]:
    return _load(path, Order.from_dict)


def _load(path: Path, factory: Callable[[dict[str, Any]], T]) -> list[T]:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{path}: invalid JSON ({exc.msg})") from exc
    if not isinstance(raw, list):
        raise ValidationError(f"{path}: expected a JSON array of records")

    entities: list[T] = []
    seen: set[str] = set()
    for index, record in enumerate(raw):
        if not isinstance(record, dict):
            raise ValidationError(f"{path}: record {index} is not an object")
        try:
            entity = factory(record)
        except ValidationError as exc:
            raise ValidationError(f"{path}: record {index}: {exc.message}") from exc
        if entity.id in seen:  # type: ignore[attr-defined]
            raise ValidationError(
                f"{path}: record {index}: duplicate id {entity.id}"  # type: ignore[attr-defined]
            )
        seen.add(entity.id)  # type: ignore[attr-defined]
        entities.append(entity)
    return entities
