"""Value checks shared across the domain.

Prices and line-item quantities are both positive integers: prices are
stored in currency minor units so no fractional amounts ever exist.
"""

from __future__ import annotations

from typing import Any


def is_positive_integer(value: Any) -> bool:
    """True for a whole number strictly greater than zero.

    Integer-valued floats such as ``3.0`` count: JSON has a single number
    type. ``bool`` is a subclass of ``int`` in Python but a distinct JSON
    type, so ``true`` is rejected like any other non-number.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return isinstance(value, int) and value > 0


def canonical_id(value: Any) -> str:
    """Ids are strings everywhere; JSON numbers are converted at the boundary."""
    return value if isinstance(value, str) else str(value)


def is_present(value: Any) -> bool:
    """Whether a submitted field counts as supplied.

    Missing, null, ``false``, zero and the empty string count as absent.
    Empty lists and objects count as present so that their own guards can
    reject them with a more specific message.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True
