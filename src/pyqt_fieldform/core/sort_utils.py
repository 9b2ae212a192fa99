"""Sorting utilities."""

import math
from typing import Any, Callable, Iterable, List, TypeVar

T = TypeVar("T")

WEIGHT_KEY = "_weight"


def _as_number(value: Any) -> float:
    # Submitted weights arrive as strings; non-numeric input weighs 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    # Only finite weights take part in ordering
    return number if math.isfinite(number) else 0


def item_weight(item: Any) -> float:
    """Weight of a submitted item; anything that is not a dict weighs 0."""
    if isinstance(item, dict):
        return _as_number(item.get(WEIGHT_KEY, 0))
    return 0


def weight_sort(items: Iterable[T], weight_of: Callable[[T], Any] = item_weight) -> List[T]:
    """Return items ordered by ascending weight, keeping ties in their original order."""
    return sorted(items, key=weight_of)
