"""Generic maximum-by-key reduction."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from filescout.exceptions import EmptyCollectionError, InvalidArgumentError

T = TypeVar("T")

_MISSING = object()


def max_by(items: Iterable[Optional[T]], projection: Callable[[T], float]) -> T:
    """Return the item with the largest ``projection`` value.

    ``None`` items are skipped. Ties go to the earliest item since later ones
    only win on a strictly greater score.
    """
    if items is None:
        raise InvalidArgumentError("items must not be None")
    if not callable(projection):
        raise InvalidArgumentError("projection must be callable")

    best: object = _MISSING
    best_value = float("-inf")
    for item in items:
        if item is None:
            continue
        value = float(projection(item))
        if best is _MISSING or value > best_value:
            best = item
            best_value = value

    if best is _MISSING:
        raise EmptyCollectionError("max_by() arg is an empty sequence")
    return best  # type: ignore[return-value]
