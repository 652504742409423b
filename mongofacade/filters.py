"""Builders for MongoDB filter and sort documents.

Filters are plain mappings in MongoDB query syntax, so anything built here
can be mixed freely with hand-written query documents. Field names may be
dotted paths into nested documents, e.g. ``"address.zipcode"``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from pymongo import ASCENDING, DESCENDING


def eq(field: str, value: Any) -> Dict[str, Any]:
    if not field:
        raise ValueError("field must be non-empty")
    return {field: value}


def _combine(operator: str, filters: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    if not filters:
        raise ValueError(f"{operator} requires at least one filter")
    return {operator: [dict(f) for f in filters]}


def and_(*filters: Mapping[str, Any]) -> Dict[str, Any]:
    """Match documents satisfying every filter."""
    return _combine("$and", filters)


def or_(*filters: Mapping[str, Any]) -> Dict[str, Any]:
    """Match documents satisfying at least one filter."""
    return _combine("$or", filters)


def ascending(*fields: str) -> List[Tuple[str, int]]:
    return [(field, ASCENDING) for field in fields]


def descending(*fields: str) -> List[Tuple[str, int]]:
    return [(field, DESCENDING) for field in fields]


def sort_spec(
    spec: Union[Mapping[str, int], Sequence[Tuple[str, int]]]
) -> List[Tuple[str, int]]:
    """Normalize ``spec`` into the ordered ``(field, direction)`` list.

    Mappings keep their insertion order, so ``{"cuisine": 1, "name": -1}``
    sorts on ``cuisine`` first.
    """
    pairs = list(spec.items()) if isinstance(spec, Mapping) else list(spec)
    for field, direction in pairs:
        if direction not in (ASCENDING, DESCENDING):
            raise ValueError(
                f"sort direction for '{field}' must be {ASCENDING} or {DESCENDING}"
            )
    return pairs
