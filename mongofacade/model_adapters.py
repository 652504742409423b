"""Conversion of caller objects into plain documents before insertion."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from pydantic import BaseModel


def pydantic_model_dump(obj: Any) -> Dict[str, Any]:
    """Dump a pydantic model, supporting both the v2 and v1 APIs."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if hasattr(obj, "dict"):
        return obj.dict()
    raise TypeError(f"{type(obj).__name__} is not a pydantic model")


def to_document(obj: Any) -> Dict[str, Any]:
    """Return a new ``dict`` suitable for handing to the driver.

    Mappings are shallow-copied, pydantic models are dumped and plain
    objects contribute their public instance attributes. Anything else
    raises :class:`TypeError`.
    """
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, BaseModel):
        return pydantic_model_dump(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"cannot convert {type(obj).__name__} to a document")
