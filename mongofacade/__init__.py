"""Thin synchronous facade over pymongo collections."""

from .collection_facade import CollectionFacade, describe_result
from .connection import MongoSettings, connect
from .filters import and_, ascending, descending, eq, or_, sort_spec
from .model_adapters import to_document

__all__ = [
    "CollectionFacade",
    "MongoSettings",
    "and_",
    "ascending",
    "connect",
    "descending",
    "describe_result",
    "eq",
    "or_",
    "sort_spec",
    "to_document",
]
