"""
mongofacade.collection_facade
=============================

This module provides a thin, synchronous facade over a MongoDB collection
reached through :mod:`pymongo`. Every operation receives the database handle
and the collection name explicitly; the collection handle is looked up again
on each call and never cached, so operations always target the collection
named at call time.

Results and matched documents are written to a text stream as they are
produced. Errors raised by the driver (anything under
:mod:`pymongo.errors`) are not caught here and reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, TextIO, Tuple, Union

from pymongo.collection import Collection
from pymongo.cursor import Cursor
from pymongo.database import Database
from pymongo.results import DeleteResult, UpdateResult

from .filters import sort_spec
from .model_adapters import to_document

logger = logging.getLogger(__name__)

SortSpec = Union[Sequence[Tuple[str, int]], Mapping[str, int]]


def describe_result(result: UpdateResult | DeleteResult) -> str:
    """Render a driver write result as a one-line human-readable summary."""
    if not result.acknowledged:
        return f"{type(result).__name__}(acknowledged=False)"
    if hasattr(result, "modified_count"):
        return (
            f"UpdateResult(matched_count={result.matched_count}, "
            f"modified_count={result.modified_count}, "
            f"upserted_id={result.upserted_id})"
        )
    return f"DeleteResult(deleted_count={result.deleted_count})"


class CollectionFacade:
    """Insert, update, delete and find operations over a named collection.

    :param out: Stream that receives printed results and documents. When
        ``None`` the current :data:`sys.stdout` is used at print time.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def _collection(self, db: Database, collection_name: str) -> Collection:
        return db[collection_name]

    def emit(self, value: Any) -> None:
        print(value, file=self.out)

    def drop(self, db: Database, collection_name: str) -> None:
        """Drop the collection; dropping a missing collection is a no-op."""
        self._collection(db, collection_name).drop()
        logger.debug("dropped collection %s", collection_name)

    def insert_one(self, db: Database, collection_name: str, document: Any) -> None:
        """Insert a single document.

        ``document`` may be a mapping, a pydantic model or a plain object;
        see :func:`~mongofacade.model_adapters.to_document`. The driver
        assigns ``_id`` when the document has none.
        """
        collection = self._collection(db, collection_name)
        collection.insert_one(to_document(document))
        logger.debug("inserted one document into %s", collection_name)

    def insert_many(
        self, db: Database, collection_name: str, documents: Iterable[Any]
    ) -> List[Any]:
        collection = self._collection(db, collection_name)
        docs = [to_document(doc) for doc in documents]
        if not docs:
            return []
        result = collection.insert_many(docs)
        logger.debug(
            "inserted %d documents into %s", len(result.inserted_ids), collection_name
        )
        return list(result.inserted_ids)

    def update_one(
        self,
        db: Database,
        collection_name: str,
        filter: Mapping[str, Any],
        update: Mapping[str, Any],
    ) -> UpdateResult:
        """Apply ``update`` to the first document matching ``filter``.

        The summary of the driver result is printed and the result returned.
        A filter matching nothing leaves the collection untouched and yields
        ``modified_count == 0``.
        """
        result = self._collection(db, collection_name).update_one(filter, update)
        if result.acknowledged:
            logger.debug(
                "update on %s matched=%d modified=%d",
                collection_name,
                result.matched_count,
                result.modified_count,
            )
        self.emit(describe_result(result))
        return result

    def delete_one(
        self, db: Database, collection_name: str, filter: Mapping[str, Any]
    ) -> DeleteResult:
        """Remove the first document matching ``filter``."""
        result = self._collection(db, collection_name).delete_one(filter)
        if result.acknowledged:
            logger.debug("delete on %s deleted=%d", collection_name, result.deleted_count)
        self.emit(describe_result(result))
        return result

    def iter_documents(
        self,
        db: Database,
        collection_name: str,
        filter: Optional[Mapping[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> Cursor:
        """Return the lazy driver cursor for ``filter`` without printing."""
        cursor = self._collection(db, collection_name).find(filter)
        if sort is not None:
            cursor = cursor.sort(sort_spec(sort))
        return cursor

    def _print_each(self, cursor: Iterable[Dict[str, Any]]) -> int:
        count = 0
        for document in cursor:
            self.emit(document)
            count += 1
        return count

    def find_all(self, db: Database, collection_name: str) -> int:
        """Print every document of the collection in store order.

        Documents are streamed from the cursor one at a time and only the
        number printed is returned. Each call issues a new query, so the
        sequence can be walked again by calling again.
        """
        count = self._print_each(self.iter_documents(db, collection_name))
        logger.debug("find_all on %s returned %d documents", collection_name, count)
        return count

    def find_by_filter(
        self, db: Database, collection_name: str, filter: Mapping[str, Any]
    ) -> int:
        count = self._print_each(self.iter_documents(db, collection_name, filter))
        logger.debug(
            "find_by_filter on %s returned %d documents", collection_name, count
        )
        return count

    def find_by_filter_sorted(
        self,
        db: Database,
        collection_name: str,
        filter: Mapping[str, Any],
        sort: SortSpec,
    ) -> int:
        """Like :meth:`find_by_filter`, ordered by the store using ``sort``.

        ``sort`` is an ordered list of ``(field, direction)`` pairs or a
        mapping in insertion order, e.g. ``{"restaurant_id": 1}``.
        """
        count = self._print_each(self.iter_documents(db, collection_name, filter, sort))
        logger.debug(
            "find_by_filter_sorted on %s returned %d documents",
            collection_name,
            count,
        )
        return count

    def find_one(
        self,
        db: Database,
        collection_name: str,
        filter: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        document = self._collection(db, collection_name).find_one(filter)
        if document is not None:
            self.emit(document)
        return document
