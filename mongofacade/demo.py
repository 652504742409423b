"""Walk through the basic collection operations against a live server.

The restaurant examples expect the ``restaurants`` sample dataset published
by MongoDB to be loaded into the database. :func:`load_restaurants` reads
that file (one JSON document per line) so it can be seeded with
:meth:`CollectionFacade.insert_many`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pymongo.database import Database

from .collection_facade import CollectionFacade
from .connection import MongoSettings, connect
from .filters import and_, ascending, eq, or_


def load_restaurants(path: Union[str, Path]) -> List[Dict[str, Any]]:
    docs: List[Dict[str, Any]] = []
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if line:
                docs.append(json.loads(line))
    return docs


def run_demo(db: Database, facade: Optional[CollectionFacade] = None) -> None:
    facade = facade or CollectionFacade()

    # example 2
    facade.drop(db, "test")

    facade.emit("Example 3:")
    facade.insert_one(db, "test", {"greeting": "Hello"})
    facade.insert_one(db, "test", {"greeting": "Bonjour le monde"})

    facade.emit("Example 4:")
    facade.update_one(
        db, "test", eq("greeting", "Hello"), {"$set": {"greeting": "Hello World"}}
    )

    facade.emit("Example 5:")
    facade.delete_one(db, "test", eq("greeting", "Hello World"))

    facade.emit("Example 6:")
    facade.find_all(db, "test")

    # db.restaurants.find({"name": "Dj Reynolds Pub And Restaurant"})
    facade.emit("Example 7:")
    facade.find_by_filter(db, "restaurants", {"name": "Dj Reynolds Pub And Restaurant"})

    # db.restaurants.find({"address.zipcode": "11223"})
    facade.emit("Example 8:")
    facade.find_by_filter(db, "restaurants", eq("address.zipcode", "11223"))

    facade.emit("Example 9:")
    facade.find_by_filter_sorted(
        db,
        "restaurants",
        or_(
            and_(
                eq("cuisine", "Hamburgers"),
                eq("borough", "Manhattan"),
                eq("address.zipcode", "10019"),
            ),
            and_(
                eq("cuisine", "Irish"),
                eq("borough", "Manhattan"),
                eq("address.zipcode", "10019"),
            ),
        ),
        ascending("restaurant_id"),
    )


def main(settings: Optional[MongoSettings] = None) -> None:
    logging.basicConfig(level=logging.WARNING)
    with connect(settings) as db:
        run_demo(db)


if __name__ == "__main__":
    main()
