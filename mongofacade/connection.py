"""
mongofacade.connection
======================

Connection settings and scoped acquisition of a MongoDB database handle.

:func:`connect` opens a single :class:`~pymongo.MongoClient`, yields the
configured database and closes the client on every exit path, including
when the body of the ``with`` block raises.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MongoSettings:
    """Where to find the server and which database to use.

    :param host: Server host name.
    :param port: Server port.
    :param database: Name of the database handed to callers.
    """

    host: str = "localhost"
    port: int = 27017
    database: str = "local"

    @property
    def uri(self) -> str:
        return f"mongodb://{self.host}:{self.port}"


@contextmanager
def connect(
    settings: Optional[MongoSettings] = None,
    client_factory: Callable[..., MongoClient] = MongoClient,
) -> Iterator[Database]:
    settings = settings or MongoSettings()
    client = client_factory(settings.host, settings.port)
    logger.info("Opened MongoDB client for %s", settings.uri)
    try:
        yield client[settings.database]
    finally:
        client.close()
        logger.info("Closed MongoDB client for %s", settings.uri)
