"""MongoDB adapter holding the process-wide document-store connection.
"""

from typing import Optional
import logging
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import PersistenceError

logger = logging.getLogger("pantrychef.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def connect(uri: str, db_name: str = "pantrychef") -> Optional[Database]:
    """Open the shared client and check it with a ping.

    A failed ping leaves the adapter disconnected; requests then fail with
    PersistenceError instead of the process refusing to start.
    """
    global _client, _db
    try:
        _client = MongoClient(uri)
        _db = _client[db_name]
        _client.admin.command("ping")
        logger.info("Connected to MongoDB (database: %s)", db_name)
    except PyMongoError as exc:
        if _client is not None:
            _client.close()
        _client = None
        _db = None
        logger.warning("Could not initialize MongoDB client: %s", exc)
    return _db


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    finally:
        _client = None
        _db = None


def get_db() -> Database:
    """Return the connected database.

    Raises:
        PersistenceError: connect() has not succeeded
    """
    if _db is None:
        raise PersistenceError("MongoDB is not connected")
    return _db
