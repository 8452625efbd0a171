"""
Shared plumbing for the MongoDB repositories.

Every repository wraps one AsyncCollection. Driver failures are translated
into StorageError at this boundary so services never import pymongo.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from errors import StorageError
from shared.logging import get_logger

log = get_logger(__name__)


@contextmanager
def storage_guard(operation: str, collection: str) -> Iterator[None]:
    """Re-raise any PyMongoError raised inside the block as StorageError."""
    try:
        yield
    except PyMongoError as e:
        log.error(
            "mongo_operation_failed",
            operation=operation,
            collection=collection,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StorageError(
            "The data store is temporarily unavailable. Please try again."
        ) from e


class BaseRepository:
    collection_name: str = ""

    def __init__(self, collection: AsyncCollection) -> None:
        self._col = collection

    async def ensure_indexes(self) -> None:
        """Create the indexes this repository relies on; no-op by default."""
