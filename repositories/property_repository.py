"""
Property lookups and per-property counters.

PropertyRepository is read-only: listings are managed by the admin CRUD
tooling. PropertyStatsRepository owns the `views` collection and only ever
increments, using upserts so the first event for a property creates its row.
"""

from __future__ import annotations

from typing import Optional

from pymongo import ASCENDING, ReturnDocument

from repositories.base import BaseRepository, storage_guard
from schemas.models.base import as_document_id
from schemas.models.property import PropertyDoc
from shared.datetime_utils import utcnow


class PropertyRepository(BaseRepository):
    collection_name = "properties"

    async def get_by_id(self, property_id: str) -> Optional[PropertyDoc]:
        with storage_guard("find_one", self.collection_name):
            raw = await self._col.find_one(
                {"_id": as_document_id(property_id)},
                {"title": 1, "city": 1, "brochure_url": 1, "status": 1},
            )
        return PropertyDoc.from_mongo(raw)

    async def get_brochure_url(self, property_id: str) -> Optional[str]:
        """Return the brochure URL for a property, or None if it has none (or doesn't exist)."""
        prop = await self.get_by_id(property_id)
        if prop is None or not prop.brochure_url:
            return None
        return prop.brochure_url


class PropertyStatsRepository(BaseRepository):
    collection_name = "views"

    async def _increment(self, property_id: str, field: str) -> dict:
        with storage_guard("increment", self.collection_name):
            return await self._col.find_one_and_update(
                {"property_id": property_id},
                {"$inc": {field: 1}, "$set": {"updated_at": utcnow()}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )

    async def increment_views(self, property_id: str) -> int:
        doc = await self._increment(property_id, "views")
        return int(doc.get("views", 0))

    async def increment_brochure_downloads(self, property_id: str) -> None:
        await self._increment(property_id, "brochure_downloads")

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index([("property_id", ASCENDING)], unique=True)
