"""User lookups for the password reset flow."""

from __future__ import annotations

from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING

from repositories.base import BaseRepository, storage_guard
from schemas.models.user import UserDoc
from shared.datetime_utils import utcnow


class UserRepository(BaseRepository):
    collection_name = "users"

    async def find_by_email(self, email: str) -> Optional[UserDoc]:
        with storage_guard("find_one", self.collection_name):
            raw = await self._col.find_one({"email": email})
        return UserDoc.from_mongo(raw)

    async def update_password_hash(self, user_id: ObjectId, password_hash: str) -> bool:
        with storage_guard("update_one", self.collection_name):
            result = await self._col.update_one(
                {"_id": user_id},
                {"$set": {"password_hash": password_hash, "updated_at": utcnow()}},
            )
        return result.matched_count == 1

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index([("email", ASCENDING)], unique=True)
