"""
Persistence for one-time codes.

The only writer of the `otp-codes` collection. mark_used() is a
compare-and-swap on ``used: False`` so two verifiers racing on the same
record cannot both consume it.
"""

from __future__ import annotations

from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from repositories.base import BaseRepository, storage_guard
from schemas.models.otp import OneTimeCodeDoc
from shared.datetime_utils import utcnow


class OtpRepository(BaseRepository):
    collection_name = "otp-codes"

    async def insert(self, doc: OneTimeCodeDoc) -> OneTimeCodeDoc:
        """Persist a new code and return it with its generated id."""
        with storage_guard("insert", self.collection_name):
            result = await self._col.insert_one(doc.to_mongo())
        return doc.model_copy(update={"id": result.inserted_id})

    async def find_latest_unused(
        self,
        recipient: str,
        subject: Optional[str],
        code_hash: str,
        purpose: str,
    ) -> Optional[OneTimeCodeDoc]:
        """Return the most recently created unused record matching the code, if any.

        Expiry is not filtered here; the caller decides between "invalid"
        and "expired".
        """
        query = {
            "recipient": recipient,
            "subject": subject,
            "purpose": purpose,
            "code_hash": code_hash,
            "used": False,
        }
        with storage_guard("find_latest_unused", self.collection_name):
            raw = await self._col.find_one(query, sort=[("created_at", DESCENDING)])
        return OneTimeCodeDoc.from_mongo(raw)

    async def mark_used(self, code_id: ObjectId) -> bool:
        """Flip ``used`` from False to True.

        Returns:
            True if this call consumed the code, False if it was already used
            (a concurrent verification got there first).
        """
        with storage_guard("mark_used", self.collection_name):
            result = await self._col.update_one(
                {"_id": code_id, "used": False},
                {"$set": {"used": True, "used_at": utcnow()}},
            )
        return result.modified_count == 1

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index(
                [
                    ("recipient", ASCENDING),
                    ("subject", ASCENDING),
                    ("purpose", ASCENDING),
                    ("used", ASCENDING),
                    ("created_at", DESCENDING),
                ],
                name="otp_lookup",
            )
