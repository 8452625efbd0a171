"""Lead, inquiry and review persistence. All three collections are append-only from this service."""

from __future__ import annotations

from pymongo import ASCENDING, DESCENDING

from repositories.base import BaseRepository, storage_guard
from schemas.models.inquiry import InquiryDoc
from schemas.models.lead import LeadDoc
from schemas.models.review import ReviewDoc
from shared.datetime_utils import utcnow


class LeadRepository(BaseRepository):
    collection_name = "leads"

    async def create(self, lead: LeadDoc) -> LeadDoc:
        if lead.created_at is None:
            lead = lead.model_copy(update={"created_at": utcnow()})
        with storage_guard("insert", self.collection_name):
            result = await self._col.insert_one(lead.to_mongo())
        return lead.model_copy(update={"id": result.inserted_id})

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index(
                [("property_id", ASCENDING), ("created_at", DESCENDING)]
            )


class InquiryRepository(BaseRepository):
    collection_name = "inquiries"

    async def create(self, inquiry: InquiryDoc) -> InquiryDoc:
        if inquiry.created_at is None:
            inquiry = inquiry.model_copy(update={"created_at": utcnow()})
        with storage_guard("insert", self.collection_name):
            result = await self._col.insert_one(inquiry.to_mongo())
        return inquiry.model_copy(update={"id": result.inserted_id})

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index(
                [("status", ASCENDING), ("created_at", DESCENDING)]
            )


class ReviewRepository(BaseRepository):
    collection_name = "reviews"

    async def create(self, review: ReviewDoc) -> ReviewDoc:
        if review.created_at is None:
            review = review.model_copy(update={"created_at": utcnow()})
        with storage_guard("insert", self.collection_name):
            result = await self._col.insert_one(review.to_mongo())
        return review.model_copy(update={"id": result.inserted_id})

    async def ensure_indexes(self) -> None:
        with storage_guard("create_index", self.collection_name):
            await self._col.create_index(
                [
                    ("property_id", ASCENDING),
                    ("approved", ASCENDING),
                    ("created_at", DESCENDING),
                ]
            )
