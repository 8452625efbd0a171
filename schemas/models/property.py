"""
Property and per-property analytics document models.

PropertyDoc maps to the `properties` collection, which is owned by the admin
CRUD tooling; this service only reads the fields it needs.

PropertyStatsDoc maps to the `views` collection: one document per property,
created on first increment via upsert.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from schemas.models.base import MongoBaseModel


class PropertyDoc(MongoBaseModel):
    """Read-side view of a `properties` document."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    title: str = ""
    city: Optional[str] = None
    brochure_url: Optional[str] = None
    status: str = "Available"


class PropertyStatsDoc(MongoBaseModel):
    """Document model for the `views` collection."""

    property_id: str
    views: int = 0
    brochure_downloads: int = 0
    updated_at: Optional[datetime] = None
