"""
Review document model.

Maps to the `reviews` MongoDB collection. Visitors submit reviews from the
property page; they stay hidden until an admin approves them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.base import MongoBaseModel, PyObjectId


MIN_RATING = 1
MAX_RATING = 5
DEFAULT_REVIEWER_NAME = "Anonymous"


class ReviewDoc(MongoBaseModel):
    """Document model for the `reviews` collection."""

    property_id: str
    user_id: Optional[PyObjectId] = None
    user_name: str = DEFAULT_REVIEWER_NAME
    rating: int
    comment: str = ""
    approved: bool = False
    created_at: Optional[datetime] = None
