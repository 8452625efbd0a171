"""
Inquiry document model.

Maps to the `inquiries` MongoDB collection. Visitors open an inquiry about a
property; admins reply to it and eventually close it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from schemas.models.base import MongoBaseModel, PyObjectId


INQUIRY_STATUS_PENDING = "pending"
INQUIRY_STATUS_REPLIED = "replied"
INQUIRY_STATUS_CLOSED = "closed"


class InquiryReply(BaseModel):
    """Single entry in an inquiry's replies thread."""

    sender: str  # "user" or "admin"
    message: str
    created_at: Optional[datetime] = None


class InquiryDoc(MongoBaseModel):
    """Document model for the `inquiries` collection."""

    property_id: str
    user_name: str = ""
    user_phone: str = ""
    user_id: Optional[PyObjectId] = None
    message: str
    status: str = INQUIRY_STATUS_PENDING
    replies: list[InquiryReply] = []
    created_at: Optional[datetime] = None
