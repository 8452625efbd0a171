"""
Lead document model.

Maps to the `leads` MongoDB collection. A lead is an append-only fact:
someone did something (downloaded a brochure, showed interest, was
contacted) for a property.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.base import MongoBaseModel


ACTION_DOWNLOAD_BROCHURE = "download_brochure"
ACTION_INTERESTED = "interested"
ACTION_CONTACTED = "contacted"

LEAD_ACTIONS = (ACTION_DOWNLOAD_BROCHURE, ACTION_INTERESTED, ACTION_CONTACTED)

SOURCE_WEB = "web"
SOURCE_EMAIL_OTP = "email_otp"


class LeadDoc(MongoBaseModel):
    """Document model for the `leads` collection."""

    name: str = ""
    phone: str = ""
    email: str = ""
    property_id: str
    action: str
    source: str = SOURCE_WEB
    created_at: Optional[datetime] = None
