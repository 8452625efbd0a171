"""
One-time code document model.

Maps to the `otp-codes` MongoDB collection.

Used for both brochure-download OTPs (subject = property id) and password
reset OTPs (subject = None). code_hash stores SHA-256(otp_code); the plain
code is never stored. A record moves from used=False to used=True exactly
once; expiry is logical, so expired records are never deleted here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.base import MongoBaseModel


PURPOSE_BROCHURE_DOWNLOAD = "brochure_download"
PURPOSE_PASSWORD_RESET = "password_reset"


class OneTimeCodeDoc(MongoBaseModel):
    """Document model for the `otp-codes` collection."""

    recipient: str
    subject: Optional[str] = None
    purpose: str = PURPOSE_BROCHURE_DOWNLOAD
    code_hash: str
    created_at: datetime
    expires_at: datetime
    used: bool = False
    used_at: Optional[datetime] = None
