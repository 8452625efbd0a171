"""
User document model.

Maps to the `users` MongoDB collection. Registration and login live in the
account service; the password-reset flow here only looks users up by email
and replaces password_hash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from schemas.models.base import MongoBaseModel


class UserDoc(MongoBaseModel):
    """Document model for the `users` collection."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    password_hash: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
