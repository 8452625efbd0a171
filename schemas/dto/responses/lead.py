"""
Response DTOs for leads, inquiries, reviews and view counting.

LeadResponse      — POST /api/leads
InquiryResponse   — POST /api/inquiries
ReviewResponse    — POST /api/reviews
ViewCountResponse — POST /api/views/{property_id}/view
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.models.inquiry import InquiryDoc
from schemas.models.lead import LeadDoc
from schemas.models.review import ReviewDoc


class LeadItem(BaseModel):
    """Public shape of a stored lead."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    phone: str
    email: str
    property_id: str = Field(serialization_alias="propertyId")
    action: str
    source: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @classmethod
    def from_doc(cls, doc: LeadDoc) -> "LeadItem":
        return cls(
            id=str(doc.id),
            name=doc.name,
            phone=doc.phone,
            email=doc.email,
            property_id=doc.property_id,
            action=doc.action,
            source=doc.source,
            created_at=doc.created_at,
        )


class LeadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Lead created"
    lead: LeadItem


class InquiryItem(BaseModel):
    """Public shape of a stored inquiry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    property_id: str = Field(serialization_alias="propertyId")
    user_name: str = Field(serialization_alias="userName")
    user_phone: str = Field(serialization_alias="userPhone")
    message: str
    status: str
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @classmethod
    def from_doc(cls, doc: InquiryDoc) -> "InquiryItem":
        return cls(
            id=str(doc.id),
            property_id=doc.property_id,
            user_name=doc.user_name,
            user_phone=doc.user_phone,
            message=doc.message,
            status=doc.status,
            created_at=doc.created_at,
        )


class InquiryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Inquiry created"
    inquiry: InquiryItem


class ReviewItem(BaseModel):
    """Public shape of a submitted review."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    property_id: str = Field(serialization_alias="propertyId")
    user_name: str = Field(serialization_alias="userName")
    rating: int
    comment: str
    approved: bool
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @classmethod
    def from_doc(cls, doc: ReviewDoc) -> "ReviewItem":
        return cls(
            id=str(doc.id),
            property_id=doc.property_id,
            user_name=doc.user_name,
            rating=doc.rating,
            comment=doc.comment,
            approved=doc.approved,
            created_at=doc.created_at,
        )


class ReviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Review submitted"
    review: ReviewItem


class ViewCountResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "View counted"
    views: int
