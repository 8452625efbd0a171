"""
Request DTOs for lead capture, inquiries and reviews.

CreateLeadRequest    — POST /api/leads
CreateInquiryRequest — POST /api/inquiries
CreateReviewRequest  — POST /api/reviews
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CreateLeadRequest(BaseModel):
    """Request body for POST /api/leads."""

    model_config = ConfigDict(populate_by_name=True)

    phone: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    property_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("propertyId", "property_id")
    )
    action: Optional[str] = None
    source: Optional[str] = None


class CreateInquiryRequest(BaseModel):
    """Request body for POST /api/inquiries."""

    model_config = ConfigDict(populate_by_name=True)

    property_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("propertyId", "property_id")
    )
    message: Optional[str] = None
    user_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("userName", "user_name")
    )
    user_phone: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("userPhone", "user_phone")
    )


class CreateReviewRequest(BaseModel):
    """Request body for POST /api/reviews.

    ``rating`` is range-checked by the service so an out-of-range value comes
    back as a ``validation_error`` on the ``rating`` field.
    """

    model_config = ConfigDict(populate_by_name=True)

    property_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("propertyId", "property_id")
    )
    rating: Optional[int] = None
    comment: Optional[str] = None
    user_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("userName", "user_name")
    )
