"""
Lead capture, visitor inquiries and reviews.

Leads created here come from the property page ("interested", "contacted",
or a download reported by the frontend). Counters are not touched: a
verified brochure download is counted once, by BrochureService.
"""

from __future__ import annotations

from typing import Optional

from errors import ValidationError
from repositories.lead_repository import (
    InquiryRepository,
    LeadRepository,
    ReviewRepository,
)
from schemas.models.inquiry import InquiryDoc
from schemas.models.lead import LEAD_ACTIONS, SOURCE_WEB, LeadDoc
from schemas.models.review import (
    DEFAULT_REVIEWER_NAME,
    MAX_RATING,
    MIN_RATING,
    ReviewDoc,
)
from shared.logging import get_logger
from shared.validators import (
    normalize_email,
    validate_email,
    validate_phone,
    validate_subject_id,
)

log = get_logger(__name__)

MAX_MESSAGE_LENGTH = 2000


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _require_property_id(property_id: Optional[str]) -> str:
    property_id = _clean(property_id)
    if not property_id:
        raise ValidationError("propertyId is required", field="propertyId")
    if not validate_subject_id(property_id):
        raise ValidationError("Invalid property id", field="propertyId")
    return property_id


class LeadService:
    def __init__(
        self,
        lead_repo: LeadRepository,
        inquiry_repo: InquiryRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._leads = lead_repo
        self._inquiries = inquiry_repo
        self._reviews = review_repo

    async def create_lead(
        self,
        *,
        phone: Optional[str],
        property_id: Optional[str],
        action: Optional[str],
        name: Optional[str] = None,
        email: Optional[str] = None,
        source: Optional[str] = None,
    ) -> LeadDoc:
        phone = _clean(phone)
        action = _clean(action)
        if not phone:
            raise ValidationError("phone is required", field="phone")
        if not validate_phone(phone):
            raise ValidationError("Invalid phone number", field="phone")
        property_id = _require_property_id(property_id)
        if not action:
            raise ValidationError("action is required", field="action")
        if action not in LEAD_ACTIONS:
            raise ValidationError(
                "Unknown action",
                field="action",
                details={"allowed": list(LEAD_ACTIONS)},
            )

        email = normalize_email(email)
        if email and not validate_email(email):
            raise ValidationError("Invalid email address", field="email")

        lead = await self._leads.create(
            LeadDoc(
                name=_clean(name),
                phone=phone,
                email=email,
                property_id=property_id,
                action=action,
                source=_clean(source) or SOURCE_WEB,
            )
        )
        log.info(
            "lead_created",
            lead_id=str(lead.id),
            property_id=property_id,
            action=action,
            source=lead.source,
        )
        return lead

    async def create_inquiry(
        self,
        *,
        property_id: Optional[str],
        message: Optional[str],
        user_name: Optional[str] = None,
        user_phone: Optional[str] = None,
    ) -> InquiryDoc:
        property_id = _require_property_id(property_id)
        message = _clean(message)
        if not message:
            raise ValidationError("message is required", field="message")
        if len(message) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"message must be at most {MAX_MESSAGE_LENGTH} characters",
                field="message",
            )
        user_phone = _clean(user_phone)
        if user_phone and not validate_phone(user_phone):
            raise ValidationError("Invalid phone number", field="userPhone")

        inquiry = await self._inquiries.create(
            InquiryDoc(
                property_id=property_id,
                user_name=_clean(user_name),
                user_phone=user_phone,
                message=message,
            )
        )
        log.info("inquiry_created", inquiry_id=str(inquiry.id), property_id=property_id)
        return inquiry

    async def create_review(
        self,
        *,
        property_id: Optional[str],
        rating: Optional[int],
        comment: Optional[str] = None,
        user_name: Optional[str] = None,
    ) -> ReviewDoc:
        """Store a review for moderation; it is never published on creation."""
        property_id = _require_property_id(property_id)
        if rating is None:
            raise ValidationError("rating is required", field="rating")
        if isinstance(rating, bool) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}",
                field="rating",
            )
        comment = _clean(comment)
        if len(comment) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"comment must be at most {MAX_MESSAGE_LENGTH} characters",
                field="comment",
            )

        review = await self._reviews.create(
            ReviewDoc(
                property_id=property_id,
                user_name=_clean(user_name) or DEFAULT_REVIEWER_NAME,
                rating=rating,
                comment=comment,
            )
        )
        log.info(
            "review_submitted",
            review_id=str(review.id),
            property_id=property_id,
            rating=rating,
        )
        return review
