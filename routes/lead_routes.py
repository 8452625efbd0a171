"""
Public lead-capture endpoints.

POST /api/leads                   — record a lead from a property page
POST /api/inquiries               — open an inquiry about a property
POST /api/reviews                 — submit a review for moderation
POST /api/views/{property_id}/view — count a property page view
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_analytics_service, get_lead_service
from schemas.dto.requests.lead import (
    CreateInquiryRequest,
    CreateLeadRequest,
    CreateReviewRequest,
)
from schemas.dto.responses.lead import (
    InquiryItem,
    InquiryResponse,
    LeadItem,
    LeadResponse,
    ReviewItem,
    ReviewResponse,
    ViewCountResponse,
)
from services.analytics_service import AnalyticsService
from services.lead_service import LeadService

router = APIRouter(prefix="/api", tags=["leads"])


@router.post("/leads", response_model=LeadResponse, status_code=201)
async def create_lead(
    body: CreateLeadRequest,
    service: LeadService = Depends(get_lead_service),
) -> LeadResponse:
    lead = await service.create_lead(
        phone=body.phone,
        property_id=body.property_id,
        action=body.action,
        name=body.name,
        email=body.email,
        source=body.source,
    )
    return LeadResponse(lead=LeadItem.from_doc(lead))


@router.post("/inquiries", response_model=InquiryResponse, status_code=201)
async def create_inquiry(
    body: CreateInquiryRequest,
    service: LeadService = Depends(get_lead_service),
) -> InquiryResponse:
    inquiry = await service.create_inquiry(
        property_id=body.property_id,
        message=body.message,
        user_name=body.user_name,
        user_phone=body.user_phone,
    )
    return InquiryResponse(inquiry=InquiryItem.from_doc(inquiry))


@router.post("/reviews", response_model=ReviewResponse, status_code=201)
async def create_review(
    body: CreateReviewRequest,
    service: LeadService = Depends(get_lead_service),
) -> ReviewResponse:
    review = await service.create_review(
        property_id=body.property_id,
        rating=body.rating,
        comment=body.comment,
        user_name=body.user_name,
    )
    return ReviewResponse(review=ReviewItem.from_doc(review))


@router.post("/views/{property_id}/view", response_model=ViewCountResponse)
async def record_view(
    property_id: str,
    service: AnalyticsService = Depends(get_analytics_service),
) -> ViewCountResponse:
    views = await service.record_view(property_id)
    return ViewCountResponse(views=views)
