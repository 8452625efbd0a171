"""
Brochure OTP endpoints.

POST /api/otp/send   — email a one-time code for a property brochure
POST /api/otp/verify — exchange the code for the brochure URL

Errors are raised as AppError subclasses and rendered by the global handler:
validation_error (400), invalid_code (400), expired_code (400),
resource_unavailable (404), dispatch_failed (502), storage_error (503).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_brochure_service
from schemas.dto.requests.otp import SendOtpRequest, VerifyOtpRequest
from schemas.dto.responses.otp import OtpSentResponse, OtpVerifiedResponse
from services.brochure_service import AttributionContext, BrochureService

router = APIRouter(prefix="/api/otp", tags=["otp"])


@router.post("/send", response_model=OtpSentResponse)
async def send_otp(
    body: SendOtpRequest,
    service: BrochureService = Depends(get_brochure_service),
) -> OtpSentResponse:
    await service.request_code(body.email, body.property_id)
    return OtpSentResponse()


@router.post("/verify", response_model=OtpVerifiedResponse)
async def verify_otp(
    body: VerifyOtpRequest,
    service: BrochureService = Depends(get_brochure_service),
) -> OtpVerifiedResponse:
    brochure_url = await service.verify_code(
        body.email,
        body.property_id,
        body.code,
        AttributionContext.from_raw(body.name, body.phone),
    )
    return OtpVerifiedResponse(resource_url=brochure_url)
