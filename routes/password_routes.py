"""
Password reset endpoints.

POST /api/password/send-reset   — email a reset code (same answer for unknown emails)
POST /api/password/verify-reset — check the code and set a new password
"""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends

from dependencies import get_password_reset_service
from schemas.dto.requests.password import (
    RequestPasswordResetRequest,
    ResetPasswordRequest,
)
from schemas.dto.responses.common import MessageResponse
from services.password_reset_service import (
    RESET_REQUESTED_MESSAGE,
    PasswordResetService,
)

router = APIRouter(prefix="/api/password", tags=["password"])


@router.post("/send-reset", response_model=MessageResponse)
async def send_reset(
    body: RequestPasswordResetRequest,
    background_tasks: BackgroundTasks,
    service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse:
    email = service.prepare_reset(body.email)
    background_tasks.add_task(service.send_reset_code, email)
    return MessageResponse(success=True, message=RESET_REQUESTED_MESSAGE)


@router.post("/verify-reset", response_model=MessageResponse)
async def verify_reset(
    body: ResetPasswordRequest,
    service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse:
    await service.reset_password(body.email, body.code, body.new_password)
    return MessageResponse(success=True, message="Password reset successfully")
