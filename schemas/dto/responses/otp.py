"""
Response DTOs for the brochure OTP endpoints.

OtpSentResponse     — POST /api/otp/send
OtpVerifiedResponse — POST /api/otp/verify
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OtpSentResponse(BaseModel):
    """Acknowledgement only; the code itself travels by email."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["sent"] = "sent"
    message: str = "OTP sent to email"


class OtpVerifiedResponse(BaseModel):
    """Successful verification with the brochure location."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["verified"] = "verified"
    message: str = "OTP verified"
    resource_url: str = Field(serialization_alias="resourceUrl")
