"""
Request DTOs for the password reset endpoints.

RequestPasswordResetRequest — POST /api/password/send-reset
ResetPasswordRequest        — POST /api/password/verify-reset
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RequestPasswordResetRequest(BaseModel):
    """Request body for POST /api/password/send-reset."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None


class ResetPasswordRequest(BaseModel):
    """Request body for POST /api/password/verify-reset.

    ``code`` is the 6-digit OTP sent to the user's email address.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    code: Optional[Union[str, int]] = None
    new_password: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("newPassword", "new_password")
    )

    @field_validator("code", mode="after")
    @classmethod
    def _code_as_text(cls, v: Optional[Union[str, int]]) -> Optional[str]:
        return None if v is None else str(v)
