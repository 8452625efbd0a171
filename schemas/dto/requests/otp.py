"""
Request DTOs for the brochure OTP endpoints.

SendOtpRequest    — POST /api/otp/send
VerifyOtpRequest  — POST /api/otp/verify

Every field is optional at the schema level so that missing values reach the
service and come back as a typed ``validation_error`` instead of FastAPI's
generic 422. The frontend sends ``email`` / ``propertyId``; ``recipient`` /
``subject`` are accepted as aliases.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SendOtpRequest(BaseModel):
    """Request body for POST /api/otp/send."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("email", "recipient")
    )
    property_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("propertyId", "property_id", "subject"),
    )
    # Collected by the form but not needed until verification
    phone: Optional[str] = None


class VerifyOtpRequest(BaseModel):
    """Request body for POST /api/otp/verify.

    ``name`` and ``phone`` only feed the lead record; they play no part in
    deciding whether the code is valid.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("email", "recipient")
    )
    property_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("propertyId", "property_id", "subject"),
    )
    # Numeric inputs post the code as a JSON number
    code: Optional[Union[str, int]] = None
    name: Optional[str] = None
    # Some forms post the phone as a number
    phone: Optional[Union[str, int]] = Field(
        default=None, validation_alias=AliasChoices("phone", "mobile")
    )

    @field_validator("code", mode="after")
    @classmethod
    def _code_as_text(cls, v: Optional[Union[str, int]]) -> Optional[str]:
        return None if v is None else str(v)
