"""
OTP-gated brochure downloads.

request_code() issues a code for (email, property) and emails it.
verify_code() consumes the code, looks up the brochure, then records the
download as a lead and bumps the property's download counter.

The lead and the counter are best-effort. Each runs on its own and a
failure is reported through shared.observability without affecting the
response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from errors import DispatchError, ResourceUnavailableError, ValidationError
from infrastructure.email.protocol import EmailProvider
from repositories.lead_repository import LeadRepository
from repositories.property_repository import PropertyRepository
from schemas.models.lead import ACTION_DOWNLOAD_BROCHURE, SOURCE_EMAIL_OTP, LeadDoc
from schemas.models.otp import PURPOSE_BROCHURE_DOWNLOAD
from services.analytics_service import AnalyticsService
from services.otp_service import OtpService
from shared.logging import get_logger, hash_email
from shared.observability import report_side_effect_failure
from shared.validators import normalize_email, validate_email, validate_subject_id

log = get_logger(__name__)


@dataclass(frozen=True)
class AttributionContext:
    """Contact details attached to the lead; never used to check the code."""

    name: str = ""
    phone: str = ""

    @classmethod
    def from_raw(cls, name: Optional[str], phone: Optional[object]) -> "AttributionContext":
        phone_str = "" if phone is None else str(phone).strip()
        return cls(name=(name or "").strip(), phone=phone_str)


class BrochureService:
    def __init__(
        self,
        otp_service: OtpService,
        email_provider: EmailProvider,
        property_repo: PropertyRepository,
        lead_repo: LeadRepository,
        analytics: AnalyticsService,
    ) -> None:
        self._otp = otp_service
        self._email = email_provider
        self._properties = property_repo
        self._leads = lead_repo
        self._analytics = analytics

    @staticmethod
    def _validate_target(email: Optional[str], property_id: Optional[str]) -> tuple[str, str]:
        email = normalize_email(email)
        property_id = (property_id or "").strip()
        if not email or not property_id:
            raise ValidationError("Email & propertyId required")
        if not validate_email(email):
            raise ValidationError("Invalid email address", field="email")
        if not validate_subject_id(property_id):
            raise ValidationError("Invalid property id", field="propertyId")
        return email, property_id

    async def request_code(self, email: Optional[str], property_id: Optional[str]) -> None:
        """Issue a brochure OTP and email it.

        Raises:
            ValidationError: missing or malformed email / property id; nothing
                is stored.
            DispatchError: the email could not be sent. The stored code stays
                valid until it expires.
            StorageError: the code could not be stored.
        """
        email, property_id = self._validate_target(email, property_id)

        code, record = await self._otp.issue(email, property_id, PURPOSE_BROCHURE_DOWNLOAD)

        sent = await self._email.send_brochure_code(
            email, property_id, code, record.expires_at
        )
        if not sent:
            log.error(
                "brochure_otp_dispatch_failed",
                otp_id=str(record.id),
                recipient=hash_email(email),
                property_id=property_id,
            )
            raise DispatchError("Could not send the OTP email. Please try again.")

        log.info(
            "brochure_otp_sent",
            otp_id=str(record.id),
            recipient=hash_email(email),
            property_id=property_id,
        )

    async def verify_code(
        self,
        email: Optional[str],
        property_id: Optional[str],
        code: Optional[str],
        attribution: Optional[AttributionContext] = None,
    ) -> str:
        """Consume a brochure OTP and return the brochure URL.

        Raises:
            ValidationError: a required field is missing or malformed.
            InvalidCodeError / ExpiredCodeError: from OtpService.consume().
            ResourceUnavailableError: the code was accepted (and is now used)
                but the property has no brochure.
        """
        email, property_id = self._validate_target(email, property_id)
        if not code or not code.strip():
            raise ValidationError(
                "Missing fields: email, propertyId and code are required",
                field="code",
            )
        attribution = attribution or AttributionContext()

        await self._otp.consume(email, property_id, code, PURPOSE_BROCHURE_DOWNLOAD)

        brochure_url = await self._properties.get_brochure_url(property_id)
        if brochure_url is None:
            log.warning("brochure_unavailable", property_id=property_id)
            raise ResourceUnavailableError("Property has no brochure uploaded")

        await self._record_lead(email, property_id, attribution)
        await self._count_download(property_id)

        return brochure_url

    async def _record_lead(
        self, email: str, property_id: str, attribution: AttributionContext
    ) -> None:
        if not attribution.phone:
            log.warning(
                "brochure_lead_missing_phone",
                recipient=hash_email(email),
                property_id=property_id,
            )
        try:
            await self._leads.create(
                LeadDoc(
                    name=attribution.name,
                    phone=attribution.phone,
                    email=email,
                    property_id=property_id,
                    action=ACTION_DOWNLOAD_BROCHURE,
                    source=SOURCE_EMAIL_OTP,
                )
            )
        except Exception as e:
            report_side_effect_failure(
                "brochure_lead_record_failed", e, property_id=property_id
            )

    async def _count_download(self, property_id: str) -> None:
        try:
            await self._analytics.record_brochure_download(property_id)
        except Exception as e:
            report_side_effect_failure(
                "brochure_download_count_failed", e, property_id=property_id
            )
