"""
One-time code issuing and consumption.

OtpService knows nothing about brochures or passwords: it issues codes for a
(recipient, subject, purpose) triple and consumes them. The flow services
(BrochureService, PasswordResetService) own validation of their inputs,
dispatch and whatever happens after a code is accepted.

A code is consumed at most once. The lookup may race with a concurrent
verifier, but OtpRepository.mark_used() only succeeds for the caller that
flips ``used`` from False to True; everyone else gets InvalidCodeError.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from errors import ExpiredCodeError, InvalidCodeError
from repositories.otp_repository import OtpRepository
from schemas.models.otp import OneTimeCodeDoc
from shared.crypto import hash_token
from shared.datetime_utils import is_expired, utcnow
from shared.generators import generate_otp_code
from shared.logging import get_logger, hash_email
from shared.validators import validate_otp_format

log = get_logger(__name__)

OTP_EXPIRY_SECONDS = 600  # 10 minutes
OTP_LENGTH = 6


class OtpService:
    def __init__(
        self,
        otp_repo: OtpRepository,
        ttl_seconds: int = OTP_EXPIRY_SECONDS,
        code_length: int = OTP_LENGTH,
    ) -> None:
        self._repo = otp_repo
        self._ttl = timedelta(seconds=ttl_seconds)
        self._length = code_length

    @property
    def code_length(self) -> int:
        return self._length

    async def issue(
        self, recipient: str, subject: Optional[str], purpose: str
    ) -> tuple[str, OneTimeCodeDoc]:
        """Generate and store a new code.

        Returns:
            (plain_code, stored_record). The plain code is only ever handed
            to the notifier; the record holds its hash.
        """
        code = generate_otp_code(self._length)
        now = utcnow()
        doc = OneTimeCodeDoc(
            recipient=recipient,
            subject=subject,
            purpose=purpose,
            code_hash=hash_token(code),
            created_at=now,
            expires_at=now + self._ttl,
        )
        stored = await self._repo.insert(doc)
        log.info(
            "otp_issued",
            otp_id=str(stored.id),
            recipient=hash_email(recipient),
            subject=subject,
            purpose=purpose,
        )
        return code, stored

    async def consume(
        self, recipient: str, subject: Optional[str], code: str, purpose: str
    ) -> OneTimeCodeDoc:
        """Accept *code* for (recipient, subject) and mark it used.

        Raises:
            InvalidCodeError: no unused code matches, or another request
                consumed it first.
            ExpiredCodeError: the matching code is past its expiry. The
                record is left as it is.
        """
        code = code.strip()
        if not validate_otp_format(code, self._length):
            self._log_failure(recipient, subject, purpose, "malformed")
            raise InvalidCodeError("Invalid OTP")

        record = await self._repo.find_latest_unused(
            recipient, subject, hash_token(code), purpose
        )
        if record is None:
            self._log_failure(recipient, subject, purpose, "not_found")
            raise InvalidCodeError("Invalid OTP")

        if is_expired(record.expires_at):
            self._log_failure(recipient, subject, purpose, "expired", otp_id=str(record.id))
            raise ExpiredCodeError("OTP expired")

        if not await self._repo.mark_used(record.id):
            self._log_failure(recipient, subject, purpose, "already_used", otp_id=str(record.id))
            raise InvalidCodeError("Invalid OTP")

        log.info(
            "otp_verified",
            otp_id=str(record.id),
            recipient=hash_email(recipient),
            subject=subject,
            purpose=purpose,
        )
        return record.model_copy(update={"used": True})

    @staticmethod
    def _log_failure(
        recipient: str, subject: Optional[str], purpose: str, reason: str, **extra
    ) -> None:
        log.warning(
            "otp_verification_failed",
            recipient=hash_email(recipient),
            subject=subject,
            purpose=purpose,
            reason=reason,
            **extra,
        )
