"""
Password reset by emailed code.

The request step only validates the address. Looking up the account and
sending the code happen in a background task after the response is written,
so neither the answer nor its latency depends on whether the address is
registered.
"""

from __future__ import annotations

from typing import Optional

from errors import NotFoundError, ValidationError
from infrastructure.email.protocol import EmailProvider
from repositories.user_repository import UserRepository
from schemas.models.otp import PURPOSE_PASSWORD_RESET
from services.otp_service import OtpService
from shared.crypto import hash_password
from shared.logging import get_logger, hash_email
from shared.observability import report_side_effect_failure
from shared.validators import normalize_email, validate_email, validate_password

log = get_logger(__name__)

RESET_REQUESTED_MESSAGE = "If the email exists, a reset code has been sent"


class PasswordResetService:
    def __init__(
        self,
        otp_service: OtpService,
        email_provider: EmailProvider,
        user_repo: UserRepository,
    ) -> None:
        self._otp = otp_service
        self._email = email_provider
        self._users = user_repo

    def prepare_reset(self, email: Optional[str]) -> str:
        """Validate and normalise *email*; no lookup happens here."""
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email required", field="email")
        if not validate_email(email):
            raise ValidationError("Invalid email address", field="email")
        return email

    async def send_reset_code(self, email: str) -> None:
        """Look the user up and email a reset code.

        Runs as a background task after the response is sent, so every
        failure is reported here and nothing is raised.
        """
        try:
            user = await self._users.find_by_email(email)
            if user is None:
                log.info("password_reset_unknown_email", recipient=hash_email(email))
                return

            code, record = await self._otp.issue(email, None, PURPOSE_PASSWORD_RESET)
            sent = await self._email.send_password_reset_code(email, code, record.expires_at)
            if sent:
                log.info("password_reset_code_sent", otp_id=str(record.id), user_id=str(user.id))
            else:
                log.error(
                    "password_reset_dispatch_failed",
                    otp_id=str(record.id),
                    user_id=str(user.id),
                )
        except Exception as e:
            report_side_effect_failure(
                "password_reset_request_failed", e, recipient=hash_email(email)
            )

    async def reset_password(
        self,
        email: Optional[str],
        code: Optional[str],
        new_password: Optional[str],
    ) -> None:
        email = normalize_email(email)
        if not email or not code or not new_password:
            raise ValidationError("Missing fields")
        is_valid, missing = validate_password(new_password)
        if not is_valid:
            raise ValidationError(
                "Password does not meet requirements",
                field="newPassword",
                details={"missing_requirements": missing},
            )

        await self._otp.consume(email, None, code, PURPOSE_PASSWORD_RESET)

        user = await self._users.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")

        await self._users.update_password_hash(user.id, hash_password(new_password))
        log.info("password_reset_completed", user_id=str(user.id))
