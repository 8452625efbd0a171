"""EmailProvider protocol. Services depend on this, not the concrete implementation."""

from datetime import datetime
from typing import Protocol


class EmailProvider(Protocol):
    async def send_brochure_code(
        self, email: str, property_id: str, otp_code: str, expires_at: datetime
    ) -> bool: ...

    async def send_password_reset_code(
        self, email: str, otp_code: str, expires_at: datetime
    ) -> bool: ...
