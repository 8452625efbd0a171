"""Per-property counters: page views and brochure downloads."""

from __future__ import annotations

from errors import ValidationError
from repositories.property_repository import PropertyStatsRepository
from shared.logging import get_logger
from shared.validators import validate_subject_id

log = get_logger(__name__)


class AnalyticsService:
    def __init__(self, stats_repo: PropertyStatsRepository) -> None:
        self._stats = stats_repo

    async def record_view(self, property_id: str) -> int:
        """Count one page view and return the new total."""
        property_id = (property_id or "").strip()
        if not property_id or not validate_subject_id(property_id):
            raise ValidationError("Invalid property id", field="propertyId")
        return await self._stats.increment_views(property_id)

    async def record_brochure_download(self, property_id: str) -> None:
        """Count one verified brochure download.

        Only the OTP verification path calls this, once per consumed code.
        """
        await self._stats.increment_brochure_downloads(property_id)
        log.debug("brochure_download_counted", property_id=property_id)
