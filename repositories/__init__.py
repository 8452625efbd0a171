"""
MongoDB repositories.

build_repositories() binds every repository to its collection on one
database; ensure_indexes() is run once from the app lifespan.
"""

from dataclasses import dataclass, fields

from pymongo.asynchronous.database import AsyncDatabase

from repositories.lead_repository import (
    InquiryRepository,
    LeadRepository,
    ReviewRepository,
)
from repositories.otp_repository import OtpRepository
from repositories.property_repository import PropertyRepository, PropertyStatsRepository
from repositories.user_repository import UserRepository
from shared.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Repositories:
    otp: OtpRepository
    leads: LeadRepository
    inquiries: InquiryRepository
    reviews: ReviewRepository
    properties: PropertyRepository
    property_stats: PropertyStatsRepository
    users: UserRepository


def build_repositories(db: AsyncDatabase) -> Repositories:
    return Repositories(
        otp=OtpRepository(db[OtpRepository.collection_name]),
        leads=LeadRepository(db[LeadRepository.collection_name]),
        inquiries=InquiryRepository(db[InquiryRepository.collection_name]),
        reviews=ReviewRepository(db[ReviewRepository.collection_name]),
        properties=PropertyRepository(db[PropertyRepository.collection_name]),
        property_stats=PropertyStatsRepository(
            db[PropertyStatsRepository.collection_name]
        ),
        users=UserRepository(db[UserRepository.collection_name]),
    )


async def ensure_indexes(repos: Repositories) -> None:
    for f in fields(repos):
        await getattr(repos, f.name).ensure_indexes()
    log.info("mongo_indexes_ensured")


__all__ = [
    "Repositories",
    "build_repositories",
    "ensure_indexes",
    "InquiryRepository",
    "LeadRepository",
    "OtpRepository",
    "PropertyRepository",
    "PropertyStatsRepository",
    "ReviewRepository",
    "UserRepository",
]
