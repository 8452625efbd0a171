"""
Shared test doubles.

In-memory stand-ins for the repositories and the email provider, plus a
guard that stops pydantic-settings from reading a local .env file. The fakes keep
the same async signatures as the real classes so services can be exercised
without MongoDB or network access.
"""

import asyncio
from datetime import datetime
from typing import Optional

import pytest
from bson import ObjectId

from schemas.models.inquiry import InquiryDoc
from schemas.models.lead import LeadDoc
from schemas.models.otp import OneTimeCodeDoc
from schemas.models.review import ReviewDoc
from schemas.models.user import UserDoc
from shared.datetime_utils import utcnow


class FakeOtpRepository:
    def __init__(self):
        self.records: list[OneTimeCodeDoc] = []
        self.fail_insert = False

    async def insert(self, doc: OneTimeCodeDoc) -> OneTimeCodeDoc:
        if self.fail_insert:
            from errors import StorageError

            raise StorageError("store down")
        stored = doc.model_copy(update={"id": ObjectId()})
        self.records.append(stored)
        return stored.model_copy()

    async def find_latest_unused(self, recipient, subject, code_hash, purpose):
        matches = [
            r
            for r in self.records
            if r.recipient == recipient
            and r.subject == subject
            and r.purpose == purpose
            and r.code_hash == code_hash
            and not r.used
        ]
        result = max(matches, key=lambda r: r.created_at).model_copy() if matches else None
        # Yield so concurrent verifiers can interleave between read and write
        await asyncio.sleep(0)
        return result

    async def mark_used(self, code_id) -> bool:
        for i, r in enumerate(self.records):
            if r.id == code_id:
                if r.used:
                    return False
                self.records[i] = r.model_copy(update={"used": True, "used_at": utcnow()})
                return True
        return False

    def get(self, code_id) -> Optional[OneTimeCodeDoc]:
        return next((r for r in self.records if r.id == code_id), None)


class FakeEmailProvider:
    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.brochure_codes: list[dict] = []
        self.reset_codes: list[dict] = []

    async def send_brochure_code(
        self, email: str, property_id: str, otp_code: str, expires_at: datetime
    ) -> bool:
        self.brochure_codes.append(
            {"email": email, "property_id": property_id, "code": otp_code, "expires_at": expires_at}
        )
        return self.succeed

    async def send_password_reset_code(
        self, email: str, otp_code: str, expires_at: datetime
    ) -> bool:
        self.reset_codes.append({"email": email, "code": otp_code, "expires_at": expires_at})
        return self.succeed

    @property
    def last_brochure_code(self) -> str:
        return self.brochure_codes[-1]["code"]

    @property
    def last_reset_code(self) -> str:
        return self.reset_codes[-1]["code"]


class FakePropertyRepository:
    def __init__(self, brochures: Optional[dict] = None):
        self.brochures = brochures or {}

    async def get_brochure_url(self, property_id: str) -> Optional[str]:
        return self.brochures.get(property_id) or None


class FakeLeadRepository:
    def __init__(self):
        self.leads: list[LeadDoc] = []
        self.error: Optional[Exception] = None

    async def create(self, lead: LeadDoc) -> LeadDoc:
        if self.error is not None:
            raise self.error
        stored = lead.model_copy(update={"id": ObjectId(), "created_at": utcnow()})
        self.leads.append(stored)
        return stored


class FakeInquiryRepository:
    def __init__(self):
        self.inquiries: list[InquiryDoc] = []

    async def create(self, inquiry: InquiryDoc) -> InquiryDoc:
        stored = inquiry.model_copy(update={"id": ObjectId(), "created_at": utcnow()})
        self.inquiries.append(stored)
        return stored


class FakeReviewRepository:
    def __init__(self):
        self.reviews: list[ReviewDoc] = []

    async def create(self, review: ReviewDoc) -> ReviewDoc:
        stored = review.model_copy(update={"id": ObjectId(), "created_at": utcnow()})
        self.reviews.append(stored)
        return stored


class FakePropertyStatsRepository:
    def __init__(self):
        self.views: dict[str, int] = {}
        self.brochure_downloads: dict[str, int] = {}
        self.error: Optional[Exception] = None

    async def increment_views(self, property_id: str) -> int:
        self.views[property_id] = self.views.get(property_id, 0) + 1
        return self.views[property_id]

    async def increment_brochure_downloads(self, property_id: str) -> None:
        if self.error is not None:
            raise self.error
        self.brochure_downloads[property_id] = (
            self.brochure_downloads.get(property_id, 0) + 1
        )


class FakeUserRepository:
    def __init__(self, users: Optional[list[UserDoc]] = None):
        self.users = {u.email: u for u in (users or [])}
        self.password_updates: list[tuple] = []

    async def find_by_email(self, email: str) -> Optional[UserDoc]:
        return self.users.get(email)

    async def update_password_hash(self, user_id, password_hash: str) -> bool:
        self.password_updates.append((user_id, password_hash))
        for email, user in self.users.items():
            if user.id == user_id:
                self.users[email] = user.model_copy(update={"password_hash": password_hash})
                return True
        return False


@pytest.fixture
def otp_repo():
    return FakeOtpRepository()


@pytest.fixture
def email_provider():
    return FakeEmailProvider()


@pytest.fixture
def property_repo():
    return FakePropertyRepository(
        {"P1": "https://cdn.example.com/brochures/p1.pdf", "P2": None}
    )


@pytest.fixture
def lead_repo():
    return FakeLeadRepository()


@pytest.fixture
def inquiry_repo():
    return FakeInquiryRepository()


@pytest.fixture
def stats_repo():
    return FakePropertyStatsRepository()


@pytest.fixture
def user_repo():
    return FakeUserRepository(
        [UserDoc(_id=ObjectId(), email="owner@example.com", password_hash="old")]
    )


@pytest.fixture
def review_repo():
    return FakeReviewRepository()


@pytest.fixture(autouse=True)
def ignore_local_env_file(monkeypatch):
    """Keep a developer's .env (MONGODB_URI, ZEPTO_API_TOKEN, ...) out of settings under test."""
    import pydantic_settings.sources.providers.dotenv as settings_dotenv

    monkeypatch.setattr(settings_dotenv, "dotenv_values", lambda *a, **kw: {})
