"""Unit tests for LeadService and AnalyticsService."""

import pytest

from errors import ValidationError
from services.analytics_service import AnalyticsService
from services.lead_service import MAX_MESSAGE_LENGTH, LeadService

PROPERTY_ID = "665f1c2ab4d3e8a9c0f12345"


@pytest.fixture
def service(lead_repo, inquiry_repo, review_repo):
    return LeadService(lead_repo, inquiry_repo, review_repo)


class TestCreateLead:
    async def test_creates_lead_with_defaults(self, service, lead_repo):
        lead = await service.create_lead(
            phone="+91 98765 43210", property_id=PROPERTY_ID, action="interested"
        )
        assert lead.id is not None
        assert lead.source == "web"
        assert lead.name == ""
        assert lead_repo.leads == [lead]

    async def test_download_lead_does_not_touch_counters(
        self, service, stats_repo
    ):
        await service.create_lead(
            phone="9876543210", property_id=PROPERTY_ID, action="download_brochure"
        )
        assert stats_repo.brochure_downloads == {}

    async def test_email_normalised(self, service):
        lead = await service.create_lead(
            phone="9876543210",
            property_id=PROPERTY_ID,
            action="contacted",
            email=" Buyer@Example.COM ",
        )
        assert lead.email == "buyer@example.com"

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"phone": None, "property_id": PROPERTY_ID, "action": "interested"}, "phone"),
            ({"phone": "abc", "property_id": PROPERTY_ID, "action": "interested"}, "phone"),
            ({"phone": "9876543210", "property_id": None, "action": "interested"}, "propertyId"),
            ({"phone": "9876543210", "property_id": PROPERTY_ID, "action": None}, "action"),
            ({"phone": "9876543210", "property_id": PROPERTY_ID, "action": "bought"}, "action"),
            (
                {"phone": "9876543210", "property_id": PROPERTY_ID, "action": "interested", "email": "x"},
                "email",
            ),
        ],
        ids=["no_phone", "bad_phone", "no_property", "no_action", "bad_action", "bad_email"],
    )
    async def test_validation(self, service, lead_repo, kwargs, field):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_lead(**kwargs)
        assert exc_info.value.field == field
        assert lead_repo.leads == []


class TestCreateInquiry:
    async def test_creates_pending_inquiry(self, service, inquiry_repo):
        inquiry = await service.create_inquiry(
            property_id=PROPERTY_ID, message="Is parking included?", user_name="Meera"
        )
        assert inquiry.status == "pending"
        assert inquiry.user_name == "Meera"
        assert inquiry.replies == []
        assert len(inquiry_repo.inquiries) == 1

    async def test_message_required(self, service):
        with pytest.raises(ValidationError):
            await service.create_inquiry(property_id=PROPERTY_ID, message="   ")

    async def test_message_length_capped(self, service):
        with pytest.raises(ValidationError):
            await service.create_inquiry(
                property_id=PROPERTY_ID, message="x" * (MAX_MESSAGE_LENGTH + 1)
            )


class TestCreateReview:
    async def test_review_awaits_moderation(self, service, review_repo):
        review = await service.create_review(
            property_id=PROPERTY_ID, rating=5, comment=" Great location "
        )
        assert review.approved is False
        assert review.user_name == "Anonymous"
        assert review.comment == "Great location"
        assert review.id is not None
        assert review_repo.reviews == [review]

    async def test_reviewer_name_kept(self, service):
        review = await service.create_review(
            property_id=PROPERTY_ID, rating=4, user_name="Meera"
        )
        assert review.user_name == "Meera"
        assert review.comment == ""

    @pytest.mark.parametrize("rating", [1, 5])
    async def test_rating_bounds_accepted(self, service, rating):
        review = await service.create_review(property_id=PROPERTY_ID, rating=rating)
        assert review.rating == rating

    @pytest.mark.parametrize("rating", [None, 0, 6, -1, True])
    async def test_rating_out_of_range(self, service, review_repo, rating):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_review(property_id=PROPERTY_ID, rating=rating)
        assert exc_info.value.field == "rating"
        assert review_repo.reviews == []

    @pytest.mark.parametrize("property_id", [None, "  ", "{$ne: 1}"])
    async def test_property_id_required(self, service, review_repo, property_id):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_review(property_id=property_id, rating=5)
        assert exc_info.value.field == "propertyId"
        assert review_repo.reviews == []

    async def test_comment_length_capped(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_review(
                property_id=PROPERTY_ID, rating=3, comment="x" * (MAX_MESSAGE_LENGTH + 1)
            )
        assert exc_info.value.field == "comment"


class TestAnalyticsService:
    async def test_record_view_increments(self, stats_repo):
        analytics = AnalyticsService(stats_repo)
        assert await analytics.record_view(PROPERTY_ID) == 1
        assert await analytics.record_view(PROPERTY_ID) == 2

    async def test_record_view_rejects_bad_id(self, stats_repo):
        with pytest.raises(ValidationError):
            await AnalyticsService(stats_repo).record_view("bad id!")

    async def test_record_brochure_download(self, stats_repo):
        await AnalyticsService(stats_repo).record_brochure_download(PROPERTY_ID)
        assert stats_repo.brochure_downloads == {PROPERTY_ID: 1}
