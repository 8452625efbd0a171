"""
Integration test fixtures.

Builds the real routers and services on top of the in-memory fakes from
tests/conftest.py, injected through app.state in a test lifespan.
"""

from contextlib import asynccontextmanager

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from errors import register_error_handlers
from routes.lead_routes import router as lead_router
from routes.otp_routes import router as otp_router
from routes.password_routes import router as password_router
from services.analytics_service import AnalyticsService
from services.brochure_service import BrochureService
from services.lead_service import LeadService
from services.otp_service import OtpService
from services.password_reset_service import PasswordResetService


@pytest.fixture
def app(
    otp_repo,
    email_provider,
    property_repo,
    lead_repo,
    inquiry_repo,
    review_repo,
    stats_repo,
    user_repo,
):
    otp_service = OtpService(otp_repo)
    analytics = AnalyticsService(stats_repo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.analytics_service = analytics
        app.state.lead_service = LeadService(lead_repo, inquiry_repo, review_repo)
        app.state.brochure_service = BrochureService(
            otp_service, email_provider, property_repo, lead_repo, analytics
        )
        app.state.password_reset_service = PasswordResetService(
            otp_service, email_provider, user_repo
        )
        yield

    app = FastAPI(lifespan=lifespan)
    register_error_handlers(app)
    app.include_router(otp_router)
    app.include_router(password_router)
    app.include_router(lead_router)
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
