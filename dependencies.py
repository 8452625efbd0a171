"""
FastAPI dependency providers.

Services are built once in the app lifespan and stored on app.state; these
providers hand them to route handlers via Depends(), which also lets tests
swap in fakes through app.state.
"""

from __future__ import annotations

from fastapi import Request

from config import AppSettings
from services.analytics_service import AnalyticsService
from services.brochure_service import BrochureService
from services.lead_service import LeadService
from services.password_reset_service import PasswordResetService


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


async def get_db(request: Request):
    """Return the async MongoDB database from app.state."""
    return request.app.state.db


def get_brochure_service(request: Request) -> BrochureService:
    return request.app.state.brochure_service


def get_password_reset_service(request: Request) -> PasswordResetService:
    return request.app.state.password_reset_service


def get_lead_service(request: Request) -> LeadService:
    return request.app.state.lead_service


def get_analytics_service(request: Request) -> AnalyticsService:
    return request.app.state.analytics_service
