"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.asynchronous.mongo_client import AsyncMongoClient

from config import AppSettings
from errors import register_error_handlers
from infrastructure.email.zeptomail import ZeptoMailProvider
from infrastructure.http_client import HttpClient
from repositories import build_repositories, ensure_indexes
from routes.health_routes import router as health_router
from routes.lead_routes import router as lead_router
from routes.otp_routes import router as otp_router
from routes.password_routes import router as password_router
from services.analytics_service import AnalyticsService
from services.brochure_service import BrochureService
from services.lead_service import LeadService
from services.otp_service import OtpService
from services.password_reset_service import PasswordResetService
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging, production=settings.is_production)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            environment=settings.env,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        mongo_client: AsyncMongoClient = AsyncMongoClient(
            settings.db.mongodb_uri, tz_aware=True
        )
        db = mongo_client[settings.db.db_name]
        app.state.mongo_client = mongo_client
        app.state.db = db
        app.state.settings = settings

        repos = build_repositories(db)
        await ensure_indexes(repos)

        http_client = HttpClient()
        email_provider = ZeptoMailProvider(
            settings.email,
            http_client,
            app_name=settings.app_name,
            app_url=settings.app_url,
            code_ttl_minutes=settings.otp.ttl_minutes,
        )
        otp_service = OtpService(
            repos.otp,
            ttl_seconds=settings.otp.otp_ttl_seconds,
            code_length=settings.otp.otp_length,
        )
        analytics = AnalyticsService(repos.property_stats)

        app.state.analytics_service = analytics
        app.state.lead_service = LeadService(
            repos.leads, repos.inquiries, repos.reviews
        )
        app.state.brochure_service = BrochureService(
            otp_service, email_provider, repos.properties, repos.leads, analytics
        )
        app.state.password_reset_service = PasswordResetService(
            otp_service, email_provider, repos.users
        )
        log.info("app_started", env=settings.env, db_name=settings.db.db_name)

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await http_client.aclose()
        await mongo_client.close()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(otp_router)
    app.include_router(password_router)
    app.include_router(lead_router)

    return app
