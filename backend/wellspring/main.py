"""Wellspring API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WellspringError → per-endpoint JSON bodies
    - CORS configured from settings (not hardcoded)
    - Store, gateway and settings built once per app and held on app.state

Design Decisions:
    - create_app() factory with injectable store/gateway/settings so tests
      build isolated apps; module-level `app` serves uvicorn
    - Lifespan over @app.on_event: logging setup and secret checks on startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wellspring.api.error_handlers import register_error_handlers
from wellspring.api.routes import (
    admin, catalog, donations, health_content, status, volunteers,
)
from wellspring.config import Settings, get_settings, validate_settings
from wellspring.core.store import MemoryStore
from wellspring.infrastructure.observability import setup_logging
from wellspring.infrastructure.payment_gateway import (
    PaymentGateway, StripePaymentGateway,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    for name in validate_settings(settings):
        logger.warning(f"Insecure development default in use: {name}")
    logger.info("Wellspring API started")
    yield
    logger.info("Wellspring API shutting down")


def create_app(
    settings: Settings | None = None,
    store: MemoryStore | None = None,
    gateway: PaymentGateway | None = None,
) -> FastAPI:
    """Build the API with its own store, gateway and settings."""
    settings = settings or get_settings()
    app = FastAPI(title="Wellspring API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else MemoryStore()
    app.state.gateway = gateway or StripePaymentGateway(
        settings.stripe_secret_key,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(status.router)
    app.include_router(admin.router)
    app.include_router(catalog.router)
    app.include_router(volunteers.router)
    app.include_router(donations.router)
    app.include_router(health_content.router)

    register_error_handlers(app)
    return app


app = create_app()
