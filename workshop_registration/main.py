"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from workshop_registration.adapters.roster_adapter import RosterAdapter
from workshop_registration.adapters.sheets_adapter import SheetsAdapter
from workshop_registration.adapters.webhook_adapter import WebhookAdapter
from workshop_registration.api.router import api_router
from workshop_registration.config import settings
from workshop_registration.registration.notifier import NotificationDispatcher
from workshop_registration.registration.service import RegistrationService
from workshop_registration.workshops.registry import WorkshopRegistry

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Load the workshop registry
    - Create Google Sheets and webhook adapters
    - Wire the registration service

    Shutdown:
    - Wait for in-flight webhook deliveries
    """
    logger.info("Starting Workshop Registration...")

    registry = WorkshopRegistry.from_settings(settings)
    app.state.workshop_registry = registry
    logger.info(f"Workshop registry loaded: {len(registry.workshops)} workshop(s)")

    roster_adapter = RosterAdapter(settings.google_sheets_credentials)
    sheets_adapter = SheetsAdapter(settings.google_sheets_credentials)
    webhook_adapter = WebhookAdapter(
        settings.webhook_user,
        settings.webhook_pass,
        timeout=settings.webhook_timeout_seconds,
        retry_attempts=settings.webhook_retry_attempts,
    )
    app.state.roster_adapter = roster_adapter
    app.state.sheets_adapter = sheets_adapter
    app.state.webhook_adapter = webhook_adapter

    notifier = NotificationDispatcher(webhook_adapter)
    app.state.notifier = notifier

    app.state.registration_service = RegistrationService(
        registry=registry,
        roster_source=roster_adapter,
        registration_sink=sheets_adapter,
        notifier=notifier,
    )
    logger.info("RegistrationService initialized")

    yield

    # Shutdown
    logger.info("Shutting down Workshop Registration...")
    await notifier.drain()
    logger.info("Webhook deliveries drained")


app = FastAPI(
    title=settings.app_name,
    description="Workshop registration with member pricing",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "workshop_registration.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
