"""API router aggregation."""

from fastapi import APIRouter

from workshop_registration.api.health import router as health_router
from workshop_registration.api.registrations import router as registrations_router
from workshop_registration.api.workshops import router as workshops_router

api_router = APIRouter()
api_router.include_router(health_router)
# Endpoints called by the registration form
api_router.include_router(registrations_router, prefix="/api")
api_router.include_router(workshops_router, prefix="/api")
