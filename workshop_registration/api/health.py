"""Health check endpoints for monitoring and orchestration."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from workshop_registration.config import settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    timestamp: datetime
    version: str
    environment: str


class LivenessResponse(BaseModel):
    """Response model for liveness probe."""

    status: str


class ReadinessResponse(BaseModel):
    """Response model for readiness probe."""

    status: str
    checks: dict[str, str]


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe - app is running."""
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Readiness probe - app can serve traffic.

    Checks:
    - API is responding
    - Google Sheets credentials authenticate
    - Webhook credentials are set (reported, not required)
    """
    checks: dict[str, str] = {"api": "ok"}

    roster_adapter = getattr(request.app.state, "roster_adapter", None)
    if roster_adapter:
        try:
            is_healthy = await roster_adapter.health_check()
            checks["sheets"] = "ok" if is_healthy else "failed"
        except Exception:
            checks["sheets"] = "failed"
    else:
        checks["sheets"] = "not_configured"

    webhook_adapter = getattr(request.app.state, "webhook_adapter", None)
    webhook_ok = webhook_adapter is not None and webhook_adapter.is_configured
    checks["webhook"] = "ok" if webhook_ok else "not_configured"

    required = ("api", "sheets")
    status = "ready" if all(checks[k] == "ok" for k in required) else "not_ready"
    return ReadinessResponse(status=status, checks=checks)
