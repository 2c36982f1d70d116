"""Workshop lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from workshop_registration.workshops.registry import WorkshopRegistry

router = APIRouter(prefix="/workshop", tags=["workshop"])


class WorkshopPublicResponse(BaseModel):
    """Public workshop data (no sheet IDs, links or webhook URLs)."""

    slug: str
    name: str
    active: bool


def get_workshop_registry(request: Request) -> WorkshopRegistry:
    """Dependency to get WorkshopRegistry from app state."""
    return request.app.state.workshop_registry


@router.get("/{slug}", response_model=WorkshopPublicResponse)
async def get_workshop(
    slug: str,
    registry: WorkshopRegistry = Depends(get_workshop_registry),
) -> WorkshopPublicResponse:
    """Get public configuration of an active workshop."""
    workshop = registry.get(slug)
    if workshop is None or not workshop.active:
        raise HTTPException(
            status_code=404,
            detail="Workshop nu a fost găsit sau nu este activ",
        )

    return WorkshopPublicResponse(
        slug=workshop.slug,
        name=workshop.name,
        active=workshop.active,
    )
