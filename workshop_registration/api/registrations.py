"""Registration API endpoints.

Provides the member check used by the first form step and the final
registration submission that returns the payment link. Messages are in
Romanian; they are shown to registrants as-is.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from workshop_registration.registration.errors import (
    RegistrationError,
    WorkshopNotFoundError,
)
from workshop_registration.registration.schemas import RegistrationForm
from workshop_registration.registration.service import RegistrationService

logger = structlog.get_logger()
router = APIRouter(tags=["registration"])

MSG_WORKSHOP_NOT_FOUND = "Workshop nu a fost găsit"
MSG_WELCOME_MEMBER = "Bun venit înapoi! Ești membru BIZZ.CLUB."
MSG_WELCOME = "Bun venit! Continuă cu înregistrarea."
MSG_REGISTERED = "Înregistrare finalizată cu succes!"


class CheckMemberRequest(BaseModel):
    """Request to check membership by email (form step 1)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    email: str = Field(default="", description="Email typed by the registrant")
    workshop_slug: str = Field(default="", description="Workshop slug")


class CheckMemberResponse(BaseModel):
    """Membership status for the first form step."""

    is_member: bool = Field(description="True if the email belongs to a member")
    message: str = Field(description="Greeting shown to the registrant")


class SubmitRegistrationRequest(BaseModel):
    """Completed registration form for a workshop."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    workshop_slug: str = Field(min_length=1, description="Workshop slug")
    form_data: RegistrationForm = Field(description="Registration form data")


class SubmitRegistrationResponse(BaseModel):
    """Outcome returned to the registrant."""

    success: bool
    payment_link: str = Field(description="Payment link for the price tier")
    is_member: bool = Field(description="True if the member price applies")
    message: str


def get_registration_service(request: Request) -> RegistrationService:
    """Dependency to get RegistrationService from app state."""
    return request.app.state.registration_service


@router.post("/check-member", response_model=CheckMemberResponse)
async def check_member(
    request: CheckMemberRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> CheckMemberResponse:
    """Check whether an email belongs to a member of the workshop's club.

    Args:
        request: Email and workshop slug
        service: Registration workflow

    Returns:
        CheckMemberResponse with membership flag and greeting

    Raises:
        HTTPException: 400 on missing input, 404 on unknown workshop,
            500 if the roster cannot be loaded
    """
    if not request.email:
        raise HTTPException(status_code=400, detail="Email este necesar")
    if not request.workshop_slug:
        raise HTTPException(status_code=400, detail="Workshop slug este necesar")

    try:
        result = await service.check_member(request.workshop_slug, request.email)
    except WorkshopNotFoundError:
        raise HTTPException(status_code=404, detail=MSG_WORKSHOP_NOT_FOUND)
    except RegistrationError as e:
        logger.error("member check failed", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Eroare la verificarea statusului de membru. Încearcă din nou.",
        )

    return CheckMemberResponse(
        is_member=result.is_member,
        message=MSG_WELCOME_MEMBER if result.is_member else MSG_WELCOME,
    )


@router.post("/submit-registration", response_model=SubmitRegistrationResponse)
async def submit_registration(
    request: SubmitRegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> SubmitRegistrationResponse:
    """Register a participant and return the payment link.

    Runs full member matching, saves the registration to the workshop
    spreadsheet and notifies the webhook in the background.

    Args:
        request: Workshop slug and completed form
        service: Registration workflow

    Returns:
        SubmitRegistrationResponse with payment link and member flag

    Raises:
        HTTPException: 404 on unknown workshop, 500 if the roster cannot be
            loaded or the registration cannot be saved
    """
    try:
        outcome = await service.submit(request.workshop_slug, request.form_data)
    except WorkshopNotFoundError:
        raise HTTPException(status_code=404, detail=MSG_WORKSHOP_NOT_FOUND)
    except RegistrationError as e:
        logger.error("registration failed", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Eroare la procesarea înregistrării. Te rugăm să încerci din nou.",
        )

    return SubmitRegistrationResponse(
        success=outcome.success,
        payment_link=outcome.payment_link,
        is_member=outcome.is_member,
        message=MSG_REGISTERED,
    )
