"""RegistrationService orchestrates the workshop registration workflow.

Submission pipeline (in order):
1. Workshop lookup in the registry
2. Roster load from the workshop spreadsheet
3. Member matching (name/email/phone rules)
4. Price tier and payment link selection
5. Registration row append
6. Webhook notification (background, non-blocking)
"""

import structlog
from pydantic import BaseModel, Field

from workshop_registration.adapters.base import RegistrationSink, RosterSource
from workshop_registration.identity.member_matcher import MemberMatcher
from workshop_registration.identity.schemas import (
    MatchResult,
    MatchRule,
    RosterEntry,
    Submission,
)
from workshop_registration.registration.errors import (
    RegistrationPersistenceError,
    RosterUnavailableError,
    WorkshopNotFoundError,
)
from workshop_registration.registration.notifier import NotificationDispatcher
from workshop_registration.registration.schemas import (
    MemberStatus,
    RegistrationForm,
    RegistrationRow,
    WebhookPayload,
)
from workshop_registration.workshops.registry import WorkshopRegistry
from workshop_registration.workshops.schemas import WorkshopConfig

logger = structlog.get_logger()

# Settings-sheet keys holding the price shown for each tier
PRICE_SETTING_KEYS = {
    MemberStatus.MEMBER: "Pret Membru",
    MemberStatus.NON_MEMBER: "Pret Standard",
}


class RegistrationOutcome(BaseModel):
    """Result of a completed registration."""

    success: bool = Field(default=True)
    is_member: bool = Field(description="True if the member price applies")
    matched_by: MatchRule | None = Field(default=None)
    member_status: MemberStatus
    payment_sum: str = Field(description="Price label or amount recorded")
    payment_link: str = Field(description="Payment link for the price tier")


class RegistrationService:
    """Registration workflow for all configured workshops.

    Collaborators are injected so the workflow can run against fakes in
    tests and against Google Sheets in production.
    """

    def __init__(
        self,
        registry: WorkshopRegistry,
        roster_source: RosterSource,
        registration_sink: RegistrationSink,
        notifier: NotificationDispatcher,
        matcher: MemberMatcher | None = None,
    ):
        """Initialize service with required components.

        Args:
            registry: Workshop configurations by slug
            roster_source: Reads members and workshop settings
            registration_sink: Persists registration rows
            notifier: Background webhook dispatcher
            matcher: Member matcher (default: MemberMatcher())
        """
        self._registry = registry
        self._roster = roster_source
        self._sink = registration_sink
        self._notifier = notifier
        self._matcher = matcher or MemberMatcher()

    def get_workshop(self, slug: str) -> WorkshopConfig:
        """Active workshop by slug.

        Raises:
            WorkshopNotFoundError: If slug is unknown or workshop inactive
        """
        workshop = self._registry.get(slug)
        if workshop is None or not workshop.active:
            raise WorkshopNotFoundError(slug)
        return workshop

    async def check_member(self, workshop_slug: str, email: str) -> MatchResult:
        """Early membership check by email, before the full form is known.

        Args:
            workshop_slug: Workshop slug
            email: Email typed in the first step

        Returns:
            MatchResult from email-only matching

        Raises:
            WorkshopNotFoundError: If slug is unknown or workshop inactive
            RosterUnavailableError: If the roster cannot be loaded
        """
        workshop = self.get_workshop(workshop_slug)
        roster = await self._load_roster(workshop)
        result = self._matcher.match_by_email_only(email, roster)

        logger.info(
            "member check",
            workshop=workshop.slug,
            is_member=result.is_member,
        )
        return result

    async def submit(
        self,
        workshop_slug: str,
        form: RegistrationForm,
        *,
        dry_run: bool = False,
    ) -> RegistrationOutcome:
        """Register a participant and pick their payment link.

        The webhook notification is only scheduled; its outcome does not
        affect the returned result.

        Args:
            workshop_slug: Workshop slug
            form: Completed registration form
            dry_run: If True, skip the sheet write and the webhook

        Returns:
            RegistrationOutcome with price tier and payment link

        Raises:
            WorkshopNotFoundError: If slug is unknown or workshop inactive
            RosterUnavailableError: If the roster cannot be loaded
            RegistrationPersistenceError: If the row could not be written
        """
        workshop = self.get_workshop(workshop_slug)
        roster = await self._load_roster(workshop)

        match = self._matcher.match(
            Submission(email=str(form.email), phone=form.phone, name=form.name),
            roster,
        )
        member_status = MemberStatus.from_flag(match.is_member)
        payment_sum = await self._payment_sum(workshop, member_status)

        form = form.with_invoice_defaults()
        row = RegistrationRow.from_form(
            form,
            workshop_name=workshop.name,
            member_status=member_status,
            payment_sum=payment_sum,
        )

        write_result = await self._sink.append_registration(
            workshop.sheet_id, row, dry_run=dry_run
        )
        if not write_result.success:
            raise RegistrationPersistenceError(
                write_result.error_message or "registration was not saved"
            )

        if not dry_run:
            self._notifier.dispatch(
                workshop.webhook_url,
                WebhookPayload.build(workshop.name, form, member_status, payment_sum),
            )

        logger.info(
            "registration saved",
            workshop=workshop.slug,
            member_status=member_status.value,
            matched_by=match.matched_by.value if match.matched_by else None,
        )

        return RegistrationOutcome(
            is_member=match.is_member,
            matched_by=match.matched_by,
            member_status=member_status,
            payment_sum=payment_sum,
            payment_link=workshop.payment_link(match.is_member),
        )

    async def _load_roster(self, workshop: WorkshopConfig) -> list[RosterEntry]:
        try:
            return await self._roster.load_members(workshop.sheet_id)
        except Exception as e:
            logger.error(
                "failed to load roster",
                workshop=workshop.slug,
                error=str(e),
            )
            raise RosterUnavailableError(f"Roster unavailable: {e}") from e

    async def _payment_sum(
        self, workshop: WorkshopConfig, member_status: MemberStatus
    ) -> str:
        """Price for the tier from the settings sheet, else the tier label."""
        key = PRICE_SETTING_KEYS[member_status]
        try:
            workshop_settings = await self._roster.load_workshop_settings(
                workshop.sheet_id
            )
        except Exception as e:
            logger.warning(
                "failed to load workshop settings, using price label",
                workshop=workshop.slug,
                error=str(e),
            )
            return key
        return workshop_settings.get(key, key)
