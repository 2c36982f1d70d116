"""Pytest configuration and fixtures."""

import pytest

from workshop_registration.identity.schemas import RosterEntry
from workshop_registration.registration.schemas import InvoiceType, RegistrationForm
from workshop_registration.workshops.registry import WorkshopRegistry
from workshop_registration.workshops.schemas import PaymentLinks, WorkshopConfig


@pytest.fixture
def ion_roster() -> list[RosterEntry]:
    """Single-member roster used by the end-to-end scenarios."""
    return [
        RosterEntry(
            first_name="Ion",
            last_name="Popescu",
            company="Popescu SRL",
            email="ion@x.com",
            phone="0724111222",
        ),
    ]


@pytest.fixture
def workshop() -> WorkshopConfig:
    """Active test workshop."""
    return WorkshopConfig(
        id="test-ws-2026",
        slug="test-ws",
        name="Workshop Test",
        sheet_id="sheet-123",
        payment_links=PaymentLinks(
            member="https://pay.x.com/member",
            standard="https://pay.x.com/standard",
        ),
        webhook_url="https://hooks.x.com/registration",
    )


@pytest.fixture
def registry(workshop: WorkshopConfig) -> WorkshopRegistry:
    """Registry with one active and one inactive workshop."""
    inactive = workshop.model_copy(
        update={"id": "old-ws", "slug": "old-ws", "active": False}
    )
    return WorkshopRegistry({workshop.slug: workshop, inactive.slug: inactive})


@pytest.fixture
def pf_form() -> RegistrationForm:
    """Registration form for an individual (PF) invoice."""
    return RegistrationForm(
        email="ana@x.com",
        name="Ana Ionescu",
        phone="0799999999",
        challenge="Vanzari",
        result="Mai multi clienti",
        level="Incepator",
        invoice_type=InvoiceType.PF,
        gdpr_consent=True,
        marketing_consent=False,
    )
