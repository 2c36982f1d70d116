"""Registration schemas.

Defines the registration form posted by the front end, the row written
to the "Inscrieri" sheet and the payload sent to the notification
webhook. Sheet column names are in Romanian, matching the spreadsheets
the organizers already use.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

# CUI placeholder for individuals (PF), thirteen zeros
PF_CUI = "0" * 13


class InvoiceType(str, Enum):
    """Who the invoice is issued to."""

    PJ = "PJ"  # persoana juridica (company)
    PF = "PF"  # persoana fizica (individual)


class MemberStatus(str, Enum):
    """Price tier recorded in the sheet and the webhook payload."""

    MEMBER = "Membru"
    NON_MEMBER = "Non-Membru"

    @classmethod
    def from_flag(cls, is_member: bool) -> "MemberStatus":
        return cls.MEMBER if is_member else cls.NON_MEMBER


class RegistrationForm(BaseModel):
    """Data collected by the three-step registration form.

    Accepts the front end's camelCase keys as well as field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # Step 1
    email: EmailStr = Field(description="Registrant email")

    # Step 2
    name: str = Field(min_length=1, description="Single 'Nume Prenume' field")
    phone: str = Field(min_length=1, description="Phone in any format")
    challenge: str = Field(default="", description="Provocare")
    result: str = Field(default="", description="Rezultat dorit")
    level: str = Field(default="", description="Nivel")

    # Step 3
    invoice_type: InvoiceType = Field(description="PJ (company) or PF (individual)")
    company_name: str = Field(default="", description="Required for PJ")
    cui: str = Field(default="", description="Company tax ID, required for PJ")
    gdpr_consent: bool = Field(default=False)
    marketing_consent: bool = Field(default=False)

    @model_validator(mode="after")
    def company_details_for_pj(self) -> "RegistrationForm":
        """Company invoices need the company name and CUI."""
        if self.invoice_type == InvoiceType.PJ and not (self.company_name and self.cui):
            raise ValueError("company_name and cui are required for PJ invoices")
        return self

    def with_invoice_defaults(self) -> "RegistrationForm":
        """Fill PF invoice fields: company is the registrant, CUI is zeros."""
        if self.invoice_type != InvoiceType.PF:
            return self
        return self.model_copy(update={"company_name": self.name, "cui": PF_CUI})


REGISTRATION_HEADERS = [
    "Timestamp",
    "Workshop",
    "Nume",
    "Email",
    "Telefon",
    "Provocare",
    "Rezultat",
    "Nivel",
    "Factura",
    "Nume Firma",
    "CUI",
    "GDPR",
    "Marketing",
    "Status Membru",
    "Suma",
]


def _yes_no(flag: bool) -> str:
    return "Da" if flag else "Nu"


class RegistrationRow(BaseModel):
    """One row of the "Inscrieri" sheet (columns A:O)."""

    timestamp: str
    workshop: str
    name: str
    email: str
    phone: str
    challenge: str
    result: str
    level: str
    invoice_type: InvoiceType
    company_name: str
    cui: str
    gdpr: bool
    marketing: bool
    member_status: MemberStatus
    payment_sum: str

    @classmethod
    def from_form(
        cls,
        form: RegistrationForm,
        workshop_name: str,
        member_status: MemberStatus,
        payment_sum: str,
        timestamp: datetime | None = None,
    ) -> "RegistrationRow":
        """Build the sheet row for a form with invoice defaults applied."""
        return cls(
            timestamp=(timestamp or datetime.now(UTC)).isoformat(),
            workshop=workshop_name,
            name=form.name,
            email=str(form.email),
            phone=form.phone,
            challenge=form.challenge,
            result=form.result,
            level=form.level,
            invoice_type=form.invoice_type,
            company_name=form.company_name,
            cui=form.cui,
            gdpr=form.gdpr_consent,
            marketing=form.marketing_consent,
            member_status=member_status,
            payment_sum=payment_sum,
        )

    def to_sheet_values(self) -> list[str]:
        """Cell values in REGISTRATION_HEADERS order.

        The CUI gets a leading apostrophe so Sheets keeps leading zeros.
        """
        return [
            self.timestamp,
            self.workshop,
            self.name,
            self.email,
            self.phone,
            self.challenge,
            self.result,
            self.level,
            self.invoice_type.value,
            self.company_name,
            f"'{self.cui}",
            _yes_no(self.gdpr),
            _yes_no(self.marketing),
            self.member_status.value,
            self.payment_sum,
        ]


class InvoiceDetails(BaseModel):
    """Invoice block of the webhook payload."""

    type: InvoiceType
    company: str = ""
    cui: str = ""


class WebhookPayload(BaseModel):
    """Registration notification sent to the automation webhook."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: str
    workshop: str
    data: RegistrationForm
    member_status: MemberStatus
    payment_sum: str
    invoice: InvoiceDetails

    @classmethod
    def build(
        cls,
        workshop_name: str,
        form: RegistrationForm,
        member_status: MemberStatus,
        payment_sum: str,
    ) -> "WebhookPayload":
        return cls(
            timestamp=datetime.now(UTC).isoformat(),
            workshop=workshop_name,
            data=form,
            member_status=member_status,
            payment_sum=payment_sum,
            invoice=InvoiceDetails(
                type=form.invoice_type,
                company=form.company_name,
                cui=form.cui,
            ),
        )

    def to_json_dict(self) -> dict:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
