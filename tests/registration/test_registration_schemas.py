"""Tests for registration form, sheet row and webhook payload schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from workshop_registration.registration.schemas import (
    PF_CUI,
    InvoiceType,
    MemberStatus,
    RegistrationForm,
    RegistrationRow,
    WebhookPayload,
)


class TestRegistrationForm:
    """Tests for RegistrationForm validation."""

    def test_accepts_camel_case_keys(self):
        """The front end posts camelCase keys."""
        form = RegistrationForm.model_validate(
            {
                "email": "ana@x.com",
                "name": "Ana Ionescu",
                "phone": "0799999999",
                "invoiceType": "PJ",
                "companyName": "ACME SRL",
                "cui": "RO123",
                "gdprConsent": True,
                "marketingConsent": True,
            }
        )

        assert form.invoice_type == InvoiceType.PJ
        assert form.company_name == "ACME SRL"
        assert form.marketing_consent is True

    def test_pj_requires_company_details(self):
        with pytest.raises(ValidationError, match="required for PJ"):
            RegistrationForm(
                email="ana@x.com",
                name="Ana Ionescu",
                phone="0799999999",
                invoice_type=InvoiceType.PJ,
            )

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            RegistrationForm(
                email="not-an-email",
                name="Ana",
                phone="1",
                invoice_type=InvoiceType.PF,
            )

    def test_pf_defaults(self, pf_form):
        """PF invoices go to the registrant with a zero CUI."""
        filled = pf_form.with_invoice_defaults()

        assert filled.company_name == "Ana Ionescu"
        assert filled.cui == PF_CUI == "0000000000000"
        assert pf_form.company_name == ""

    def test_pj_unchanged_by_defaults(self):
        form = RegistrationForm(
            email="ana@x.com",
            name="Ana Ionescu",
            phone="0799999999",
            invoice_type=InvoiceType.PJ,
            company_name="ACME SRL",
            cui="RO123",
        )

        assert form.with_invoice_defaults() is form


class TestRegistrationRow:
    """Tests for RegistrationRow sheet values."""

    def test_sheet_values_in_column_order(self, pf_form):
        timestamp = datetime(2026, 10, 18, 10, 0, tzinfo=UTC)
        row = RegistrationRow.from_form(
            pf_form.with_invoice_defaults(),
            workshop_name="Workshop Test",
            member_status=MemberStatus.MEMBER,
            payment_sum="Pret Membru",
            timestamp=timestamp,
        )

        assert row.to_sheet_values() == [
            "2026-10-18T10:00:00+00:00",
            "Workshop Test",
            "Ana Ionescu",
            "ana@x.com",
            "0799999999",
            "Vanzari",
            "Mai multi clienti",
            "Incepator",
            "PF",
            "Ana Ionescu",
            "'0000000000000",
            "Da",
            "Nu",
            "Membru",
            "Pret Membru",
        ]


class TestWebhookPayload:
    """Tests for WebhookPayload serialization."""

    def test_camel_case_json(self, pf_form):
        form = pf_form.with_invoice_defaults()
        payload = WebhookPayload.build(
            "Workshop Test", form, MemberStatus.NON_MEMBER, "Pret Standard"
        )

        data = payload.to_json_dict()

        assert data["workshop"] == "Workshop Test"
        assert data["memberStatus"] == "Non-Membru"
        assert data["paymentSum"] == "Pret Standard"
        assert data["invoice"] == {
            "type": "PF",
            "company": "Ana Ionescu",
            "cui": "0000000000000",
        }
        assert data["data"]["invoiceType"] == "PF"
        assert data["data"]["gdprConsent"] is True
        assert "timestamp" in data


class TestMemberStatus:
    def test_from_flag(self):
        assert MemberStatus.from_flag(True) == MemberStatus.MEMBER
        assert MemberStatus.from_flag(False).value == "Non-Membru"
