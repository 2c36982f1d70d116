"""Registration workflow: forms, sheet rows, webhook payloads and errors.

RegistrationService and NotificationDispatcher live in
``registration.service`` and ``registration.notifier``.
"""

from workshop_registration.registration.errors import (
    RegistrationError,
    RegistrationPersistenceError,
    RosterUnavailableError,
    WorkshopNotFoundError,
)
from workshop_registration.registration.schemas import (
    InvoiceType,
    MemberStatus,
    RegistrationForm,
    RegistrationRow,
    WebhookPayload,
)

__all__ = [
    "InvoiceType",
    "MemberStatus",
    "RegistrationError",
    "RegistrationForm",
    "RegistrationPersistenceError",
    "RegistrationRow",
    "RosterUnavailableError",
    "WebhookPayload",
    "WorkshopNotFoundError",
]
