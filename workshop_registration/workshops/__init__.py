"""Workshop configuration registry."""

from workshop_registration.workshops.registry import (
    DEFAULT_WORKSHOP_SLUG,
    WorkshopRegistry,
)
from workshop_registration.workshops.schemas import PaymentLinks, WorkshopConfig

__all__ = [
    "DEFAULT_WORKSHOP_SLUG",
    "PaymentLinks",
    "WorkshopConfig",
    "WorkshopRegistry",
]
