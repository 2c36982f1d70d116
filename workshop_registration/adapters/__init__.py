"""Adapters for external data sources and notification targets.

This module provides adapters for integrating with external systems:
- RosterAdapter: Load member rosters and workshop settings from Google Sheets
- SheetsAdapter: Append registrations to Google Sheets
- WebhookAdapter: Notify the automation webhook of new registrations
- WriteResult: Result model for write operations
"""

from workshop_registration.adapters.base import (
    RegistrationSink,
    RosterSource,
    WriteResult,
)
from workshop_registration.adapters.roster_adapter import RosterAdapter
from workshop_registration.adapters.sheets_adapter import SheetsAdapter
from workshop_registration.adapters.webhook_adapter import WebhookAdapter

__all__ = [
    "RegistrationSink",
    "RosterAdapter",
    "RosterSource",
    "SheetsAdapter",
    "WebhookAdapter",
    "WriteResult",
]
