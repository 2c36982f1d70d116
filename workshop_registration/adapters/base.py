"""Base types for spreadsheet adapters.

This module defines the WriteResult model returned by write operations,
the protocols the registration workflow depends on, and the sheet-name
probing shared by the Google Sheets adapters.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import gspread
from pydantic import BaseModel, ConfigDict, Field

from workshop_registration.identity.schemas import RosterEntry
from workshop_registration.registration.schemas import RegistrationRow


class WriteResult(BaseModel):
    """Result of a write operation to an external system.

    Captures success/failure status along with metadata about
    the write operation (external IDs, URLs, timing).
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    success: bool = Field(description="Whether the write succeeded")
    dry_run: bool = Field(default=False, description="True if this was a dry run")
    item_count: int = Field(default=0, description="Number of rows written")
    external_id: str | None = Field(default=None, description="Spreadsheet ID")
    sheet_name: str | None = Field(
        default=None, description="Worksheet the row landed in"
    )
    url: str | None = Field(default=None, description="Web view link if available")
    error_message: str | None = Field(
        default=None, description="Error message if failed"
    )
    duration_ms: int | None = Field(
        default=None, description="Operation duration in milliseconds"
    )


@runtime_checkable
class RosterSource(Protocol):
    """Where the workflow reads members and per-workshop settings from."""

    async def load_members(self, sheet_id: str) -> list[RosterEntry]:
        """Load the member roster in sheet order."""
        ...

    async def load_workshop_settings(self, sheet_id: str) -> dict[str, str]:
        """Load key/value workshop settings."""
        ...


@runtime_checkable
class RegistrationSink(Protocol):
    """Where the workflow persists registrations."""

    async def append_registration(
        self, sheet_id: str, row: RegistrationRow, *, dry_run: bool = False
    ) -> WriteResult:
        """Append one registration row."""
        ...


def find_worksheet(
    spreadsheet: gspread.Spreadsheet, names: Iterable[str]
) -> gspread.Worksheet | None:
    """Return the first worksheet that exists among candidate names.

    Organizers name tabs inconsistently ("Membri" / "Membrii" / "Members"),
    so every known spelling is tried in order.

    Args:
        spreadsheet: Opened spreadsheet
        names: Candidate tab names, most common first

    Returns:
        The worksheet, or None if no candidate exists
    """
    for name in names:
        try:
            return spreadsheet.worksheet(name)
        except gspread.WorksheetNotFound:
            continue
    return None
