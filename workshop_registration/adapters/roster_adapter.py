"""Adapter for loading member rosters and workshop settings from Google Sheets.

Uses gspread library with service account authentication to read
the "Membri" and "Configurare Workshop" tabs of a workshop spreadsheet.
"""

import asyncio
import os

import gspread
import structlog
from google.oauth2.service_account import Credentials

from workshop_registration.adapters.base import find_worksheet
from workshop_registration.identity.schemas import RosterEntry

logger = structlog.get_logger()

MEMBER_SHEET_NAMES = ("Membri", "Membrii", "Members")
SETTINGS_SHEET_NAMES = ("Configurare Workshop", "Config", "Configurare")


class RosterAdapter:
    """Adapter for loading member rosters from Google Sheets.

    Expected members sheet format:
    - Header row, then one member per row
    - Columns A:E: Prenume, Nume, Companie, Email, Telefon

    Expected settings sheet format:
    - Columns A:B: key, value
    """

    SCOPES = [
        "https://www.googleapis.com/auth/spreadsheets.readonly",
        "https://www.googleapis.com/auth/drive.readonly",
    ]

    def __init__(self, credentials_path: str | None = None):
        """Initialize with service account credentials.

        Args:
            credentials_path: Path to service account JSON.
                             Falls back to GOOGLE_SHEETS_CREDENTIALS env var.
        """
        self._credentials_path = credentials_path or os.environ.get(
            "GOOGLE_SHEETS_CREDENTIALS"
        )
        self._client: gspread.Client | None = None

    def _get_client(self) -> gspread.Client:
        """Get or create authenticated gspread client.

        Returns:
            Authenticated gspread Client instance

        Raises:
            ValueError: If no credentials path configured
        """
        if self._client is None:
            if not self._credentials_path:
                raise ValueError(
                    "No credentials. Set GOOGLE_SHEETS_CREDENTIALS env var "
                    "or pass credentials_path to constructor."
                )
            creds = Credentials.from_service_account_file(
                self._credentials_path,
                scopes=self.SCOPES,
            )
            self._client = gspread.authorize(creds)
        return self._client

    async def load_members(self, sheet_id: str) -> list[RosterEntry]:
        """Load the member roster, in sheet order.

        A spreadsheet without a members tab yields an empty roster, so
        every registrant pays the standard price instead of the
        registration failing.

        Args:
            sheet_id: Google Sheets ID (from URL)

        Returns:
            List of RosterEntry objects
        """
        return await asyncio.to_thread(self._load_members_sync, sheet_id)

    def _load_members_sync(self, sheet_id: str) -> list[RosterEntry]:
        spreadsheet = self._get_client().open_by_key(sheet_id)
        worksheet = find_worksheet(spreadsheet, MEMBER_SHEET_NAMES)
        if worksheet is None:
            logger.warning(
                "members sheet not found, using empty roster",
                sheet_id=sheet_id,
                tried=list(MEMBER_SHEET_NAMES),
            )
            return []

        # Skip header row
        rows = worksheet.get_values("A2:E")

        entries = [
            RosterEntry.from_sheet_row(row)
            for row in rows
            if any(str(cell).strip() for cell in row)
        ]
        logger.info(
            "loaded roster",
            sheet_id=sheet_id,
            sheet_name=worksheet.title,
            member_count=len(entries),
        )
        return entries

    async def load_workshop_settings(self, sheet_id: str) -> dict[str, str]:
        """Load key/value settings from the workshop settings tab.

        Rows with an empty key or value are skipped. A spreadsheet
        without a settings tab yields an empty dict.

        Args:
            sheet_id: Google Sheets ID (from URL)

        Returns:
            Mapping of setting name to value
        """
        return await asyncio.to_thread(self._load_settings_sync, sheet_id)

    def _load_settings_sync(self, sheet_id: str) -> dict[str, str]:
        spreadsheet = self._get_client().open_by_key(sheet_id)
        worksheet = find_worksheet(spreadsheet, SETTINGS_SHEET_NAMES)
        if worksheet is None:
            logger.warning(
                "workshop settings sheet not found",
                sheet_id=sheet_id,
                tried=list(SETTINGS_SHEET_NAMES),
            )
            return {}

        workshop_settings: dict[str, str] = {}
        for row in worksheet.get_values("A:B"):
            if len(row) < 2:
                continue
            key, value = str(row[0]).strip(), str(row[1]).strip()
            if key and value:
                workshop_settings[key] = value
        return workshop_settings

    async def health_check(self) -> bool:
        """Check if adapter is properly configured.

        Returns:
            True if credentials can authenticate, False otherwise
        """
        try:
            self._get_client()
            return True
        except Exception:
            return False
