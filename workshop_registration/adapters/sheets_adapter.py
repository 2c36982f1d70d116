"""Adapter for writing registrations to Google Sheets.

Uses gspread library with service account authentication to append
registration rows to the "Inscrieri" tab of a workshop spreadsheet.
"""

import asyncio
import os
import time

import gspread
import structlog
from google.oauth2.service_account import Credentials

from workshop_registration.adapters.base import WriteResult, find_worksheet
from workshop_registration.registration.schemas import (
    REGISTRATION_HEADERS,
    RegistrationRow,
)

logger = structlog.get_logger()

REGISTRATION_SHEET_NAMES = ("Inscrieri", "Registrations", "Înscrieri")


class SheetsAdapter:
    """Adapter for appending registrations to Google Sheets.

    Follows the established adapter pattern with lazy client
    initialization. Creates the registrations tab, with its header row,
    when the spreadsheet has none.
    """

    SCOPES = [
        "https://www.googleapis.com/auth/spreadsheets",
        "https://www.googleapis.com/auth/drive.file",
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

    async def append_registration(
        self,
        sheet_id: str,
        row: RegistrationRow,
        *,
        dry_run: bool = False,
    ) -> WriteResult:
        """Append a registration to the workshop spreadsheet.

        Args:
            sheet_id: Google Sheets ID (from URL)
            row: Registration row to append
            dry_run: If True, log and return without writing

        Returns:
            WriteResult with operation outcome
        """
        if dry_run:
            logger.info(
                "dry_run: would append registration",
                sheet_id=sheet_id,
                workshop=row.workshop,
            )
            return WriteResult(
                success=True,
                dry_run=True,
                item_count=1,
                external_id=sheet_id,
            )

        # Use asyncio.to_thread for non-blocking I/O
        return await asyncio.to_thread(self._append_sync, sheet_id, row)

    def _append_sync(self, sheet_id: str, row: RegistrationRow) -> WriteResult:
        """Synchronous append implementation.

        Args:
            sheet_id: Google Sheets ID
            row: Registration row to append

        Returns:
            WriteResult with operation outcome
        """
        start_time = time.monotonic()

        try:
            client = self._get_client()
            spreadsheet = client.open_by_key(sheet_id)

            worksheet = find_worksheet(spreadsheet, REGISTRATION_SHEET_NAMES)
            if worksheet is None:
                worksheet = spreadsheet.add_worksheet(
                    title=REGISTRATION_SHEET_NAMES[0],
                    rows=1000,
                    cols=len(REGISTRATION_HEADERS),
                )
                worksheet.append_row(
                    REGISTRATION_HEADERS, value_input_option="USER_ENTERED"
                )
                logger.info(
                    "created registrations sheet",
                    sheet_id=sheet_id,
                    sheet_name=worksheet.title,
                )

            worksheet.append_row(
                row.to_sheet_values(), value_input_option="USER_ENTERED"
            )

            duration_ms = int((time.monotonic() - start_time) * 1000)

            logger.info(
                "appended registration",
                sheet_id=sheet_id,
                sheet_name=worksheet.title,
                member_status=row.member_status.value,
                duration_ms=duration_ms,
            )

            return WriteResult(
                success=True,
                dry_run=False,
                item_count=1,
                external_id=sheet_id,
                sheet_name=worksheet.title,
                url=f"https://docs.google.com/spreadsheets/d/{sheet_id}",
                duration_ms=duration_ms,
            )

        except Exception as e:
            duration_ms = int((time.monotonic() - start_time) * 1000)
            logger.error(
                "failed to append registration",
                sheet_id=sheet_id,
                error=str(e),
                duration_ms=duration_ms,
            )
            return WriteResult(
                success=False,
                dry_run=False,
                item_count=0,
                external_id=sheet_id,
                error_message=str(e),
                duration_ms=duration_ms,
            )

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
