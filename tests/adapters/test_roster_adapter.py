"""Tests for RosterAdapter - Google Sheets roster loading."""

from unittest.mock import MagicMock, patch

import gspread
import pytest

from workshop_registration.adapters.roster_adapter import RosterAdapter
from workshop_registration.identity.schemas import RosterEntry


@pytest.fixture
def mock_gspread():
    """Mock gspread.authorize, keeping the real exception classes."""
    with patch("workshop_registration.adapters.roster_adapter.gspread") as mock:
        mock.WorksheetNotFound = gspread.WorksheetNotFound
        yield mock


@pytest.fixture
def mock_credentials():
    """Mock google.oauth2.service_account.Credentials."""
    with patch("workshop_registration.adapters.roster_adapter.Credentials") as mock:
        yield mock


def _spreadsheet_with(mock_gspread, worksheets: dict[str, MagicMock]) -> MagicMock:
    """Wire a mock spreadsheet exposing only the given tabs."""

    def worksheet(name):
        if name not in worksheets:
            raise gspread.WorksheetNotFound(name)
        return worksheets[name]

    spreadsheet = MagicMock()
    spreadsheet.worksheet.side_effect = worksheet
    client = MagicMock()
    client.open_by_key.return_value = spreadsheet
    mock_gspread.authorize.return_value = client
    return spreadsheet


class TestRosterEntryFromSheetRow:
    """Tests for RosterEntry.from_sheet_row parsing."""

    def test_parses_all_columns(self):
        """Should map columns A:E to the entry fields."""
        entry = RosterEntry.from_sheet_row(
            ["Ion", "Popescu", "Popescu SRL", "ion@x.com", "0724111222"]
        )

        assert entry.first_name == "Ion"
        assert entry.last_name == "Popescu"
        assert entry.company == "Popescu SRL"
        assert entry.email == "ion@x.com"
        assert entry.phone == "0724111222"

    def test_pads_short_rows(self):
        """Trailing empty cells are omitted by the API; pad them."""
        entry = RosterEntry.from_sheet_row(["Ion", "Popescu"])

        assert entry.company == ""
        assert entry.email == ""
        assert entry.phone == ""

    def test_trims_cells(self):
        entry = RosterEntry.from_sheet_row([" Ion ", "Popescu", "", " ion@x.com "])

        assert entry.first_name == "Ion"
        assert entry.email == "ion@x.com"

    def test_numeric_phone_cell(self):
        """Phone cells may come back as numbers."""
        entry = RosterEntry.from_sheet_row(["Ion", "Popescu", "", "", 724111222])

        assert entry.phone == "724111222"


class TestRosterAdapterInit:
    """Tests for RosterAdapter initialization."""

    def test_uses_provided_credentials(self, mock_gspread, mock_credentials):
        adapter = RosterAdapter(credentials_path="/path/to/creds.json")
        adapter._get_client()

        call_args = mock_credentials.from_service_account_file.call_args
        assert call_args[0][0] == "/path/to/creds.json"

    def test_falls_back_to_env_var(self, mock_gspread, mock_credentials, monkeypatch):
        monkeypatch.setenv("GOOGLE_SHEETS_CREDENTIALS", "/env/creds.json")
        adapter = RosterAdapter()
        adapter._get_client()

        call_args = mock_credentials.from_service_account_file.call_args
        assert call_args[0][0] == "/env/creds.json"

    def test_missing_credentials_raises_value_error(self, mock_gspread, monkeypatch):
        monkeypatch.delenv("GOOGLE_SHEETS_CREDENTIALS", raising=False)
        adapter = RosterAdapter()

        with pytest.raises(ValueError, match="No credentials"):
            adapter._get_client()


class TestLoadMembers:
    """Tests for load_members."""

    @pytest.mark.asyncio
    async def test_loads_members_in_sheet_order(self, mock_gspread, mock_credentials):
        worksheet = MagicMock()
        worksheet.title = "Membri"
        worksheet.get_values.return_value = [
            ["Ion", "Popescu", "", "ion@x.com", "0724111222"],
            ["Ana", "Ionescu", "ACME", "ana@x.com"],
        ]
        _spreadsheet_with(mock_gspread, {"Membri": worksheet})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        roster = await adapter.load_members("sheet-123")

        assert [e.first_name for e in roster] == ["Ion", "Ana"]
        worksheet.get_values.assert_called_once_with("A2:E")

    @pytest.mark.asyncio
    async def test_skips_blank_rows(self, mock_gspread, mock_credentials):
        worksheet = MagicMock()
        worksheet.get_values.return_value = [
            ["Ion", "Popescu"],
            [],
            ["", " ", ""],
        ]
        _spreadsheet_with(mock_gspread, {"Membri": worksheet})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        roster = await adapter.load_members("sheet-123")

        assert len(roster) == 1

    @pytest.mark.asyncio
    async def test_probes_fallback_sheet_names(self, mock_gspread, mock_credentials):
        """Should try 'Membri', then 'Membrii', then 'Members'."""
        worksheet = MagicMock()
        worksheet.get_values.return_value = [["Ion", "Popescu"]]
        spreadsheet = _spreadsheet_with(mock_gspread, {"Members": worksheet})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        roster = await adapter.load_members("sheet-123")

        assert len(roster) == 1
        tried = [c.args[0] for c in spreadsheet.worksheet.call_args_list]
        assert tried == ["Membri", "Membrii", "Members"]

    @pytest.mark.asyncio
    async def test_missing_members_sheet_returns_empty_roster(
        self, mock_gspread, mock_credentials
    ):
        _spreadsheet_with(mock_gspread, {})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        roster = await adapter.load_members("sheet-123")

        assert roster == []

    @pytest.mark.asyncio
    async def test_api_errors_propagate(self, mock_gspread, mock_credentials):
        client = MagicMock()
        client.open_by_key.side_effect = ConnectionError("network down")
        mock_gspread.authorize.return_value = client

        adapter = RosterAdapter(credentials_path="/test/creds.json")

        with pytest.raises(ConnectionError):
            await adapter.load_members("sheet-123")


class TestLoadWorkshopSettings:
    """Tests for load_workshop_settings."""

    @pytest.mark.asyncio
    async def test_reads_key_value_pairs(self, mock_gspread, mock_credentials):
        worksheet = MagicMock()
        worksheet.get_values.return_value = [
            ["Pret Membru", "350 RON"],
            ["Pret Standard", " 500 RON "],
            ["Data", ""],
            ["", "orphan"],
            ["Single"],
        ]
        _spreadsheet_with(mock_gspread, {"Config": worksheet})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        result = await adapter.load_workshop_settings("sheet-123")

        assert result == {"Pret Membru": "350 RON", "Pret Standard": "500 RON"}

    @pytest.mark.asyncio
    async def test_missing_settings_sheet_returns_empty(
        self, mock_gspread, mock_credentials
    ):
        _spreadsheet_with(mock_gspread, {})

        adapter = RosterAdapter(credentials_path="/test/creds.json")
        result = await adapter.load_workshop_settings("sheet-123")

        assert result == {}


class TestHealthCheck:
    """Tests for health_check method."""

    @pytest.mark.asyncio
    async def test_health_check_success(self, mock_gspread, mock_credentials):
        adapter = RosterAdapter(credentials_path="/test/creds.json")

        assert await adapter.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_failure(self, mock_gspread, monkeypatch):
        monkeypatch.delenv("GOOGLE_SHEETS_CREDENTIALS", raising=False)
        adapter = RosterAdapter()

        assert await adapter.health_check() is False
