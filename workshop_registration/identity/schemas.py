"""Member matching schemas.

Defines data models for roster entries, registrant submissions and
match results.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RosterEntry(BaseModel):
    """Known member from the roster sheet.

    Represents a single row of the members sheet. Values come from a
    spreadsheet and are untrusted free text.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(default="", description="Prenume")
    last_name: str = Field(default="", description="Nume")
    company: str = Field(default="", description="Companie")
    email: str = Field(default="", description="Email as typed in the sheet")
    phone: str = Field(default="", description="Telefon as typed in the sheet")

    @classmethod
    def from_sheet_row(cls, row: list[str]) -> "RosterEntry":
        """Parse from a positional Google Sheets row.

        Expected column order: first name, last name, company, email, phone.
        Short rows (trailing empty cells are omitted by the Sheets API)
        are padded with empty strings.

        Args:
            row: Cell values from one sheet row

        Returns:
            RosterEntry parsed from row data
        """
        cells = [str(cell).strip() for cell in row[:5]]
        cells += [""] * (5 - len(cells))
        first_name, last_name, company, email, phone = cells
        return cls(
            first_name=first_name,
            last_name=last_name,
            company=company,
            email=email,
            phone=phone,
        )


class Submission(BaseModel):
    """Registrant identity for one matching attempt.

    The canonical shape carries a single free-text ``name``. Older form
    variants send ``first_name``/``last_name`` separately; when either is
    set the name is not split.
    """

    model_config = ConfigDict(frozen=True)

    email: str = ""
    phone: str = ""
    name: str = ""
    first_name: str | None = None
    last_name: str | None = None

    @property
    def has_split_name(self) -> bool:
        """True if first and last name were submitted as separate fields."""
        return self.first_name is not None or self.last_name is not None


class MatchRule(str, Enum):
    """Which rule established membership, in priority order."""

    NAME_PHONE = "name+phone"
    NAME_EMAIL = "name+email"
    EMAIL_PHONE = "email+phone"
    EMAIL = "email"


class MatchResult(BaseModel):
    """Outcome of a member lookup."""

    model_config = ConfigDict(frozen=True)

    is_member: bool = Field(description="True if a roster entry matched")
    matched_by: MatchRule | None = Field(
        default=None, description="Rule that matched (None when not a member)"
    )
    matched_entry: RosterEntry | None = Field(
        default=None, description="Roster entry that matched"
    )
