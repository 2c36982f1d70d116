"""Workshop configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PaymentLinks(BaseModel):
    """Payment links for the two price tiers."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    member: str = Field(default="", description="Discounted member price link")
    standard: str = Field(default="", description="Standard price link")


class WorkshopConfig(BaseModel):
    """Static configuration of one workshop.

    Each workshop has its own Google Sheet holding the settings, members
    and registrations tabs.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(description="Unique workshop identifier")
    slug: str = Field(min_length=1, description="URL slug")
    name: str = Field(description="Display name")
    sheet_id: str = Field(default="", description="Google Sheets ID (from URL)")
    payment_links: PaymentLinks = Field(default_factory=PaymentLinks)
    webhook_url: str = Field(default="", description="Notification webhook URL")
    active: bool = Field(default=True)

    def payment_link(self, is_member: bool) -> str:
        """Payment link for the registrant's price tier."""
        return self.payment_links.member if is_member else self.payment_links.standard
