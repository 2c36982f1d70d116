"""Workshop registry: slug -> configuration.

The registry is plain configuration loaded once at startup. To add a
workshop, list it in the JSON file pointed to by ``WORKSHOPS_FILE``::

    {
      "workshop-slug": {
        "id": "unique-workshop-id",
        "name": "Workshop Display Name",
        "sheet_id": "...",
        "payment_links": {"member": "...", "standard": "..."},
        "webhook_url": "...",
        "active": true
      }
    }

and create its Google Sheet with the "Configurare Workshop", "Membri"
and "Inscrieri" tabs.
"""

import json
from collections.abc import Mapping
from types import MappingProxyType

import structlog

from workshop_registration.config import Settings
from workshop_registration.workshops.schemas import PaymentLinks, WorkshopConfig

logger = structlog.get_logger()

DEFAULT_WORKSHOP_SLUG = "bizz-club-sm"


def _default_workshop(settings: Settings) -> WorkshopConfig:
    return WorkshopConfig(
        id="bizz-club-sm-2026",
        slug=DEFAULT_WORKSHOP_SLUG,
        name="Workshop BIZZ.CLUB Satu Mare",
        sheet_id=settings.sheet_id_bizz_club_sm,
        payment_links=PaymentLinks(
            member=settings.stripe_member_bizz_club_sm,
            standard=settings.stripe_standard_bizz_club_sm,
        ),
        webhook_url=settings.webhook_url_bizz_club_sm,
        active=True,
    )


class WorkshopRegistry:
    """Read-only lookup of workshop configurations by slug."""

    def __init__(self, workshops: Mapping[str, WorkshopConfig]):
        self._workshops = MappingProxyType(dict(workshops))

    @classmethod
    def from_settings(cls, settings: Settings) -> "WorkshopRegistry":
        """Build the registry from the built-in workshop and the optional file.

        Entries from ``settings.workshops_file`` override built-in ones
        with the same slug.

        Args:
            settings: Application settings

        Returns:
            WorkshopRegistry with all configured workshops

        Raises:
            ValueError: If the workshops file is not a JSON object or an
                entry is invalid
        """
        workshops = {DEFAULT_WORKSHOP_SLUG: _default_workshop(settings)}

        if settings.workshops_file is not None:
            raw = json.loads(settings.workshops_file.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Workshops file must map slugs to workshops: "
                    f"{settings.workshops_file}"
                )
            for slug, data in raw.items():
                workshops[slug] = WorkshopConfig.model_validate({**data, "slug": slug})

        logger.info("workshop registry loaded", slugs=sorted(workshops))
        return cls(workshops)

    @property
    def workshops(self) -> Mapping[str, WorkshopConfig]:
        """All workshops, active or not."""
        return self._workshops

    def get(self, slug: str) -> WorkshopConfig | None:
        """Workshop config by slug, or None if unknown."""
        return self._workshops.get(slug)

    def active(self) -> list[WorkshopConfig]:
        """Workshops currently accepting registrations."""
        return [w for w in self._workshops.values() if w.active]
