"""Availability provider client (recreation.gov style month endpoint)."""

from datetime import datetime, timezone
from urllib.parse import quote

from models import CampgroundAvailability, TargetMonth
from models.types import CampsiteID, MonthCode, ProviderFacilityID
from shared.config import Settings
from shared.http import get_json


class AvailabilityClient:
    """Queries open campsites for one campground and one month."""

    def __init__(self, settings: Settings):
        self.host = settings.availability_api_host
        self.timeout = settings.request_timeout

    def fetch_availability(
        self, provider_id: ProviderFacilityID, month: MonthCode, year: int | None = None
    ) -> list[CampsiteID]:
        """
        Get open campsites for a campground in a month.

        Args:
            provider_id: Campground id known to the availability provider
            month: Two-digit month code
            year: Year of the month; defaults to the current UTC year

        Returns:
            One campsite id per (campsite, date) marked "Available"
        """
        if year is None:
            year = datetime.now(timezone.utc).year
        start_date = TargetMonth(year=year, month=int(month)).start_date

        url = (
            f"{self.host}/api/camps/availability/campground/{provider_id}/month"
            f"?start_date={quote(start_date, safe='')}"
        )
        response = get_json(
            "fetch_availability", url, CampgroundAvailability, self.timeout
        )
        return response.available_campsites()
