"""Backend API client: subscription store and facility directory."""

from urllib.parse import quote

from models import FacilitiesResponse, Facility, Subscription, SubscriptionsResponse
from shared.config import Settings
from shared.http import get_json


class BackendClient:
    """Reads subscriptions and facility records from the backend API."""

    def __init__(self, settings: Settings):
        self.base_url = settings.backend_api_endpoint
        self.timeout = settings.request_timeout

    def fetch_subscriptions(self, status: str = "confirmed") -> list[Subscription]:
        """Fetch subscriptions in the given state (only 'confirmed' is used)."""
        response = get_json(
            "fetch_subscriptions",
            f"{self.base_url}/subscriptions",
            SubscriptionsResponse,
            self.timeout,
            params={"status": status},
        )
        return response.data

    def fetch_facilities(self, ids: str) -> list[Facility]:
        """
        Batched facility lookup.

        Args:
            ids: Comma-joined directory facility keys, e.g. "12,40" or "A,B"

        Returns:
            Facility records found; unknown ids are simply absent
        """
        if not ids:
            return []

        # Each id is encoded on its own so the separating commas stay literal
        encoded = ",".join(quote(facility_id, safe="") for facility_id in ids.split(","))
        response = get_json(
            "fetch_facilities",
            f"{self.base_url}/facilities?ids={encoded}",
            FacilitiesResponse,
            self.timeout,
        )
        return response.data
