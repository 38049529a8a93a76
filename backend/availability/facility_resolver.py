"""Resolve the facilities referenced by subscriptions via the directory."""

from clients import BackendClient
from models import Facility, Subscription
from models.types import FacilityKey


def distinct_facility_ids(subscriptions: list[Subscription]) -> list[FacilityKey]:
    """Facility ids in first-seen order, each once."""
    return list(dict.fromkeys(s.facility_id for s in subscriptions))


def resolve_facilities(
    subscriptions: list[Subscription], client: BackendClient
) -> list[Facility]:
    """
    Look up every facility the subscriptions reference in one batched request.

    Ids with no directory entry are absent from the result; subscriptions
    pointing at them end up without an availability entry.

    Raises:
        ProviderError: the directory request failed
    """
    facility_ids = distinct_facility_ids(subscriptions)
    ids = ",".join(facility_ids)

    facilities = client.fetch_facilities(ids)
    print(f"Resolved {len(facilities)} of {len(facility_ids)} facilities")
    return facilities
