"""
Availability aggregation.

Checks every (facility, month) pair of the window against the availability
provider and builds the index of months with at least one open campsite,
keyed by the directory facility key that subscriptions reference.
"""

from concurrent.futures import ThreadPoolExecutor

from clients import AvailabilityClient
from models import (
    AggregationResult,
    AvailabilityLookupFailure,
    Facility,
    MonthWindow,
    TargetMonth,
)
from models.types import AvailabilityIndex
from notifications.error_logger import log_notification_error
from shared.errors import ProviderError


def build_lookup_grid(
    facilities: list[Facility], window: MonthWindow
) -> list[tuple[Facility, TargetMonth]]:
    """Every (facility, month) pair to check; duplicate facility records once."""
    unique = {f.id: f for f in facilities}
    return [(facility, month) for facility in unique.values() for month in window.months]


def _lookup(
    client: AvailabilityClient, facility: Facility, month: TargetMonth
) -> tuple[Facility, TargetMonth, int | None, str | None]:
    """Run one lookup; returns the open-campsite count or the error message."""
    try:
        campsites = client.fetch_availability(
            facility.facility_id, month.code, year=month.year
        )
    except ProviderError as e:
        return facility, month, None, str(e)
    return facility, month, len(campsites), None


def aggregate_availability(
    facilities: list[Facility],
    window: MonthWindow,
    client: AvailabilityClient,
    max_workers: int = 4,
) -> AggregationResult:
    """
    Build the availability index for the resolved facilities.

    Lookups run concurrently on a bounded pool. Results are merged here, in
    grid order, so no worker touches the index. A failed lookup skips only
    that (facility, month) pair.

    Args:
        facilities: Resolved facility records
        window: Months to check
        client: Availability provider client
        max_workers: Upper bound on concurrent lookups

    Returns:
        AggregationResult with the index and the skipped pairs
    """
    grid = build_lookup_grid(facilities, window)
    if not grid:
        return AggregationResult()

    print(f"Checking availability for {len(grid)} facility/month pairs...")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(
            executor.map(lambda pair: _lookup(client, *pair), grid)
        )

    index: AvailabilityIndex = {}
    failures = []
    for facility, month, count, error in outcomes:
        if error is not None:
            print(f"  ⚠️  Skipping facility {facility.id} for {month.code}: {error}")
            failures.append(
                AvailabilityLookupFailure(
                    facility_key=facility.id,
                    provider_id=facility.facility_id,
                    month=month.code,
                    error=error,
                )
            )
            continue

        if count:
            index.setdefault(facility.id, set()).add(month.code)

    if failures:
        skipped = ", ".join(f"{f.facility_key}/{f.month}" for f in failures)
        print(f"⚠️  {len(failures)} availability lookups skipped: {skipped}")
        error_file = log_notification_error(
            error_type="availability",
            error_message=f"{len(failures)} availability lookups failed",
            context={
                f"facility {f.facility_key} ({f.provider_id}) month {f.month}": f.error
                for f in failures
            },
            window=window.codes,
            facility_months=[(f.facility_key, f.month) for f in failures],
        )
        print(f"    Error details logged to: {error_file}")

    print(f"✓ {len(index)} facilities have openings")
    return AggregationResult(index=index, failures=failures)
