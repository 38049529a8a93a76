"""
Batch entry point: check campsite availability and email subscribers.

Usage:
    uv run python -m availability.pipeline

Invoked periodically by an external scheduler. Takes no arguments; all
configuration comes from environment variables (or a .env file).
"""

import sys
from datetime import datetime

from availability.aggregator import aggregate_availability
from availability.facility_resolver import resolve_facilities
from availability.month_window import get_month_window
from clients import AvailabilityClient, BackendClient, EmailClient
from notifications.dispatcher import dispatch_digests
from shared.config import Settings, load_settings
from shared.errors import ConfigurationError, ProviderError
from shared.utils import print_summary


def run_availability_check(
    settings: Settings, now: datetime | None = None
) -> dict[str, int]:
    """
    Run one notification pass.

    Args:
        settings: Validated run configuration
        now: Invocation time (defaults to current UTC time)

    Returns:
        Dictionary with stats: sent, failed, skipped, lookups_failed

    Raises:
        ProviderError: the subscription or facility fetch failed
    """
    window = get_month_window(now)
    print(f"[{datetime.now()}] Checking months {', '.join(window.codes)}")

    backend = BackendClient(settings)
    subscriptions = backend.fetch_subscriptions("confirmed")
    print(f"Found {len(subscriptions)} confirmed subscriptions")

    if not subscriptions:
        print("No subscriptions to process.")
        return {"sent": 0, "failed": 0, "skipped": 0, "lookups_failed": 0}

    facilities = resolve_facilities(subscriptions, backend)

    result = aggregate_availability(
        facilities,
        window,
        AvailabilityClient(settings),
        max_workers=settings.availability_max_workers,
    )

    stats = dispatch_digests(
        subscriptions, result.index, window, settings, EmailClient(settings)
    )

    print_summary(
        "Availability Check Complete",
        stats,
        {"lookups_failed": len(result.failures)},
    )

    return {**stats, "lookups_failed": len(result.failures)}


def main() -> None:
    """CLI entry point."""
    try:
        settings = load_settings()
        run_availability_check(settings)
    except ConfigurationError as e:
        print(f"✗ {e}")
        sys.exit(1)
    except ProviderError as e:
        print(f"✗ Run aborted: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
