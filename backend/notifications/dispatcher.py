"""
Digest dispatch.

Sends one openings email per subscription whose facility has open months.
A failed send is reported and logged; the remaining subscribers still get
their emails.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any

from clients import EmailClient
from models import MonthWindow, Subscription
from models.types import AvailabilityIndex
from notifications.email_sender import build_digest, send_digest_email
from notifications.error_logger import log_notification_error
from shared.config import Settings


def dispatch_digests(
    subscriptions: list[Subscription],
    index: AvailabilityIndex,
    window: MonthWindow,
    settings: Settings,
    client: EmailClient | None = None,
) -> dict[str, int]:
    """
    Email every subscriber whose facility has openings.

    Args:
        subscriptions: Confirmed subscriptions for this run
        index: Facility key -> open month codes
        window: Month window, used to order months in the email
        settings: Run configuration
        client: Email client; built from settings when omitted

    Returns:
        Dictionary with stats: sent, failed, skipped
    """
    if client is None:
        client = EmailClient(settings)

    stats = {"sent": 0, "failed": 0, "skipped": 0}

    digests = []
    for subscription in subscriptions:
        digest = build_digest(subscription, index, window)
        if digest is None:
            stats["skipped"] += 1
        else:
            digests.append(digest)

    if not digests:
        print("No subscribers with openings to notify.")
        return stats

    print(f"Sending {len(digests)} digest emails...")

    with ThreadPoolExecutor(max_workers=settings.email_max_workers) as executor:
        results: list[dict[str, Any]] = list(
            executor.map(lambda d: send_digest_email(d, settings, client), digests)
        )

    for digest, result in zip(digests, results):
        if result["success"]:
            print(f"  ✓ Sent digest to {digest.to}")
            stats["sent"] += 1
            continue

        error_msg = result.get("error", "Unknown error")
        print(f"  ✗ Failed to send to {digest.to}: {error_msg}")
        stats["failed"] += 1

        error_file = log_notification_error(
            error_type="sending",
            error_message=error_msg,
            context={
                "email": digest.to,
                "facility_id": digest.facility_id,
                "months": ", ".join(digest.months),
            },
            window=window.codes,
            facility_months=[(digest.facility_id, month) for month in digest.months],
        )
        print(f"    Error details logged to: {error_file}")

    return stats
