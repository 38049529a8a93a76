"""
Error logging utility for the notifier.

Writes one report per failure event (skipped availability lookups or a
failed digest send) to a timestamped file for debugging.
"""

import os
import uuid
from datetime import datetime
from typing import Any, Iterable

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(__file__), "logs")


def log_notification_error(
    error_type: str,
    error_message: str,
    context: dict[str, Any] | None = None,
    window: Iterable[str] | None = None,
    facility_months: Iterable[tuple[str, str]] | None = None,
    log_dir: str = DEFAULT_LOG_DIR,
) -> str:
    """
    Log a notifier error to a timestamped file.

    Args:
        error_type: Type of error ('availability' or 'sending')
        error_message: The error message
        context: Optional dictionary with additional details (email, provider errors)
        window: Month codes checked in this run, e.g. ("11", "12", "01")
        facility_months: (facility key, month code) pairs the error affects
        log_dir: Directory the report is written to

    Returns:
        Path to the log file created
    """
    os.makedirs(log_dir, exist_ok=True)

    # Suffix keeps reports written by concurrent senders apart
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = os.path.join(
        log_dir, f"{error_type}_error_{timestamp}_{uuid.uuid4().hex[:8]}.txt"
    )

    lines = [
        f"Campsite Notifier {error_type.capitalize()} Failure - {datetime.now()}",
        "=" * 60,
        f"Month Window: {', '.join(window) if window else 'unknown'}",
        f"Error: {error_message}",
    ]

    pairs = sorted(set(facility_months or []))
    if pairs:
        lines += ["", f"Affected facility/month pairs ({len(pairs)}):"]
        lines += [f"  facility {facility} / month {month}" for facility, month in pairs]

    if context:
        lines += ["", "Details:", "-" * 60]
        lines += [f"{key}: {value}" for key, value in context.items()]

    with open(filename, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    return filename
