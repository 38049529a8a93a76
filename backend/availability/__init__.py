"""
Availability pipeline for the campsite opening notifier.

This module handles:
- Computing the month window (current month plus the next two)
- Resolving subscribed facilities through the facility directory
- Aggregating which months have open campsites per facility
"""

from .month_window import get_month_window
from .facility_resolver import resolve_facilities
from .aggregator import aggregate_availability

__all__ = [
    "get_month_window",
    "resolve_facilities",
    "aggregate_availability",
]
