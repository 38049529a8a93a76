"""Pydantic models for data validation and type checking."""

from models.availability import (
    AggregationResult,
    AvailabilityLookupFailure,
    Campsite,
    CampgroundAvailability,
    MonthWindow,
    TargetMonth,
)
from models.notification import EmailDigest, EmailPayload
from models.subscription import (
    FacilitiesResponse,
    Facility,
    Subscription,
    SubscriptionsResponse,
)

__all__ = [
    "Subscription",
    "SubscriptionsResponse",
    "Facility",
    "FacilitiesResponse",
    "Campsite",
    "CampgroundAvailability",
    "TargetMonth",
    "MonthWindow",
    "AvailabilityLookupFailure",
    "AggregationResult",
    "EmailDigest",
    "EmailPayload",
]
