"""Pydantic models for availability lookups and aggregation results."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from models.types import (
    AvailabilityIndex,
    CampsiteID,
    FacilityKey,
    MonthCode,
    ProviderFacilityID,
)

AVAILABLE_STATUS = "Available"


class Campsite(BaseModel):
    """One campsite's per-date statuses as reported by the provider."""

    availabilities: dict[str, str] = Field(default_factory=dict)


class CampgroundAvailability(BaseModel):
    """Month availability response for a single campground."""

    campsites: dict[str, Campsite] = Field(default_factory=dict)

    def available_campsites(self) -> list[CampsiteID]:
        """One campsite id per (site, date) whose status is exactly "Available"."""
        available = []
        for site_id, campsite in self.campsites.items():
            for status in campsite.availabilities.values():
                if status == AVAILABLE_STATUS:
                    available.append(CampsiteID(site_id))
        return available


class TargetMonth(BaseModel):
    """A calendar month checked during a run."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    month: int = Field(..., ge=1, le=12)

    @property
    def code(self) -> MonthCode:
        return f"{self.month:02d}"

    @property
    def start_date(self) -> str:
        """First day of the month at midnight UTC, ISO 8601."""
        start = datetime(self.year, self.month, 1, tzinfo=timezone.utc)
        return start.strftime("%Y-%m-%dT%H:%M:%S.000Z")


class MonthWindow(BaseModel):
    """Current month plus the next two, in order."""

    model_config = ConfigDict(frozen=True)

    months: tuple[TargetMonth, TargetMonth, TargetMonth]

    @property
    def codes(self) -> tuple[MonthCode, ...]:
        return tuple(m.code for m in self.months)

    def order(self, codes: set[MonthCode]) -> list[MonthCode]:
        """Sort month codes by their position in the window."""
        return [code for code in self.codes if code in codes]


class AvailabilityLookupFailure(BaseModel):
    """A (facility, month) pair that could not be checked."""

    facility_key: FacilityKey
    provider_id: ProviderFacilityID
    month: MonthCode
    error: str


class AggregationResult(BaseModel):
    """Availability index plus the pairs skipped because of provider errors."""

    index: AvailabilityIndex = Field(default_factory=dict)
    failures: list[AvailabilityLookupFailure] = Field(default_factory=list)
