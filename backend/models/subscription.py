"""Pydantic models for subscription and facility directory data."""

from pydantic import BaseModel, ConfigDict, Field

from models.types import FacilityKey, ProviderFacilityID


class Subscription(BaseModel):
    """A subscriber's interest in one facility."""

    model_config = ConfigDict(
        str_strip_whitespace=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    email: str = Field(..., min_length=1)
    facility_id: FacilityKey = Field(..., alias="facilityId", min_length=1)


class Facility(BaseModel):
    """Facility directory record.

    `id` is the directory key that subscriptions reference; `facility_id`
    is the identifier the availability provider knows the campground by.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: FacilityKey = Field(..., min_length=1)
    facility_id: ProviderFacilityID = Field(..., alias="facilityId", min_length=1)


class SubscriptionsResponse(BaseModel):
    data: list[Subscription] = Field(default_factory=list)


class FacilitiesResponse(BaseModel):
    data: list[Facility] = Field(default_factory=list)
