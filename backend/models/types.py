"""Shared type definitions for type checking.

Uses NewType for IDs to provide compile-time type safety - prevents mixing
the directory's facility key with the availability provider's identifier.

Uses TypeAlias for complex types that are purely structural.
"""

from typing import NewType, TypeAlias

# ID types using NewType for type safety
FacilityKey = NewType("FacilityKey", str)  # directory id, referenced by subscriptions
ProviderFacilityID = NewType("ProviderFacilityID", str)  # availability provider campground id
CampsiteID = NewType("CampsiteID", str)

# Structural aliases using TypeAlias
MonthCode: TypeAlias = str  # two-digit month, "01".."12"
MonthSet: TypeAlias = set[str]
AvailabilityIndex: TypeAlias = dict[FacilityKey, MonthSet]
