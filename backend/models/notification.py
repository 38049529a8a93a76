"""Pydantic models for notification digests and email payloads."""

from pydantic import BaseModel, ConfigDict, Field

from models.types import FacilityKey, MonthCode


class EmailDigest(BaseModel):
    """Months with openings for one subscriber's facility."""

    to: str = Field(..., min_length=1)
    facility_id: FacilityKey
    months: list[MonthCode] = Field(..., min_length=1)


class EmailPayload(BaseModel):
    """Transactional email body, serialized with PascalCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    from_email: str = Field(..., alias="From")
    to: str = Field(..., alias="To")
    subject: str = Field(..., alias="Subject")
    text_body: str = Field(..., alias="TextBody")
    html_body: str = Field(..., alias="HtmlBody")
    message_stream: str = Field("outbound", alias="MessageStream")
