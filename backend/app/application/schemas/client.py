"""Pydantic DTOs for the Client feature."""

from datetime import datetime

from app.application.schemas.common import ApiModel
from app.application.schemas.fields import nullable_int, nullable_text, required_text
from app.domain.entities import EngagementType


class ClientPayload(ApiModel):
    """Body of POST and PUT — PUT replaces every editable field."""

    name: required_text(120, "Client name is required.", "Client name is too long.")
    engagement_type: EngagementType
    working_days_per_week: nullable_int(
        1, 7, "Working days must be at least 1.", "Working days cannot be more than 7."
    ) = None
    working_hours_per_day: nullable_int(
        1, 24, "Working hours must be at least 1.", "Working hours cannot be more than 24."
    ) = None
    email: nullable_text(254, "Email is too long.") = None
    phone: nullable_text(50, "Phone number is too long.") = None
    whatsapp: nullable_text(50, "WhatsApp number is too long.") = None
    address: nullable_text(500, "Address is too long.") = None
    notes: nullable_text(1000, "Notes are too long.") = None


class ClientResponse(ApiModel):
    id: str
    name: str
    engagement_type: EngagementType
    working_days_per_week: int | None
    working_hours_per_day: int | None
    email: str | None
    phone: str | None
    whatsapp: str | None
    address: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
