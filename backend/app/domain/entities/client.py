"""Domain entity — a customer the user works for."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from app.domain.exceptions import ValidationError


class EngagementType(str, Enum):
    """How the work for a client is billed."""

    TIME_BASED = "TIME_BASED"
    PROJECT_BASED = "PROJECT_BASED"


@dataclass
class Client:
    """Top of the Client → Project → Codebase hierarchy, owned directly by a user."""

    user_id: str
    name: str
    engagement_type: EngagementType
    working_days_per_week: int | None = None
    working_hours_per_day: int | None = None
    email: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply_engagement_rules(self) -> None:
        """Enforce the working-schedule invariant for the engagement type.

        Time based clients need both working fields; project based clients
        never keep them.
        """
        if self.engagement_type == EngagementType.PROJECT_BASED:
            self.working_days_per_week = None
            self.working_hours_per_day = None
            return

        errors: dict[str, list[str]] = {}
        if self.working_days_per_week is None:
            errors["workingDaysPerWeek"] = [
                "Working days are required for time based engagement."
            ]
        if self.working_hours_per_day is None:
            errors["workingHoursPerDay"] = [
                "Working hours are required for time based engagement."
            ]
        if errors:
            first = next(iter(errors.values()))[0]
            raise ValidationError(first, errors)
