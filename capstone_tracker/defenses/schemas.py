"""
Defense scheduling schemas.
"""

from datetime import date
from datetime import datetime

from ninja import Schema
from pydantic import Field

from capstone_tracker.projects.schemas import ProjectSchema


class DefenseScheduleSchema(Schema):
    """Schema for scheduling a defense."""

    date_time: datetime
    venue: str = ""
    panel_members: list[str] = Field(default_factory=list)
    documenter: str = ""


class ScheduleOutcomeSchema(Schema):
    """Committed defense with the day's load before it was added."""

    project: ProjectSchema
    defenses_on_day: int
    warning: str | None = None


class DayAvailabilitySchema(Schema):
    """Defense load of one calendar day."""

    day: date
    scheduled: int
    available: bool
