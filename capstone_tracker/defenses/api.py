"""
Defense scheduling API controller.
"""

from datetime import datetime
from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller, http_get, http_post

from capstone_tracker.core.api import BaseAPI
from capstone_tracker.core.exceptions import APIException, ErrorSchema
from capstone_tracker.defenses.scheduler import DefenseDetails, DefenseScheduler, local_day
from capstone_tracker.defenses.schemas import DayAvailabilitySchema, DefenseScheduleSchema, ScheduleOutcomeSchema
from capstone_tracker.projects.schemas import project_to_schema

scheduler = DefenseScheduler()


@api_controller("/defenses", tags=["Defenses"])
class DefenseController(BaseAPI):
    """Defense calendar and scheduling."""

    @http_get(
        "/availability",
        response={200: DayAvailabilitySchema, 503: ErrorSchema},
        url_name="defenses_availability",
    )
    def availability(self, request: HttpRequest, date_time: datetime):
        """
        Load of the calendar day containing ``date_time``.

        ``available`` comes from the day-availability check, ``scheduled``
        from the day count; both are independent reads.
        """
        try:
            scheduled = scheduler.count_defenses_on_day(date_time)
            available = scheduler.check_day_availability(date_time)
        except APIException as exc:
            return exc.to_response()
        return 200, DayAvailabilitySchema(
            day=local_day(date_time),
            scheduled=scheduled,
            available=available,
        )

    @http_post(
        "/{project_id}",
        response={
            200: ScheduleOutcomeSchema,
            400: ErrorSchema,
            403: ErrorSchema,
            404: ErrorSchema,
            409: ErrorSchema,
            503: ErrorSchema,
        },
        url_name="defenses_schedule",
    )
    def schedule_defense(self, request: HttpRequest, project_id: UUID, data: DefenseScheduleSchema):
        """Schedule the defense of a project. Approves the project on success."""
        details = DefenseDetails(
            panel_members=data.panel_members,
            documenter=data.documenter,
            venue=data.venue,
        )
        try:
            outcome = scheduler.schedule(project_id, data.date_time, details)
        except APIException as exc:
            return exc.to_response()
        return 200, ScheduleOutcomeSchema(
            project=project_to_schema(outcome.project),
            defenses_on_day=outcome.defenses_on_day,
            warning=outcome.warning,
        )
