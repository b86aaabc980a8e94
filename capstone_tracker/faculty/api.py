"""
Faculty directory API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller, http_get, http_post

from capstone_tracker.core.api import BaseAPI
from capstone_tracker.core.exceptions import APIException, ErrorSchema
from capstone_tracker.faculty import directory
from capstone_tracker.faculty.constants import COLLEGES, departments_for
from capstone_tracker.faculty.models import FacultyMember
from capstone_tracker.faculty.schemas import CollegeSchema, FacultyCreateSchema, FacultyMemberSchema


def faculty_to_schema(member: FacultyMember) -> FacultyMemberSchema:
    """Convert FacultyMember to schema."""
    return FacultyMemberSchema(
        id=member.id,
        name=member.name,
        college=member.college,
        department=member.department,
    )


@api_controller("/faculty", tags=["Faculty"])
class FacultyController(BaseAPI):
    """Read and append operations on the faculty directory."""

    @http_get(
        "/",
        response={200: list[FacultyMemberSchema], 503: ErrorSchema},
        url_name="faculty_list",
    )
    def list_faculty(self, request: HttpRequest):
        """List all faculty members."""
        try:
            members = directory.list_faculty()
        except APIException as exc:
            return exc.to_response()
        return 200, [faculty_to_schema(m) for m in members]

    @http_post(
        "/",
        response={201: FacultyMemberSchema, 400: ErrorSchema, 503: ErrorSchema},
        url_name="faculty_create",
    )
    def add_faculty(self, request: HttpRequest, data: FacultyCreateSchema):
        """Add a faculty member. Colleges and departments come from a fixed list."""
        try:
            member = directory.add_faculty(data.name, data.college, data.department)
        except APIException as exc:
            return exc.to_response()
        return 201, faculty_to_schema(member)

    @http_get(
        "/colleges",
        response={200: list[CollegeSchema]},
        url_name="faculty_colleges",
    )
    def list_colleges(self, request: HttpRequest):
        """List colleges with their departments."""
        return 200, [
            CollegeSchema(name=college, departments=departments_for(college))
            for college in COLLEGES
        ]

    @http_get(
        "/panel-candidates",
        response={200: list[str], 503: ErrorSchema},
        url_name="faculty_panel_candidates",
    )
    def panel_candidates(self, request: HttpRequest, adviser: str = ""):
        """Faculty names eligible for a panel, excluding the given adviser."""
        try:
            return 200, directory.list_panel_candidates(adviser)
        except APIException as exc:
            return exc.to_response()
