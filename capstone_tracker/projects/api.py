"""
Projects API controller.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from capstone_tracker.core.api import BaseAPI
from capstone_tracker.core.exceptions import APIException
from capstone_tracker.core.exceptions import ErrorSchema
from capstone_tracker.core.schemas import MessageSchema
from capstone_tracker.projects.lifecycle import LifecycleEngine
from capstone_tracker.projects.schemas import DefenseResultSchema
from capstone_tracker.projects.schemas import ProjectCreateSchema
from capstone_tracker.projects.schemas import ProjectProgressUpdateSchema
from capstone_tracker.projects.schemas import ProjectSchema
from capstone_tracker.projects.schemas import ProjectStatusUpdateSchema
from capstone_tracker.projects.schemas import ProjectSummarySchema
from capstone_tracker.projects.schemas import project_to_schema

engine = LifecycleEngine()

MUTATION_RESPONSES = {
    200: ProjectSchema,
    400: ErrorSchema,
    403: ErrorSchema,
    404: ErrorSchema,
    409: ErrorSchema,
    503: ErrorSchema,
}


@api_controller("/projects", tags=["Projects"])
class ProjectController(BaseAPI):
    """Project records and their lifecycle."""

    @http_get(
        "/",
        response={200: list[ProjectSchema], 503: ErrorSchema},
        url_name="projects_list",
    )
    def list_projects(
        self,
        request: HttpRequest,
        project_type: str | None = None,
        status: str | None = None,
        college: str | None = None,
        department: str | None = None,
        search: str | None = None,
    ):
        """
        List projects, newest first.

        Optional filters:
        - project_type: proposal, final or inventory
        - status: pending, approved or rejected
        - college / department: exact match
        - search: case-insensitive title containment
        """
        try:
            projects = engine.repository.list_projects(
                project_type=project_type,
                status=status,
                college=college,
                department=department,
                search=search,
            )
        except APIException as exc:
            return exc.to_response()
        return 200, [project_to_schema(p) for p in projects]

    @http_get(
        "/summary",
        response={200: ProjectSummarySchema, 503: ErrorSchema},
        url_name="projects_summary",
    )
    def summary(self, request: HttpRequest):
        """Dashboard counts and recent activity."""
        try:
            summary = engine.repository.summary()
        except APIException as exc:
            return exc.to_response()
        return 200, ProjectSummarySchema(
            total_proposals=summary.total_proposals,
            active_finals=summary.active_finals,
            inventory_items=summary.inventory_items,
            recent=[project_to_schema(p) for p in summary.recent],
        )

    @http_get(
        "/similar",
        response={200: list[ProjectSchema]},
        url_name="projects_similar",
    )
    def similar_projects(self, request: HttpRequest, title: str = ""):
        """Projects with a title similar to the given text (best effort)."""
        return 200, [project_to_schema(p) for p in engine.repository.find_similar_by_title(title)]

    @http_get(
        "/{project_id}",
        response={200: ProjectSchema, 404: ErrorSchema, 503: ErrorSchema},
        url_name="projects_detail",
    )
    def get_project(self, request: HttpRequest, project_id: UUID):
        """Get project details."""
        try:
            project = engine.repository.find_by_id(project_id)
        except APIException as exc:
            return exc.to_response()
        return 200, project_to_schema(project)

    @http_post(
        "/",
        response={201: ProjectSchema, 400: ErrorSchema, 403: ErrorSchema, 409: ErrorSchema, 503: ErrorSchema},
        url_name="projects_create",
    )
    def create_project(self, request: HttpRequest, data: ProjectCreateSchema):
        """Create a project. Rejected when a similar title already exists."""
        try:
            result = engine.add_project(data.model_dump())
        except APIException as exc:
            return exc.to_response()
        return 201, project_to_schema(result.project)

    @http_put(
        "/{project_id}/status",
        response=MUTATION_RESPONSES,
        url_name="projects_status",
    )
    def update_status(self, request: HttpRequest, project_id: UUID, data: ProjectStatusUpdateSchema):
        """Overwrite the project status."""
        try:
            result = engine.update_status(project_id, data.status)
        except APIException as exc:
            return exc.to_response()
        return 200, project_to_schema(result.project)

    @http_put(
        "/{project_id}/progress",
        response=MUTATION_RESPONSES,
        url_name="projects_progress",
    )
    def update_progress(self, request: HttpRequest, project_id: UUID, data: ProjectProgressUpdateSchema):
        """Overwrite the progress label."""
        try:
            result = engine.update_progress(project_id, data.progress)
        except APIException as exc:
            return exc.to_response()
        return 200, project_to_schema(result.project)

    @http_delete(
        "/{project_id}",
        response={200: MessageSchema, 403: ErrorSchema, 404: ErrorSchema, 503: ErrorSchema},
        url_name="projects_delete",
    )
    def delete_project(self, request: HttpRequest, project_id: UUID):
        """Delete a project."""
        try:
            engine.delete_project(project_id)
        except APIException as exc:
            return exc.to_response()
        return 200, MessageSchema(message="Project deleted.")

    @http_post(
        "/{project_id}/defense-result",
        response=MUTATION_RESPONSES,
        url_name="projects_defense_result",
    )
    def set_defense_result(self, request: HttpRequest, project_id: UUID, data: DefenseResultSchema):
        """Record whether the scheduled defense was passed or failed."""
        try:
            result = engine.set_defense_result(project_id, data.result)
        except APIException as exc:
            return exc.to_response()
        return 200, project_to_schema(result.project)

    @http_post(
        "/{project_id}/move-to-finals",
        response={**MUTATION_RESPONSES, 201: ProjectSchema},
        url_name="projects_move_to_finals",
    )
    def move_to_finals(self, request: HttpRequest, project_id: UUID):
        """Replace a proposal with a new final project."""
        try:
            result = engine.move_to_finals(project_id)
        except APIException as exc:
            return exc.to_response()
        return 201, project_to_schema(result.project)

    @http_post(
        "/{project_id}/move-to-inventory",
        response={**MUTATION_RESPONSES, 201: ProjectSchema},
        url_name="projects_move_to_inventory",
    )
    def move_to_inventory(self, request: HttpRequest, project_id: UUID):
        """Archive a final project into the inventory."""
        try:
            result = engine.move_to_inventory(project_id)
        except APIException as exc:
            return exc.to_response()
        return 201, project_to_schema(result.project)
