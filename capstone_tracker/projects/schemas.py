"""
Project schemas for API requests and responses.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import field_validator

from capstone_tracker.core.schemas import BaseSchema
from capstone_tracker.projects.models import DefenseResult
from capstone_tracker.projects.models import Project
from capstone_tracker.projects.models import ProjectStatus
from capstone_tracker.projects.models import ProjectType


class ProjectSchema(BaseSchema):
    """Full project record."""

    project_type: str
    title: str
    college: str
    department: str
    adviser: str
    members: list[str]
    description: str
    status: str
    progress: str
    defense_schedule: datetime | None = None
    venue: str = ""
    panel_members: list[str] = []
    documenter: str = ""
    defense_result: str = ""
    proposal_id: UUID | None = None
    original_id: UUID | None = None


class ProjectCreateSchema(Schema):
    """Schema for creating a project."""

    title: str
    college: str
    department: str
    adviser: str
    members: list[str]
    description: str = ""
    project_type: str = ProjectType.PROPOSAL

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Project title is required.")
        return v.strip()

    @field_validator("project_type")
    @classmethod
    def valid_project_type(cls, v: str) -> str:
        if v not in ProjectType.values:
            raise ValueError(f"Invalid project type. Choices: {', '.join(ProjectType.values)}")
        return v


class ProjectStatusUpdateSchema(Schema):
    """Schema for overwriting a project status."""

    status: str

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in ProjectStatus.values:
            raise ValueError(f"Invalid status. Choices: {', '.join(ProjectStatus.values)}")
        return v


class ProjectProgressUpdateSchema(Schema):
    """Schema for overwriting the progress label."""

    progress: str


class DefenseResultSchema(Schema):
    """Schema for judging a defense."""

    result: str

    @field_validator("result")
    @classmethod
    def valid_result(cls, v: str) -> str:
        if v not in DefenseResult.values:
            raise ValueError(f"Invalid result. Choices: {', '.join(DefenseResult.values)}")
        return v


class ProjectSummarySchema(Schema):
    """Dashboard counts."""

    total_proposals: int
    active_finals: int
    inventory_items: int
    recent: list[ProjectSchema]


def project_to_schema(project: Project) -> ProjectSchema:
    """Convert Project to schema."""
    return ProjectSchema(
        id=project.id,
        project_type=project.project_type,
        title=project.title,
        college=project.college,
        department=project.department,
        adviser=project.adviser,
        members=project.members,
        description=project.description,
        status=project.status,
        progress=project.progress,
        defense_schedule=project.defense_schedule,
        venue=project.venue,
        panel_members=project.panel_members,
        documenter=project.documenter,
        defense_result=project.defense_result,
        proposal_id=project.proposal_id,
        original_id=project.original_id,
        created=project.created,
        modified=project.modified,
    )
