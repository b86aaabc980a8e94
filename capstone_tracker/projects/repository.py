"""
Project repository: the single source of truth for project records.

Every mutating call returns the fresh, authoritative project list alongside
the affected record, so callers never keep a cache of their own.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from uuid import UUID

from django.conf import settings
from django.db import transaction

from capstone_tracker.core.exceptions import NotFoundError
from capstone_tracker.core.exceptions import StorageError
from capstone_tracker.core.exceptions import ValidationError
from capstone_tracker.core.storage import translate_storage_errors
from capstone_tracker.projects.models import Project
from capstone_tracker.projects.models import ProjectStatus
from capstone_tracker.projects.models import ProjectType

logger = logging.getLogger(__name__)

# Fields callers may change through update(); type and back-references are
# only ever set at insert time.
EDITABLE_FIELDS = frozenset(
    {
        "title",
        "college",
        "department",
        "adviser",
        "members",
        "description",
        "status",
        "progress",
        "defense_schedule",
        "venue",
        "panel_members",
        "documenter",
        "defense_result",
    }
)

RECENT_ACTIVITY_SIZE = 5


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a mutating repository call."""

    project: Project | None
    projects: list[Project] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectSummary:
    """Dashboard counts."""

    total_proposals: int
    active_finals: int
    inventory_items: int
    recent: list[Project]


class ProjectRepository:
    """Create, read, update, delete and move project records."""

    def list_projects(
        self,
        project_type: str | None = None,
        status: str | None = None,
        college: str | None = None,
        department: str | None = None,
        search: str | None = None,
    ) -> list[Project]:
        """Return projects newest first, optionally filtered."""
        with translate_storage_errors("list_projects"):
            projects = Project.objects.all()
            if project_type:
                projects = projects.filter(project_type=project_type)
            if status:
                projects = projects.filter(status=status)
            if college:
                projects = projects.filter(college=college)
            if department:
                projects = projects.filter(department=department)
            if search:
                projects = projects.filter(title__icontains=search.strip())
            return list(projects.order_by("-created"))

    def find_by_id(self, project_id: UUID) -> Project:
        """Fetch one project or raise NotFoundError."""
        with translate_storage_errors("find_project"):
            project = Project.objects.filter(id=project_id).first()
        if project is None:
            raise NotFoundError("Project not found.", details={"id": str(project_id)})
        return project

    def create(self, data: dict[str, Any]) -> MutationResult:
        """Insert a project. Creation time and id are assigned here."""
        with translate_storage_errors("create_project"):
            project = Project.objects.create(**data)
        logger.info("Created %s project %s", project.project_type, project.id)
        return MutationResult(project=project, projects=self.list_projects())

    def update(self, project_id: UUID, fields: dict[str, Any]) -> MutationResult:
        """Overwrite the given fields only; last write wins."""
        unknown = sorted(set(fields) - EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(
                "These fields cannot be updated.",
                details={"fields": unknown},
            )

        project = self.find_by_id(project_id)
        if not fields:
            return MutationResult(project=project, projects=self.list_projects())

        for name, value in fields.items():
            setattr(project, name, value)
        return self.save_project(project, list(fields))

    def save_project(self, project: Project, fields: list[str]) -> MutationResult:
        """Persist fields already set on a loaded instance (FSM transitions)."""
        with translate_storage_errors("update_project"):
            with transaction.atomic():
                if not Project.objects.filter(id=project.id).exists():
                    raise NotFoundError("Project not found.", details={"id": str(project.id)})
                project.save(update_fields=fields)
        logger.info("Updated project %s: %s", project.id, ", ".join(sorted(fields)))
        return MutationResult(project=project, projects=self.list_projects())

    def delete(self, project_id: UUID) -> MutationResult:
        """Delete a project."""
        with translate_storage_errors("delete_project"):
            deleted, _ = Project.objects.filter(id=project_id).delete()
        if not deleted:
            raise NotFoundError("Project not found.", details={"id": str(project_id)})
        logger.info("Deleted project %s", project_id)
        return MutationResult(project=None, projects=self.list_projects())

    def move_atomic(self, delete_id: UUID, new_data: dict[str, Any]) -> MutationResult:
        """
        Replace one record by another in a single transaction.

        The insert is rolled back if the source record no longer exists.
        """
        with translate_storage_errors("move_project"):
            with transaction.atomic():
                project = Project.objects.create(**new_data)
                deleted, _ = Project.objects.filter(id=delete_id).delete()
                if not deleted:
                    raise NotFoundError(
                        "Project not found.",
                        details={"id": str(delete_id)},
                    )
        logger.info(
            "Moved project %s to %s record %s",
            delete_id,
            project.project_type,
            project.id,
        )
        return MutationResult(project=project, projects=self.list_projects())

    def find_similar_by_title(self, text: str) -> list[Project]:
        """
        Projects whose title contains, or is contained in, ``text``.

        Matching is case-insensitive. Best effort: a storage failure yields an
        empty result instead of an error.
        """
        needle = (text or "").strip().lower()
        if len(needle) < settings.CAPSTONE_SIMILAR_TITLE_MIN_LENGTH:
            return []

        try:
            with translate_storage_errors("find_similar_by_title"):
                projects = list(Project.objects.order_by("-created"))
        except StorageError as exc:
            logger.warning("Similar title search failed for %r (%s)", text, exc.reason.value)
            return []

        return [
            project
            for project in projects
            if needle in project.title.lower() or project.title.lower() in needle
        ]

    def summary(self) -> ProjectSummary:
        """Counts shown on the dashboard plus the most recent active projects."""
        with translate_storage_errors("project_summary"):
            return ProjectSummary(
                total_proposals=Project.objects.filter(
                    project_type=ProjectType.PROPOSAL
                ).count(),
                active_finals=Project.objects.filter(
                    project_type=ProjectType.FINAL,
                    status=ProjectStatus.APPROVED,
                ).count(),
                inventory_items=Project.objects.filter(
                    project_type=ProjectType.INVENTORY
                ).count(),
                recent=list(
                    Project.objects.exclude(project_type=ProjectType.INVENTORY)
                    .order_by("-created")[:RECENT_ACTIVITY_SIZE]
                ),
            )
