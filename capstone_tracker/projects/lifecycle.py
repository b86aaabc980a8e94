"""
Project lifecycle engine.

Stage graph (fixed):

    proposal --(defense passed)--> move_to_finals --> final
    final    --(defense passed)--> move_to_inventory --> inventory

Within a stage the status goes pending -> approved | rejected. Status updates
are plain overwrites limited to the three known values; no transition guard is
applied beyond that.
"""

import logging
from typing import Any
from uuid import UUID

from django.conf import settings

from capstone_tracker.core.exceptions import ValidationError
from capstone_tracker.faculty import directory
from capstone_tracker.faculty.constants import COLLEGES
from capstone_tracker.faculty.constants import departments_for
from capstone_tracker.projects.models import DefenseResult
from capstone_tracker.projects.models import Project
from capstone_tracker.projects.models import ProjectProgress
from capstone_tracker.projects.models import ProjectStatus
from capstone_tracker.projects.models import ProjectType
from capstone_tracker.projects.repository import MutationResult
from capstone_tracker.projects.repository import ProjectRepository

logger = logging.getLogger(__name__)

DESCRIPTIVE_FIELDS = ("title", "college", "department", "adviser", "members", "description")
DEFENSE_FIELDS = ("defense_schedule", "venue", "panel_members", "documenter")


def validate_project_data(data: dict[str, Any]) -> dict[str, Any]:
    """
    Check the descriptive fields of a new project and return them cleaned.

    Raises:
        ValidationError: on the first missing or invalid field.
    """
    if not data:
        raise ValidationError("Project data is required.")

    title = (data.get("title") or "").strip()
    if not title:
        raise ValidationError("Project title is required.")

    college = data.get("college") or ""
    if not college:
        raise ValidationError("College is required.")
    if college not in COLLEGES:
        raise ValidationError("Invalid college selected.", details={"college": college})

    department = data.get("department") or ""
    if not department:
        raise ValidationError("Department is required.")
    if department not in departments_for(college):
        raise ValidationError(
            "Invalid department selected.",
            details={"college": college, "department": department},
        )

    adviser = (data.get("adviser") or "").strip()
    if not adviser:
        raise ValidationError("Adviser is required.")

    members = data.get("members") or []
    if not isinstance(members, list):
        raise ValidationError("Group members must be a list of names.", details={"members": members})
    members = [m.strip() for m in members if isinstance(m, str) and m.strip()]
    if not members:
        raise ValidationError("At least one group member is required.")

    project_type = data.get("project_type") or ""
    if project_type not in ProjectType.values:
        raise ValidationError(
            "Project type is required.",
            details={"choices": ProjectType.values},
        )

    return {
        "project_type": project_type,
        "title": title,
        "college": college,
        "department": department,
        "adviser": adviser,
        "members": members,
        "description": (data.get("description") or "").strip(),
    }


class LifecycleEngine:
    """Status, progress and stage transitions of projects."""

    def __init__(self, repository: ProjectRepository | None = None):
        self.repository = repository or ProjectRepository()

    def add_project(self, data: dict[str, Any]) -> MutationResult:
        """
        Create a project after validation and the similar-title check.

        Proposals and finals start pending / In Progress. Inventory records,
        which archive already defended work, start approved / Final Capstone
        Defended.
        """
        record = validate_project_data(data)

        if settings.CAPSTONE_STRICT_FACULTY_REFERENCES and directory.unknown_names([record["adviser"]]):
            raise ValidationError(
                "Adviser is not a known faculty member.",
                details={"adviser": record["adviser"]},
            )

        similar = self.repository.find_similar_by_title(record["title"])
        if similar:
            raise ValidationError(
                "A similar project title already exists.",
                details={"similar": [p.title for p in similar]},
            )

        if record["project_type"] == ProjectType.INVENTORY:
            record["status"] = ProjectStatus.APPROVED
            record["progress"] = ProjectProgress.FINAL_DEFENDED
        else:
            record["status"] = ProjectStatus.PENDING
            record["progress"] = ProjectProgress.IN_PROGRESS

        return self.repository.create(record)

    def update_status(self, project_id: UUID, status: str) -> MutationResult:
        """Overwrite the status. Any of the three values may follow any other."""
        if status not in ProjectStatus.values:
            raise ValidationError(
                "Invalid status.",
                details={"status": status, "choices": ProjectStatus.values},
            )
        return self.repository.update(project_id, {"status": status})

    def update_progress(self, project_id: UUID, progress: str) -> MutationResult:
        """Overwrite the free-text progress label."""
        progress = (progress or "").strip()
        if not progress:
            raise ValidationError("Progress is required.")
        return self.repository.update(project_id, {"progress": progress})

    def delete_project(self, project_id: UUID) -> MutationResult:
        return self.repository.delete(project_id)

    def set_defense_result(self, project_id: UUID, result: str) -> MutationResult:
        """
        Judge a scheduled defense.

        passed: status approved, progress advanced for the project's stage.
        failed: status rejected, progress unchanged.
        """
        if result not in DefenseResult.values:
            raise ValidationError(
                "Invalid defense result.",
                details={"result": result, "choices": DefenseResult.values},
            )

        project = self.repository.find_by_id(project_id)
        if not project.has_defense:
            raise ValidationError(
                "No defense has been scheduled for this project.",
                details={"id": str(project_id)},
            )

        if result == DefenseResult.PASSED:
            project.pass_defense()
        else:
            project.fail_defense()

        logger.info("Defense of project %s judged %s", project.id, result)
        return self.repository.save_project(project, ["status", "defense_result", "progress"])

    def move_to_finals(self, project_id: UUID) -> MutationResult:
        """Replace a proposal with a fresh final-stage record."""
        project = self.repository.find_by_id(project_id)
        self._require_type(project, ProjectType.PROPOSAL)

        final = self._descriptive_copy(project)
        final.update(
            project_type=ProjectType.FINAL,
            status=ProjectStatus.PENDING,
            progress=ProjectProgress.IN_PROGRESS,
            proposal_id=project.id,
        )
        return self.repository.move_atomic(project.id, final)

    def move_to_inventory(self, project_id: UUID) -> MutationResult:
        """Archive a final project, keeping its defense details."""
        project = self.repository.find_by_id(project_id)
        self._require_type(project, ProjectType.FINAL)

        inventory = self._descriptive_copy(project)
        inventory.update({name: getattr(project, name) for name in DEFENSE_FIELDS})
        inventory.update(
            project_type=ProjectType.INVENTORY,
            status=ProjectStatus.APPROVED,
            progress=ProjectProgress.FINAL_DEFENDED,
            original_id=project.id,
        )
        return self.repository.move_atomic(project.id, inventory)

    @staticmethod
    def _descriptive_copy(project: Project) -> dict[str, Any]:
        record = {name: getattr(project, name) for name in DESCRIPTIVE_FIELDS}
        record["members"] = list(project.members)
        return record

    @staticmethod
    def _require_type(project: Project, project_type: str) -> None:
        if project.project_type != project_type:
            raise ValidationError(
                f"Only {project_type} projects can be moved.",
                details={"id": str(project.id), "type": project.project_type},
            )
