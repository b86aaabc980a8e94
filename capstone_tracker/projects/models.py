"""
Models for capstone projects.

A single Project table holds every stage of the lifecycle; the stage is the
``project_type`` (proposal, final, inventory). Advancing a stage never edits
the type in place: the record is replaced by a new one of the successor type.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField, transition

from capstone_tracker.core.models import BaseModel


class ProjectType(models.TextChoices):
    """Lifecycle stage of a project record."""

    PROPOSAL = "proposal", _("Proposal")
    FINAL = "final", _("Final")
    INVENTORY = "inventory", _("Inventory")


class ProjectStatus(models.TextChoices):
    """Workflow status (FSM states)."""

    PENDING = "pending", _("Pending")
    APPROVED = "approved", _("Approved")
    REJECTED = "rejected", _("Rejected")


class ProjectProgress:
    """Well-known milestone labels. Progress itself is free text."""

    IN_PROGRESS = "In Progress"
    PROPOSAL_DEFENDED = "Proposal Defended"
    FINAL_DEFENDED = "Final Capstone Defended"


class DefenseResult(models.TextChoices):
    """Outcome of a judged defense."""

    PASSED = "passed", _("Passed")
    FAILED = "failed", _("Failed")


# Progress reached by each type once its defense is passed
DEFENDED_PROGRESS = {
    ProjectType.PROPOSAL: ProjectProgress.PROPOSAL_DEFENDED,
    ProjectType.FINAL: ProjectProgress.FINAL_DEFENDED,
}


class Project(BaseModel):
    """
    Capstone research project.

    Adviser, panel members and documenter are stored as faculty names and
    matched by exact equality; there is no foreign key to the directory.

    Inherits from BaseModel:
        - id: UUID primary key
        - created: creation time, set on insert
        - modified: auto-updated on save
    """

    project_type = models.CharField(
        _("type"),
        max_length=20,
        choices=ProjectType.choices,
        default=ProjectType.PROPOSAL,
    )
    title = models.CharField(
        _("title"),
        max_length=500,
    )
    college = models.CharField(
        _("college"),
        max_length=200,
    )
    department = models.CharField(
        _("department"),
        max_length=200,
    )
    adviser = models.CharField(
        _("adviser"),
        max_length=200,
    )
    members = models.JSONField(
        _("members"),
        default=list,
        help_text=_("Ordered list of group member names"),
    )
    description = models.TextField(
        _("description"),
        blank=True,
    )

    # Not protected: status may be overwritten directly by update_status
    status = FSMField(
        _("status"),
        default=ProjectStatus.PENDING,
        choices=ProjectStatus.choices,
    )
    progress = models.CharField(
        _("progress"),
        max_length=100,
        blank=True,
        default=ProjectProgress.IN_PROGRESS,
    )

    # Defense sub-record, present once scheduled
    defense_schedule = models.DateTimeField(
        _("defense schedule"),
        null=True,
        blank=True,
    )
    venue = models.CharField(
        _("venue"),
        max_length=200,
        blank=True,
    )
    panel_members = models.JSONField(
        _("panel members"),
        default=list,
        blank=True,
    )
    documenter = models.CharField(
        _("documenter"),
        max_length=200,
        blank=True,
    )
    defense_result = models.CharField(
        _("defense result"),
        max_length=10,
        choices=DefenseResult.choices,
        blank=True,
    )

    # Back-references to the record this one replaced
    proposal_id = models.UUIDField(
        _("proposal id"),
        null=True,
        blank=True,
    )
    original_id = models.UUIDField(
        _("original id"),
        null=True,
        blank=True,
    )

    class Meta:
        verbose_name = _("project")
        verbose_name_plural = _("projects")
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["defense_schedule"], name="project_defense_idx"),
            models.Index(fields=["project_type", "status"], name="project_type_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.get_project_type_display()})"

    @property
    def has_defense(self) -> bool:
        """Whether a defense has been scheduled for this project."""
        return self.defense_schedule is not None

    # FSM Transitions

    @transition(field=status, source="*", target=ProjectStatus.APPROVED)
    def approve_for_defense(self):
        """Scheduling a defense approves the project whatever its status."""
        pass

    @transition(field=status, source="*", target=ProjectStatus.APPROVED)
    def pass_defense(self):
        """Record a passed defense and advance progress for the project's stage."""
        self.defense_result = DefenseResult.PASSED
        progress = DEFENDED_PROGRESS.get(self.project_type)
        if progress:
            self.progress = progress

    @transition(field=status, source="*", target=ProjectStatus.REJECTED)
    def fail_defense(self):
        """Record a failed defense. Progress is left untouched."""
        self.defense_result = DefenseResult.FAILED
