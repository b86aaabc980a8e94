"""
Defense scheduling with calendar capacity and panel rules.

A defense is accepted only when, in this order:

1. the date-time is not in the past
2. a venue is given
3. two or three panel members are given
4. a documenter is given
5. panel members, documenter and adviser are four distinct people
6. fewer than the daily maximum of defenses are already on that day
7. a second, independent day-availability read still reports the day free

Checks 6 and 7 are separate reads and may race with a concurrent write; the
daily cap can be exceeded by one in that case.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from dataclasses import field
from datetime import date
from datetime import datetime
from datetime import time
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from capstone_tracker.core.exceptions import ConflictError
from capstone_tracker.core.exceptions import ValidationError
from capstone_tracker.core.storage import translate_storage_errors
from capstone_tracker.faculty import directory
from capstone_tracker.projects.models import Project
from capstone_tracker.projects.repository import ProjectRepository

logger = logging.getLogger(__name__)

MIN_PANEL_SIZE = 2
MAX_PANEL_SIZE = 3

SCHEDULE_FIELDS = ["defense_schedule", "venue", "panel_members", "documenter", "status"]


@dataclass(frozen=True)
class DefenseDetails:
    """Who and where of a defense."""

    panel_members: list[str]
    documenter: str
    venue: str


@dataclass(frozen=True)
class ScheduleOutcome:
    """Result of a committed scheduling request."""

    project: Project
    defenses_on_day: int
    warning: str | None = None
    projects: list[Project] = field(default_factory=list)


def as_aware(when: datetime) -> datetime:
    """Interpret naive date-times in the current time zone."""
    if timezone.is_naive(when):
        return timezone.make_aware(when)
    return when


def local_day(when: datetime) -> date:
    """Calendar day of ``when`` in the current time zone."""
    return timezone.localtime(as_aware(when)).date()


class DefenseScheduler:
    """Validates and commits defense assignments."""

    def __init__(self, repository: ProjectRepository | None = None):
        self.repository = repository or ProjectRepository()

    @property
    def max_per_day(self) -> int:
        return settings.CAPSTONE_MAX_DEFENSES_PER_DAY

    def count_defenses_on_day(self, when: datetime) -> int:
        """Number of projects with a defense on the same calendar day."""
        day = local_day(when)
        with translate_storage_errors("count_defenses_on_day"):
            return Project.objects.filter(defense_schedule__date=day).count()

    def check_day_availability(self, when: datetime) -> bool:
        """Whether the day of ``when`` still has room for another defense."""
        day = local_day(when)
        start = timezone.make_aware(datetime.combine(day, time.min))
        end = timezone.make_aware(datetime.combine(day, time.max))
        with translate_storage_errors("check_day_availability"):
            booked = Project.objects.filter(
                defense_schedule__gte=start,
                defense_schedule__lte=end,
            ).count()
        return booked < self.max_per_day

    def schedule(self, project_id: UUID, when: datetime, details: DefenseDetails) -> ScheduleOutcome:
        """
        Schedule the defense of a project and approve it.

        Raises:
            ConflictError: past date, panel overlap, or a full day.
            ValidationError: missing venue, panel members or documenter.
            NotFoundError: the project does not exist.
        """
        when = as_aware(when)
        if when < timezone.now():
            self._reject(project_id, "past date")
            raise ConflictError(
                "Cannot schedule defense for past dates.",
                details={"date": when.isoformat()},
            )

        venue = (details.venue or "").strip()
        if not venue:
            raise ValidationError("Please enter a venue.")

        panel = [name.strip() for name in details.panel_members if name and name.strip()]
        if len(panel) < MIN_PANEL_SIZE:
            raise ValidationError("Please select at least two panel members.")
        if len(panel) > MAX_PANEL_SIZE:
            raise ValidationError("A defense panel has at most three members.")

        documenter = (details.documenter or "").strip()
        if not documenter:
            raise ValidationError("Please select a documenter.")

        project = self.repository.find_by_id(project_id)
        self._check_distinct(panel, documenter, project.adviser)

        if settings.CAPSTONE_STRICT_FACULTY_REFERENCES:
            unknown = directory.unknown_names([*panel, documenter])
            if unknown:
                raise ValidationError(
                    "Panel members and documenter must be known faculty members.",
                    details={"unknown": unknown},
                )

        count = self.count_defenses_on_day(when)
        if count >= self.max_per_day:
            self._reject(project_id, f"day full ({count})")
            raise ConflictError(
                f"This date has reached the maximum number of scheduled defenses ({self.max_per_day}).",
                details={"date": local_day(when).isoformat(), "scheduled": count},
            )

        warning = None
        if count == self.max_per_day - 1:
            warning = f"Warning: This date already has {count} scheduled defenses."
            logger.warning("Defense day %s is near capacity (%s)", local_day(when), count)

        if not self.check_day_availability(when):
            self._reject(project_id, "day no longer available")
            raise ConflictError(
                "This date is no longer available.",
                details={"date": local_day(when).isoformat()},
            )

        project.defense_schedule = when
        project.venue = venue
        project.panel_members = panel
        project.documenter = documenter
        project.approve_for_defense()

        result = self.repository.save_project(project, SCHEDULE_FIELDS)
        logger.info("Scheduled defense of project %s on %s at %s", project.id, when.isoformat(), venue)
        return ScheduleOutcome(
            project=result.project,
            defenses_on_day=count,
            warning=warning,
            projects=result.projects,
        )

    @staticmethod
    def _check_distinct(panel: list[str], documenter: str, adviser: str) -> None:
        repeated = sorted(name for name, seen in Counter(panel).items() if seen > 1)
        if repeated:
            raise ConflictError(
                "Panel members must be distinct.",
                details={"repeated": repeated},
            )
        if documenter in panel:
            raise ConflictError(
                "The documenter must differ from every panel member.",
                details={"documenter": documenter},
            )
        if adviser in panel or adviser == documenter:
            raise ConflictError(
                "The adviser cannot be a panel member or the documenter.",
                details={"adviser": adviser},
            )

    @staticmethod
    def _reject(project_id: UUID, reason: str) -> None:
        logger.warning("Rejected defense schedule for project %s: %s", project_id, reason)
