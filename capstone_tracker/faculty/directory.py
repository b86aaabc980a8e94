"""
Faculty directory service.

The directory is append-only: members can be listed and added, never updated
or removed. Other components reference faculty by exact name.
"""

import logging

from capstone_tracker.core.exceptions import ValidationError
from capstone_tracker.core.storage import translate_storage_errors
from capstone_tracker.faculty.constants import COLLEGES
from capstone_tracker.faculty.constants import departments_for
from capstone_tracker.faculty.models import FacultyMember

logger = logging.getLogger(__name__)


def list_faculty() -> list[FacultyMember]:
    """Return every faculty member, ordered by name."""
    with translate_storage_errors("list_faculty"):
        return list(FacultyMember.objects.all())


def add_faculty(name: str, college: str, department: str) -> FacultyMember:
    """
    Add a faculty member to the directory.

    Raises:
        ValidationError: empty name, unknown college, department outside the
            college, or a member with the same name already in the department.
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Faculty name is required.")
    if college not in COLLEGES:
        raise ValidationError("Invalid college selected.", details={"college": college})
    if department not in departments_for(college):
        raise ValidationError(
            "Invalid department selected.",
            details={"college": college, "department": department},
        )

    with translate_storage_errors("add_faculty"):
        if FacultyMember.objects.filter(name=name, department=department).exists():
            raise ValidationError(
                "Faculty member already exists in this department.",
                details={"name": name, "department": department},
            )
        member = FacultyMember.objects.create(
            name=name,
            college=college,
            department=department,
        )

    logger.info("Added faculty member %s to %s", member.name, member.department)
    return member


def find_by_name(name: str) -> list[FacultyMember]:
    """Look up faculty by natural key. A name may exist in several departments."""
    with translate_storage_errors("find_faculty_by_name"):
        return list(FacultyMember.objects.filter(name=name))


def unknown_names(names: list[str]) -> list[str]:
    """Return the names that match no faculty member, preserving order."""
    with translate_storage_errors("check_faculty_names"):
        known = set(
            FacultyMember.objects.filter(name__in=names).values_list("name", flat=True)
        )
    return [name for name in names if name not in known]


def list_panel_candidates(adviser: str) -> list[str]:
    """
    Faculty names eligible for a defense panel or as documenter.

    The project's adviser is removed from the pool before any selection.
    """
    with translate_storage_errors("list_panel_candidates"):
        names = FacultyMember.objects.exclude(name=adviser).values_list("name", flat=True)
        # Same person may be listed under two departments
        return list(dict.fromkeys(names))
