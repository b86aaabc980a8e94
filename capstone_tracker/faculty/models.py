"""
Models for the faculty directory.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from capstone_tracker.core.models import BaseModel


class FacultyMember(BaseModel):
    """
    Faculty member who can advise projects, sit on panels or document defenses.

    Projects reference faculty by plain name (natural key), not by foreign key,
    so records are never mutated once created.
    """

    name = models.CharField(
        _("name"),
        max_length=200,
    )
    college = models.CharField(
        _("college"),
        max_length=200,
    )
    department = models.CharField(
        _("department"),
        max_length=200,
    )

    class Meta:
        verbose_name = _("faculty member")
        verbose_name_plural = _("faculty members")
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "department"],
                name="unique_faculty_name_department",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.department})"
