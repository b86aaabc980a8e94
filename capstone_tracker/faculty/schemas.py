"""
Faculty directory schemas for API requests and responses.
"""

from uuid import UUID

from ninja import Schema
from pydantic import field_validator


class FacultyMemberSchema(Schema):
    """Schema for a faculty member."""

    id: UUID
    name: str
    college: str
    department: str


class FacultyCreateSchema(Schema):
    """Schema for adding a faculty member."""

    name: str
    college: str
    department: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Faculty name is required.")
        return v.strip()


class CollegeSchema(Schema):
    """A college with its selectable departments."""

    name: str
    departments: list[str]
