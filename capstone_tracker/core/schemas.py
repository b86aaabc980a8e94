"""
Base schemas shared by every API controller.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema


class BaseSchema(Schema):
    """
    Base schema with the fields every BaseModel carries.
    """

    id: UUID
    created: datetime
    modified: datetime


class MessageSchema(Schema):
    """Schema for simple message responses."""

    message: str
