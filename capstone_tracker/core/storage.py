"""
Translation of database failures into typed storage errors.

Every repository access goes through ``translate_storage_errors`` so that
callers only ever see ``StorageError`` for persistence problems, never a raw
``django.db`` exception.
"""

import logging
from contextlib import contextmanager

from django.db import DatabaseError
from django.db import DataError
from django.db import IntegrityError
from django.db import InterfaceError
from django.db import OperationalError

from capstone_tracker.core.exceptions import StorageError
from capstone_tracker.core.exceptions import StorageFailure

logger = logging.getLogger(__name__)

# SQLSTATE for insufficient_privilege
PERMISSION_DENIED_SQLSTATE = "42501"


def classify_database_error(exc: DatabaseError) -> StorageFailure:
    """Map a database exception onto a storage failure reason."""
    cause = exc.__cause__
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate == PERMISSION_DENIED_SQLSTATE or "permission denied" in str(exc).lower():
        return StorageFailure.PERMISSION_DENIED
    if isinstance(exc, (OperationalError, InterfaceError)):
        return StorageFailure.UNAVAILABLE
    if isinstance(exc, IntegrityError):
        return StorageFailure.PRECONDITION_FAILED
    if isinstance(exc, DataError):
        return StorageFailure.INVALID_ARGUMENT
    return StorageFailure.UNKNOWN


@contextmanager
def translate_storage_errors(operation: str):
    """Re-raise database errors raised inside the block as ``StorageError``."""
    try:
        yield
    except DatabaseError as exc:
        reason = classify_database_error(exc)
        logger.exception("Storage failure during %s (%s)", operation, reason.value)
        raise StorageError(reason, details={"operation": operation}) from exc
