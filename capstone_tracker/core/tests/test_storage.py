"""
Tests for storage error translation.
"""

import pytest
from django.db import DatabaseError
from django.db import DataError
from django.db import IntegrityError
from django.db import InterfaceError
from django.db import OperationalError

from capstone_tracker.core.exceptions import StorageError
from capstone_tracker.core.exceptions import StorageFailure
from capstone_tracker.core.storage import classify_database_error
from capstone_tracker.core.storage import translate_storage_errors


class DriverError(Exception):
    def __init__(self, sqlstate):
        super().__init__("driver error")
        self.sqlstate = sqlstate


class TestClassifyDatabaseError:
    """Tests for classify_database_error."""

    @pytest.mark.parametrize(
        ("exc", "reason"),
        [
            (OperationalError("could not connect to server"), StorageFailure.UNAVAILABLE),
            (InterfaceError("connection already closed"), StorageFailure.UNAVAILABLE),
            (IntegrityError("UNIQUE constraint failed"), StorageFailure.PRECONDITION_FAILED),
            (DataError("value too long"), StorageFailure.INVALID_ARGUMENT),
            (DatabaseError("something odd"), StorageFailure.UNKNOWN),
            (OperationalError("permission denied for table projects_project"), StorageFailure.PERMISSION_DENIED),
        ],
    )
    def test_classification(self, exc, reason):
        assert classify_database_error(exc) == reason

    def test_sqlstate_of_cause(self):
        exc = DatabaseError("insufficient privilege")
        exc.__cause__ = DriverError("42501")

        assert classify_database_error(exc) == StorageFailure.PERMISSION_DENIED


class TestTranslateStorageErrors:
    """Tests for the translate_storage_errors context manager."""

    def test_database_error_becomes_storage_error(self):
        with pytest.raises(StorageError) as exc_info:
            with translate_storage_errors("list_projects"):
                raise OperationalError("down")

        error = exc_info.value
        assert error.reason == StorageFailure.UNAVAILABLE
        assert error.status_code == 503
        assert error.code == "STORAGE_UNAVAILABLE"
        assert error.details == {"operation": "list_projects"}

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with translate_storage_errors("list_projects"):
                raise KeyError("title")

    @pytest.mark.parametrize(
        ("reason", "status"),
        [
            (StorageFailure.PERMISSION_DENIED, 403),
            (StorageFailure.UNAVAILABLE, 503),
            (StorageFailure.PRECONDITION_FAILED, 409),
            (StorageFailure.INVALID_ARGUMENT, 400),
            (StorageFailure.UNKNOWN, 503),
        ],
    )
    def test_status_code_by_reason(self, reason, status):
        status_code, body = StorageError(reason).to_response()

        assert status_code == status
        assert body.code == f"STORAGE_{reason.name}"
