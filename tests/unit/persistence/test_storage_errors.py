"""Unit tests for driver error classification."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from forum.domain.error import StorageError, StorageErrorKind
from forum.persistence.errors import storage_errors, to_storage_error


class FakeDriverError(Exception):
    """Stands in for the DBAPI exception wrapped by SQLAlchemy."""

    def __init__(self, message: str, sqlstate: str | None = None):
        super().__init__(message)
        self.sqlstate = sqlstate


class FakeNativeError(Exception):
    def __init__(self, constraint_name: str):
        super().__init__(constraint_name)
        self.constraint_name = constraint_name


def integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO ...", {}, orig)


class TestToStorageError:
    """Tests for to_storage_error."""

    def test_unique_violation(self):
        orig = FakeDriverError(
            'duplicate key value violates unique constraint "users_email_key"',
            sqlstate="23505",
        )

        error = to_storage_error(integrity_error(orig))

        assert error.kind is StorageErrorKind.UNIQUE
        assert error.constraint == "users_email_key"

    def test_foreign_key_violation(self):
        orig = FakeDriverError(
            'insert or update on table "posts" violates foreign key constraint '
            '"posts_author_fkey"',
            sqlstate="23503",
        )

        error = to_storage_error(integrity_error(orig))

        assert error.kind is StorageErrorKind.FOREIGN_KEY
        assert error.constraint == "posts_author_fkey"

    def test_constraint_taken_from_native_cause(self):
        orig = FakeDriverError("violation", sqlstate="23503")
        orig.__cause__ = FakeNativeError("posts_parent_fkey")

        error = to_storage_error(integrity_error(orig))

        assert error.constraint == "posts_parent_fkey"

    def test_other_integrity_error(self):
        orig = FakeDriverError("null value in column", sqlstate="23502")

        error = to_storage_error(integrity_error(orig))

        assert error.kind is StorageErrorKind.OTHER

    def test_non_integrity_error_is_other(self):
        orig = FakeDriverError("connection lost", sqlstate="08006")

        error = to_storage_error(OperationalError("SELECT 1", {}, orig))

        assert error.kind is StorageErrorKind.OTHER
        assert error.constraint is None


def test_storage_errors_context_wraps_driver_errors():
    orig = FakeDriverError(
        'violates unique constraint "forums_pkey"', sqlstate="23505"
    )

    with pytest.raises(StorageError) as exc_info:
        with storage_errors():
            raise integrity_error(orig)

    assert exc_info.value.kind is StorageErrorKind.UNIQUE
    assert exc_info.value.constraint == "forums_pkey"
    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_storage_errors_context_passes_other_exceptions():
    with pytest.raises(KeyError):
        with storage_errors():
            raise KeyError("boom")
