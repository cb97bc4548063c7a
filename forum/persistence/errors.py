"""Translation of database driver errors into storage errors.

Repositories wrap their writes in ``storage_errors()`` so that callers only
ever see ``StorageError`` with a kind and, for constraint violations, the
name of the constraint that fired.
"""

import re
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError

from forum.domain.error import StorageError, StorageErrorKind

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

_CONSTRAINT_RE = re.compile(r'constraint "(\w+)"')


def _sqlstate(error: DBAPIError) -> Optional[str]:
    """SQLSTATE of the driver error, as exposed by asyncpg or psycopg."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _constraint_name(error: DBAPIError) -> Optional[str]:
    """Name of the violated constraint, if the driver reports one."""
    orig = error.orig
    # asyncpg keeps the native exception as the cause of the adapted one
    cause = getattr(orig, "__cause__", None)
    name = getattr(cause, "constraint_name", None)
    if name:
        return name
    diag = getattr(orig, "diag", None)
    name = getattr(diag, "constraint_name", None)
    if name:
        return name
    match = _CONSTRAINT_RE.search(str(orig))
    return match.group(1) if match else None


def to_storage_error(error: DBAPIError) -> StorageError:
    """Classify a driver error.

    Args:
        error: Error raised by SQLAlchemy

    Returns:
        StorageError of kind UNIQUE, FOREIGN_KEY or OTHER
    """
    sqlstate = _sqlstate(error)
    if isinstance(error, IntegrityError) and sqlstate == UNIQUE_VIOLATION:
        kind = StorageErrorKind.UNIQUE
    elif isinstance(error, IntegrityError) and sqlstate == FOREIGN_KEY_VIOLATION:
        kind = StorageErrorKind.FOREIGN_KEY
    else:
        kind = StorageErrorKind.OTHER
    return StorageError(kind, _constraint_name(error), str(error.orig))


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise driver errors raised in the block as StorageError."""
    try:
        yield
    except DBAPIError as e:
        raise to_storage_error(e) from e
