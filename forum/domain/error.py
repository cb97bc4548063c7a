"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a request clashes with existing data."""

    pass


class InvalidParentError(ConflictError):
    """Raised when a post's parent is missing or lives in another thread."""

    def __init__(self, parent_id: int | None = None, thread_id: int | None = None):
        self.parent_id = parent_id
        self.thread_id = thread_id
        if parent_id is None:
            super().__init__("Parent post not found in thread")
        else:
            super().__init__(f"Parent post {parent_id} not found in thread {thread_id}")


class MissingReferenceError(DomainError):
    """Raised when a create references an owning entity that does not exist."""

    def __init__(self, resource: str, constraint: str | None = None):
        self.resource = resource
        self.constraint = constraint
        super().__init__(f"Referenced {resource} does not exist")


class UnknownCursorError(DomainError):
    """Raised when a pagination cursor points at a post that does not exist."""

    def __init__(self, since: int):
        self.since = since
        super().__init__(f"Cursor post not found: {since}")


class StorageFailureError(DomainError):
    """Unclassified failure of the storage layer."""

    pass


class StorageErrorKind(str, Enum):
    """Kind of constraint a storage write violated."""

    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


class StorageError(Exception):
    """Raised by repositories when a write is rejected by the store.

    Attributes:
        kind: Which class of constraint failed
        constraint: Name of the violated constraint, if known
    """

    def __init__(
        self, kind: StorageErrorKind, constraint: str | None = None, message: str = ""
    ):
        self.kind = kind
        self.constraint = constraint
        super().__init__(message or f"{kind.value} violation ({constraint})")
