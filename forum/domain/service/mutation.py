"""Optimistic create-then-resolve protocol.

Creates never look for an existing row first. The insert is attempted in
a transaction and the store's constraints decide what happened:

- the insert succeeds: the new entity is returned as ``created``;
- a uniqueness constraint fires: the existing entity is re-fetched (or,
  for votes, updated) in a fresh transaction and returned;
- a foreign-key constraint fires: the missing reference is classified
  into ``InvalidParentError`` or ``MissingReferenceError``;
- anything else is a ``StorageFailureError`` and is not retried.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

import logfire

from forum.domain.error import (
    ConflictError,
    DomainError,
    InvalidParentError,
    MissingReferenceError,
    StorageError,
    StorageErrorKind,
    StorageFailureError,
)
from forum.domain.repository import TransactionManager

T = TypeVar("T")

# Foreign key on posts.parent; a violation means the parent post is gone
POST_PARENT_CONSTRAINT = "posts_parent_fkey"

# Which entity is missing when a foreign key constraint fires
REFERENCED_RESOURCES = {
    "forums_user_fkey": "User",
    "threads_author_fkey": "User",
    "threads_forum_fkey": "Forum",
    "posts_author_fkey": "User",
    "posts_forum_fkey": "Forum",
    "posts_thread_fkey": "Thread",
    "votes_nickname_fkey": "User",
    "votes_thread_fkey": "Thread",
}


class CreateOutcome(str, Enum):
    """How a create request was resolved."""

    CREATED = "created"
    CONFLICT = "conflict"  # An equal entity already existed and is returned
    UPDATED = "updated"  # An existing row was updated in place


@dataclass(frozen=True)
class CreateResult(Generic[T]):
    """Entity produced by a create together with its outcome."""

    outcome: CreateOutcome
    value: T

    @property
    def created(self) -> bool:
        return self.outcome is CreateOutcome.CREATED


def classify_storage_error(error: StorageError, resource: str) -> DomainError:
    """Translate a write rejected by the store into a domain error.

    Args:
        error: Error raised by a repository
        resource: Name of the entity being written, used in messages

    Returns:
        InvalidParentError for the post parent constraint,
        MissingReferenceError for other foreign keys,
        ConflictError for uniqueness and StorageFailureError otherwise
    """
    if error.kind is StorageErrorKind.FOREIGN_KEY:
        if error.constraint == POST_PARENT_CONSTRAINT:
            return InvalidParentError()
        referenced = REFERENCED_RESOURCES.get(error.constraint or "", "Entity")
        return MissingReferenceError(referenced, error.constraint)
    if error.kind is StorageErrorKind.UNIQUE:
        return ConflictError(f"{resource} already exists")
    return StorageFailureError(f"Failed to write {resource}: {error}")


def log_classified(error: DomainError, resource: str) -> None:
    """Report a classified write failure."""
    if isinstance(error, StorageFailureError):
        logfire.error("Storage failure", resource=resource, error=str(error))
    else:
        logfire.warn(
            "Write rejected",
            resource=resource,
            error_type=type(error).__name__,
            error=str(error),
        )


class OptimisticMutation:
    """Runs creates under the optimistic protocol."""

    def __init__(self, transactions: TransactionManager) -> None:
        """Initialize the protocol.

        Args:
            transactions: Transaction manager of the current request
        """
        self.transactions = transactions

    async def create(
        self,
        insert: Callable[[], Awaitable[T]],
        on_conflict: Callable[[], Awaitable[Optional[T]]],
        resource: str,
        conflict_outcome: CreateOutcome = CreateOutcome.CONFLICT,
    ) -> CreateResult[T]:
        """Insert, or resolve against the row that blocked the insert.

        Args:
            insert: Performs the insert; may raise StorageError
            on_conflict: Re-fetches (or updates) the existing entity after
                a uniqueness failure; returns None if it has vanished
            resource: Entity name for logs and errors
            conflict_outcome: Outcome reported when on_conflict succeeds

        Returns:
            The created or existing entity with its outcome

        Raises:
            InvalidParentError: If a referenced parent post does not exist
            MissingReferenceError: If another referenced entity does not exist
            StorageFailureError: On any other storage failure
        """
        with logfire.span("optimistic_mutation.create", resource=resource):
            try:
                async with self.transactions.transaction():
                    value = await insert()
            except StorageError as e:
                if e.kind is not StorageErrorKind.UNIQUE:
                    error = classify_storage_error(e, resource)
                    log_classified(error, resource)
                    raise error from e
                logfire.info(
                    "Create collided with existing row",
                    resource=resource,
                    constraint=e.constraint,
                )
            else:
                logfire.info("Created", resource=resource)
                return CreateResult(CreateOutcome.CREATED, value)

            try:
                async with self.transactions.transaction():
                    existing = await on_conflict()
            except StorageError as e:
                error = classify_storage_error(e, resource)
                log_classified(error, resource)
                raise error from e

            if existing is None:
                logfire.error("Conflicting row not found on re-fetch", resource=resource)
                raise StorageFailureError(
                    f"{resource} conflicted with a row that no longer exists"
                )
            return CreateResult(conflict_outcome, existing)
