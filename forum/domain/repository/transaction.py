"""Storage transaction primitive."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Begin/commit/rollback over the request's storage handle.

    ``transaction()`` opens a unit of work that is committed when the
    block exits normally and rolled back when it raises. Units may be
    opened one after another within a request; a failed unit leaves the
    handle usable for the next one.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a unit of work.

        Usage:
            async with transactions.transaction():
                await repository.save(...)
        """
        pass
