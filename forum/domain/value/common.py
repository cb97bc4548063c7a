"""Value object bases.

Values are frozen and compared by content: two cursors with the same
``since``, ``limit`` and ``desc`` are the same cursor.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Frozen multi-field value, such as a cursor or a thread key."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Frozen wrapper around a single value, held in ``.root``.

    Dumps as the bare value, so a ``PostPath`` serializes to its id list.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
