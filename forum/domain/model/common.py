"""Base model for forum entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity. Changes go through ``model_copy(update=...)``."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # PostPath and other value objects
    )
