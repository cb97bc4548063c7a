"""Service status snapshot."""

from pydantic import Field

from forum.domain.model.common import DomainModel


class ServiceStatus(DomainModel):
    """Row counts across the store."""

    users: int = Field(default=0, ge=0)
    forums: int = Field(default=0, ge=0)
    threads: int = Field(default=0, ge=0)
    posts: int = Field(default=0, ge=0)
