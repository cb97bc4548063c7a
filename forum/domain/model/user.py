"""User aggregate root.

Users are identified by their nickname; the email address is unique too.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname


class User(DomainModel):
    """Forum member."""

    nickname: Nickname = Field(min_length=1)
    fullname: str
    about: str = ""
    email: str = Field(min_length=1)
