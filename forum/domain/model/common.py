"""Entity base class."""

from pydantic import BaseModel

from forum.domain.value.common import IMMUTABLE


class DomainModel(BaseModel):
    """Base for posts, comments, votes and authors.

    Field constraints (lengths, discriminators) are checked on construction,
    so an entity that exists is valid.
    """

    model_config = IMMUTABLE
