"""Shared pydantic configuration for the forum domain."""

from pydantic import BaseModel, ConfigDict

# Domain objects never change in place; an update is a new instance
IMMUTABLE = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class ValueObject(BaseModel):
    """Value object: no identity, two instances with equal fields are equal."""

    model_config = IMMUTABLE
