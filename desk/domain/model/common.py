"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for desk entities.

    Entities are immutable snapshots of a stored row; the store hands back a
    new copy (``model_copy``) when it assigns an id.
    """

    model_config = ConfigDict(frozen=True)
