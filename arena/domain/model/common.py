"""Base model for registry records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable registry record.

    Changes are made with ``model_copy(update=...)`` in the repositories, never
    by assignment.
    """

    model_config = ConfigDict(frozen=True)
