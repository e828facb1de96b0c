"""Base model for the engine's domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for catalog entries, associations and ranking results.

    Instances are snapshots of store rows or computed results; updates build
    a new instance with ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
