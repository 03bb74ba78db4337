"""Base model configuration for all data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that rejects fields it does not declare."""

    model_config = ConfigDict(frozen=True, extra="forbid")
