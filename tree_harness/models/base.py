"""Base model configuration for validated settings."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model: immutable, unknown fields rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")
