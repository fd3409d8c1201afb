"""Configuration models for chunking components.

Components are configured via a type string and optional parameters, so a
chunker can be described in JSON or YAML and built by the factory.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..core.capacity import ChunkCapacity


class ComponentConfig(BaseModel):
    """Configuration for a single component.

    Attributes:
        type: Component type identifier (e.g., "recursive", "fixed_size")
        params: Component-specific parameters as a dictionary
    """

    type: str
    params: dict[str, Any] = Field(default_factory=dict)


class ChunkingConfig(BaseModel):
    """Chunking configuration.

    Attributes:
        chunker: Chunker component configuration
        capacity_desired: Target chunk size in bytes
        capacity_max: Hard chunk size limit in bytes (defaults to desired)
    """

    chunker: ComponentConfig
    capacity_desired: int = Field(default=2048, ge=0)
    capacity_max: int | None = Field(default=None, ge=0)

    model_config = {
        "extra": "allow",  # Allow additional fields for extensibility
    }

    @model_validator(mode="after")
    def _check_capacity(self) -> "ChunkingConfig":
        if self.capacity_max is not None and self.capacity_max < self.capacity_desired:
            raise ValueError(
                f"capacity_max ({self.capacity_max}) must be >= "
                f"capacity_desired ({self.capacity_desired})"
            )
        return self

    def capacity(self) -> ChunkCapacity:
        """Build the capacity described by this configuration."""
        if self.capacity_max is None:
            return ChunkCapacity.fixed(self.capacity_desired)
        return ChunkCapacity(self.capacity_desired, self.capacity_max)
