"""Configuration models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

from isocontext.options import ContextOptions


class ConfigError(Exception):
    """Configuration error."""

    pass


class IsocontextConfig(BaseModel):
    """Root configuration model."""

    # Defaults for contexts created without explicit options
    context: ContextOptions = Field(default_factory=ContextOptions)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
