"""Browsing context options using Pydantic."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from isocontext.errors import ValidationError
from isocontext.geolocation import validate_geolocation
from isocontext.types import ContextPermission

DEFAULT_VIEWPORT_WIDTH = 800
DEFAULT_VIEWPORT_HEIGHT = 600


class Viewport(BaseModel):
    """Page viewport in CSS pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = DEFAULT_VIEWPORT_WIDTH
    height: int = DEFAULT_VIEWPORT_HEIGHT


class Geolocation(BaseModel):
    """Emulated position.

    Bounds are checked by ``validate_geolocation`` rather than field
    constraints so errors carry the context's own error codes.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    accuracy: float = 0


class ContextOptions(BaseModel):
    """Engine-agnostic settings for one isolated browsing profile."""

    model_config = ConfigDict(frozen=True)

    viewport: Viewport | None = None
    geolocation: Geolocation | None = None
    # origin -> permission names, granted in insertion order
    permissions: dict[str, list[ContextPermission]] = Field(default_factory=dict)
    user_agent: str | None = None
    locale: str | None = None
    timezone_id: str | None = None
    ignore_https_errors: bool = False
    java_script_enabled: bool = True
    bypass_csp: bool = False
    offline: bool = False
    extra_http_headers: dict[str, str] = Field(default_factory=dict)

    def clone(self) -> ContextOptions:
        return self.model_copy(deep=True)


def prepare_options(
    options: ContextOptions | Mapping[str, Any] | None,
) -> ContextOptions:
    """Clone options (or build defaults), default the viewport, check bounds.

    The returned object shares nothing with the caller's argument.
    """
    if options is None:
        prepared = ContextOptions()
    elif isinstance(options, ContextOptions):
        prepared = options.clone()
    else:
        try:
            prepared = ContextOptions.model_validate(dict(options))
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ValidationError(
                "invalid_options", f"Invalid context options: {problems}"
            ) from e

    if prepared.geolocation is not None:
        validate_geolocation(prepared.geolocation)

    if prepared.viewport is None:
        prepared = prepared.model_copy(
            update={
                "viewport": Viewport(
                    width=DEFAULT_VIEWPORT_WIDTH, height=DEFAULT_VIEWPORT_HEIGHT
                )
            }
        )
    return prepared
