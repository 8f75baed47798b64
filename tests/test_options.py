"""Tests for context options preparation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from isocontext.errors import ValidationError
from isocontext.options import ContextOptions, Geolocation, Viewport, prepare_options


def test_defaults_when_none() -> None:
    options = prepare_options(None)
    assert options.viewport == Viewport(width=800, height=600)
    assert options.geolocation is None
    assert options.permissions == {}


def test_missing_viewport_defaulted() -> None:
    options = prepare_options(ContextOptions(user_agent="ua"))
    assert options.viewport is not None
    assert (options.viewport.width, options.viewport.height) == (800, 600)
    assert options.user_agent == "ua"


def test_explicit_viewport_kept() -> None:
    options = prepare_options(ContextOptions(viewport=Viewport(width=1280, height=720)))
    assert options.viewport == Viewport(width=1280, height=720)


def test_clone_is_independent_of_caller() -> None:
    original = ContextOptions(
        geolocation=Geolocation(latitude=1, longitude=2),
        permissions={"https://a.test": ["camera"]},
    )
    prepared = prepare_options(original)

    original.permissions["https://a.test"].append("microphone")
    original.extra_http_headers["x-test"] = "1"

    assert prepared.permissions == {"https://a.test": ["camera"]}
    assert prepared.extra_http_headers == {}
    assert prepared.geolocation == Geolocation(latitude=1, longitude=2)
    assert original.viewport is None


def test_options_are_frozen() -> None:
    options = prepare_options(
        ContextOptions(geolocation=Geolocation(latitude=1, longitude=2))
    )
    with pytest.raises(PydanticValidationError):
        options.user_agent = "changed"
    with pytest.raises(PydanticValidationError):
        options.geolocation.latitude = 50
    with pytest.raises(PydanticValidationError):
        options.viewport.width = 1


def test_mapping_is_validated() -> None:
    options = prepare_options(
        {"viewport": {"width": 320, "height": 480}, "locale": "de-DE"}
    )
    assert options.viewport == Viewport(width=320, height=480)
    assert options.locale == "de-DE"


def test_out_of_bounds_geolocation_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        prepare_options(
            ContextOptions(geolocation=Geolocation(latitude=0, longitude=200))
        )
    assert exc_info.value.code == "invalid_longitude"


def test_mapping_with_unknown_permission_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        prepare_options({"permissions": {"https://a.test": ["telepathy"]}})
    assert exc_info.value.code == "invalid_options"
    assert "permissions" in str(exc_info.value)


def test_mapping_with_wrong_types_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        prepare_options({"viewport": {"width": "wide", "height": 480}})
    assert exc_info.value.code == "invalid_options"
    assert "viewport.width" in str(exc_info.value)
