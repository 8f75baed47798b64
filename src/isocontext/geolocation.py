"""Geolocation bounds validation."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from isocontext.errors import ValidationError

if TYPE_CHECKING:
    from isocontext.options import Geolocation


def _within(value: float, lower: float | None, upper: float | None) -> bool:
    if math.isnan(value):
        return False
    if lower is not None and value < lower:
        return False
    return not (upper is not None and value > upper)


def validate_geolocation(geolocation: Geolocation) -> None:
    """Raise ValidationError if a coordinate or the accuracy is out of bounds."""
    if not _within(geolocation.longitude, -180, 180):
        raise ValidationError(
            "invalid_longitude",
            f"Invalid longitude '{geolocation.longitude}': "
            "precondition -180 <= LONGITUDE <= 180 failed.",
        )
    if not _within(geolocation.latitude, -90, 90):
        raise ValidationError(
            "invalid_latitude",
            f"Invalid latitude '{geolocation.latitude}': "
            "precondition -90 <= LATITUDE <= 90 failed.",
        )
    if not _within(geolocation.accuracy, 0, None):
        raise ValidationError(
            "invalid_accuracy",
            f"Invalid accuracy '{geolocation.accuracy}': "
            "precondition 0 <= ACCURACY failed.",
        )
