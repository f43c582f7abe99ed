"""Opt-in coordinate validation.

The distance helpers never validate: bad coordinates flow through as NaN.
Callers that want to reject bad input up front (the CLI in ``--strict``
mode, for one) use these checks instead.
"""

from __future__ import annotations

import math

from track_geo.models import GeoPoint


class ValidationError(Exception):
    """Raised when a point fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")


def validate_point(point) -> list[str]:
    """Validate a point-like record. Returns list of error messages (empty = valid)."""
    p = GeoPoint.from_record(point)
    errors: list[str] = []

    # Latitude: finite, [-90, 90]
    if not math.isfinite(p.latitude):
        errors.append(f"latitude {p.latitude} is not a finite number")
    elif not -90 <= p.latitude <= 90:
        errors.append(f"latitude {p.latitude} out of range [-90, 90]")

    # Longitude: finite, [-180, 180]
    if not math.isfinite(p.longitude):
        errors.append(f"longitude {p.longitude} is not a finite number")
    elif not -180 <= p.longitude <= 180:
        errors.append(f"longitude {p.longitude} out of range [-180, 180]")

    return errors


def ensure_valid(point) -> GeoPoint:
    """Return the point as a GeoPoint, or raise ValidationError."""
    errors = validate_point(point)
    if errors:
        raise ValidationError(errors)
    return GeoPoint.from_record(point)
