"""Geographic and time helpers for GPS tracks."""

from track_geo.coerce import to_list
from track_geo.geo import (
    EARTH_RADIUS_M,
    FEET_PER_METER,
    PROXIMITY_THRESHOLD_FT,
    distance_m,
    haversine_m,
    nearest_index,
    points_within,
)
from track_geo.models import GeoPoint
from track_geo.timeutil import elapsed_seconds, parse_timestamp
from track_geo.validation import ValidationError, ensure_valid, validate_point

__all__ = [
    "EARTH_RADIUS_M",
    "FEET_PER_METER",
    "PROXIMITY_THRESHOLD_FT",
    "GeoPoint",
    "ValidationError",
    "distance_m",
    "elapsed_seconds",
    "ensure_valid",
    "haversine_m",
    "nearest_index",
    "parse_timestamp",
    "points_within",
    "to_list",
    "validate_point",
]
