"""Great-circle distance and the helpers built on it."""

from __future__ import annotations

import math
from collections.abc import Iterable

from track_geo.models import GeoPoint, coerce_coordinate

EARTH_RADIUS_M = 6_371_000.0
FEET_PER_METER = 3.28084

# Historically named and commented as a 200 ft check; the enforced value is 350 ft.
PROXIMITY_THRESHOLD_FT = 350.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in meters.

    Uses the Haversine formula on a sphere of radius ``EARTH_RADIUS_M``.
    Inputs are decimal degrees. Non-finite or non-numeric inputs give NaN.
    """
    coords = [coerce_coordinate(v) for v in (lat1, lon1, lat2, lon2)]
    if not all(math.isfinite(v) for v in coords):
        return math.nan
    lat1, lon1, lat2, lon2 = coords

    rlat1 = math.radians(lat1)
    rlat2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    # huge finite inputs can still overflow in the subtraction
    if not (math.isfinite(dlat) and math.isfinite(dlon)):
        return math.nan

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def distance_m(a, b) -> float:
    """Distance in meters between two point-like records."""
    pa = GeoPoint.from_record(a)
    pb = GeoPoint.from_record(b)
    return haversine_m(pa.latitude, pa.longitude, pb.latitude, pb.longitude)


def points_within(a, b, threshold_ft: float = PROXIMITY_THRESHOLD_FT) -> bool:
    """True when a and b are at most ``threshold_ft`` feet apart.

    The boundary is inclusive. A NaN distance is never within range.
    """
    distance_ft = distance_m(a, b) * FEET_PER_METER
    return distance_ft <= threshold_ft


def nearest_index(path: Iterable, point) -> int:
    """Index of the path vertex closest to ``point``.

    The first vertex wins on ties. An empty path returns 0.
    """
    target = GeoPoint.from_record(point)
    min_dist = math.inf
    idx = 0

    for i, vertex in enumerate(path):
        d = distance_m(vertex, target)
        if d < min_dist:
            min_dist = d
            idx = i

    return idx
