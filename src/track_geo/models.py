"""Point model shared by the distance helpers."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, asdict

# Key/attribute names tried in order when reading a point-like record
LAT_NAMES = ("lat", "latitude")
LON_NAMES = ("lon", "longitude", "lng")


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 position in decimal degrees."""

    latitude: float
    longitude: float

    @property
    def lat(self) -> float:
        return self.latitude

    @property
    def lon(self) -> float:
        return self.longitude

    @classmethod
    def from_record(cls, record) -> GeoPoint:
        """Build a point from anything point-like.

        Accepts a GeoPoint, a mapping with ``lat``/``lon`` (or
        ``latitude``/``longitude``/``lng``) keys, an object with those
        attributes, or a ``(lat, lon)`` pair. Missing or non-numeric
        coordinates come back as NaN.
        """
        if isinstance(record, GeoPoint):
            return record

        if isinstance(record, Mapping):
            lat = _first_key(record, LAT_NAMES)
            lon = _first_key(record, LON_NAMES)
        elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
            lat = record[0] if len(record) > 0 else None
            lon = record[1] if len(record) > 1 else None
        else:
            lat = _first_attr(record, LAT_NAMES)
            lon = _first_attr(record, LON_NAMES)

        return cls(latitude=coerce_coordinate(lat), longitude=coerce_coordinate(lon))

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> GeoPoint:
        return cls.from_record(json.loads(raw))


def coerce_coordinate(val) -> float:
    """float(val), or NaN when val is missing or not a number."""
    if val is None or isinstance(val, bool):
        return math.nan
    try:
        return float(val)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def _first_key(record: Mapping, names: tuple[str, ...]):
    for name in names:
        if name in record:
            return record[name]
    return None


def _first_attr(record, names: tuple[str, ...]):
    for name in names:
        val = getattr(record, name, None)
        if val is not None:
            return val
    return None
