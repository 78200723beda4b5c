from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from geocoord.domain.exceptions import InvalidArgument


def _coerce_degrees(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid {name}: {value!r}")
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid {name}: {value!r}") from None
    if not math.isfinite(out):
        raise InvalidArgument(f"Invalid {name}: {value!r}")
    return out


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in degrees.

    Ranges are not enforced: the spherical formulas stay defined for
    out-of-range values, so callers may pass them through.
    """

    lat: float = 0.0
    lng: float = 0.0

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "lat", _coerce_degrees("latitude", self.lat))
        object.__setattr__(self, "lng", _coerce_degrees("longitude", self.lng))

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"

    @staticmethod
    def from_pair(lat: Any, lng: Any) -> "GeoPoint":
        return GeoPoint(lat=lat, lng=lng)

    @staticmethod
    def from_string(text: str) -> "GeoPoint":
        """Parse ``"lat,lng"``."""

        if not isinstance(text, str):
            raise InvalidArgument(f"Expected a 'lat,lng' string, got {text!r}")
        parts = text.split(",")
        if len(parts) != 2:
            raise InvalidArgument(f"Expected a 'lat,lng' string, got {text!r}")
        return GeoPoint(lat=parts[0].strip(), lng=parts[1].strip())

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "GeoPoint":
        """Build from ``lat``/``lng`` keys, falling back to ``latitude``/``longitude``."""

        if not isinstance(data, Mapping):
            raise InvalidArgument(f"Expected a mapping, got {data!r}")
        if data.get("lat") is not None and data.get("lng") is not None:
            return GeoPoint(lat=data["lat"], lng=data["lng"])
        if data.get("latitude") is not None and data.get("longitude") is not None:
            return GeoPoint(lat=data["latitude"], lng=data["longitude"])
        raise InvalidArgument(
            "Mapping must contain 'lat'/'lng' or 'latitude'/'longitude' keys"
        )

    @staticmethod
    def from_sequence(values: Sequence[Any]) -> "GeoPoint":
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidArgument(f"Expected a [lat, lng] sequence, got {values!r}")
        if len(values) != 2:
            raise InvalidArgument(
                f"Expected exactly two values, got {len(values)}: {values!r}"
            )
        return GeoPoint(lat=values[0], lng=values[1])
