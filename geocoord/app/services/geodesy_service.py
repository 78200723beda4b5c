from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from geocoord.domain.algorithms.geodesy import bearing, circle, destination, distance
from geocoord.domain.algorithms.polyline import decode_polyline, encode_polyline
from geocoord.domain.exceptions import InvalidArgument
from geocoord.domain.models import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CircleResult:
    points: tuple[GeoPoint, ...]
    polyline: str


@dataclass(slots=True)
class GeodesyService:
    """Entry point used by the HTTP adapter.

    Wraps the pure geodesy and polyline functions and applies request-size
    limits that the domain layer does not care about.
    """

    default_segments: int = 36
    max_segments: int = 3600
    max_polyline_points: int = 10_000

    def distance_m(self, *, origin: GeoPoint, destination: GeoPoint) -> float:
        return distance(origin, destination)

    def bearing_deg(self, *, origin: GeoPoint, destination: GeoPoint) -> float:
        return bearing(origin, destination)

    def project(
        self, *, origin: GeoPoint, bearing_deg: float, distance_m: float
    ) -> GeoPoint:
        return destination(origin, bearing_deg, distance_m)

    def circle(
        self,
        *,
        center: GeoPoint,
        radius_m: float,
        segments: int | None = None,
        closed: bool = False,
    ) -> CircleResult:
        n = self.default_segments if segments is None else segments
        if n > self.max_segments:
            logger.warning(
                "Rejected circle request: %s segments (max %s)", n, self.max_segments
            )
            raise InvalidArgument(
                f"segments must be at most {self.max_segments}, got {n}"
            )

        logger.debug(
            "Sampling circle around %s: radius_m=%s segments=%s closed=%s",
            center,
            radius_m,
            n,
            closed,
        )
        points = circle(center, radius_m, segments=n, closed=closed)
        return CircleResult(points=points, polyline=encode_polyline(points))

    def encode(self, *, points: Sequence[GeoPoint]) -> str:
        if len(points) > self.max_polyline_points:
            logger.warning(
                "Rejected polyline request: %s points (max %s)",
                len(points),
                self.max_polyline_points,
            )
            raise InvalidArgument(
                f"At most {self.max_polyline_points} points can be encoded, "
                f"got {len(points)}"
            )
        return encode_polyline(points)

    def decode(self, *, polyline: str) -> tuple[GeoPoint, ...]:
        return decode_polyline(polyline)
