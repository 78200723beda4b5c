from __future__ import annotations

import math
from collections.abc import Iterable

from geocoord.domain.exceptions import InvalidArgument
from geocoord.domain.models import GeoPoint

# Mean Earth radius of the spherical model, in meters.
EARTH_RADIUS_M = 6_371_000.0


def distance_between(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters (spherical law of cosines)."""

    if lat1 == lat2 and lng1 == lng2:
        return 0.0

    phi1 = math.radians(lat1)
    lam1 = math.radians(lng1)
    phi2 = math.radians(lat2)
    lam2 = math.radians(lng2)

    cos_angle = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(
        phi2
    ) * math.cos(lam1 - lam2)
    # Rounding can push the cosine just outside [-1, 1] for coincident or
    # antipodal points.
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle) * EARTH_RADIUS_M


def distance(a: GeoPoint, b: GeoPoint) -> float:
    return distance_between(a.lat, a.lng, b.lat, b.lng)


def bearing(origin: GeoPoint, target: GeoPoint) -> float:
    """Initial bearing from ``origin`` towards ``target`` in degrees, [0, 360)."""

    phi1 = math.radians(origin.lat)
    lam1 = math.radians(origin.lng)
    phi2 = math.radians(target.lat)
    lam2 = math.radians(target.lng)

    x = math.cos(phi2) * math.sin(lam2 - lam1)
    y = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        lam2 - lam1
    )

    if x == 0 and y == 0:
        theta = 0.0
    elif y == 0:
        theta = 3.0 * math.pi / 2.0 if x < 0 else math.pi / 2.0
    elif y < 0:
        theta = math.atan(x / y) + math.pi
    else:
        theta = math.atan(x / y) + (2.0 * math.pi if x < 0 else 0.0)

    return math.degrees(theta) % 360.0


def destination(origin: GeoPoint, bearing_deg: float, distance_m: float) -> GeoPoint:
    """Point reached from ``origin`` along ``bearing_deg`` after ``distance_m``.

    The returned longitude is not wrapped into [-180, 180]; normalise it
    explicitly when needed.
    """

    phi1 = math.radians(origin.lat)
    lam1 = math.radians(origin.lng)
    theta = math.radians(bearing_deg)
    delta = distance_m / EARTH_RADIUS_M

    sin_phi2 = math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(
        delta
    ) * math.cos(theta)
    # Rounding can push the sine just past +-1 when the path ends on a pole.
    phi2 = math.asin(max(-1.0, min(1.0, sin_phi2)))
    lam2 = lam1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return GeoPoint(lat=math.degrees(phi2), lng=math.degrees(lam2))


def circle(
    center: GeoPoint, radius_m: float, segments: int = 360, closed: bool = False
) -> tuple[GeoPoint, ...]:
    """Ring of points ``radius_m`` away from ``center``.

    Bearings step from 0 to 360 degrees inclusive in ``360 / segments``
    increments. Samples equal to an earlier one (the 360 degree sample
    usually lands on the 0 degree one) are dropped. When ``closed`` is set
    the first point is repeated at the end.
    """

    if isinstance(segments, bool) or not isinstance(segments, int) or segments < 1:
        raise InvalidArgument(f"segments must be a positive integer, got {segments!r}")

    step = 360.0 / segments
    samples = (destination(center, i * step, radius_m) for i in range(segments + 1))
    points = tuple(dict.fromkeys(samples))

    if closed:
        points = points + (points[0],)
    return points


def path_length_m(points: Iterable[GeoPoint]) -> float:
    pts = tuple(points)
    if len(pts) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(pts, pts[1:]):
        total += distance(a, b)
    return float(total)
