"""Google encoded polyline format.

See https://developers.google.com/maps/documentation/utilities/polylinealgorithm

Values are scaled by 1e5 and rounded, zigzag-mapped so small negative and
positive deltas both stay short, then written as 5-bit chunks (least
significant first) offset into printable ASCII starting at ``?``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from geocoord.domain.algorithms.geodesy import circle
from geocoord.domain.exceptions import InvalidArgument
from geocoord.domain.models import GeoPoint

PRECISION = 1e5

_CHUNK_BITS = 5
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20
_OFFSET = 63  # '?'
_MAX_CHAR = 126  # '~'


def _round_half_away(value: float) -> int:
    # Python's round() is half-to-even; the reference encoders round half up
    # in magnitude.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def encode_number(value: float) -> str:
    """Encode one signed coordinate value (degrees or a delta in degrees)."""

    scaled = value * PRECISION
    if not math.isfinite(scaled):
        raise InvalidArgument(f"Cannot encode non-finite value {value!r}")

    num = _round_half_away(scaled)
    work = num << 1
    if num < 0:
        work = ~work

    chars: list[str] = []
    while True:
        chunk = work & _CHUNK_MASK
        work >>= _CHUNK_BITS
        if work:
            chunk |= _CONTINUATION
        chars.append(chr(chunk + _OFFSET))
        if not work:
            break
    return "".join(chars)


def encode_polyline(points: Sequence[GeoPoint]) -> str:
    """Encode ``points`` in order.

    The first point is written as-is; each following one as its raw
    floating-point delta from the previous input point. Rounding to five
    decimals happens per value inside :func:`encode_number`.
    """

    pts = tuple(points)
    if not pts:
        raise InvalidArgument("Cannot encode an empty point sequence")

    out = [encode_number(pts[0].lat), encode_number(pts[0].lng)]
    for prev, cur in zip(pts, pts[1:]):
        out.append(encode_number(cur.lat - prev.lat))
        out.append(encode_number(cur.lng - prev.lng))
    return "".join(out)


def _decode_values(encoded: str) -> list[int]:
    values: list[int] = []
    result = 0
    shift = 0
    for pos, ch in enumerate(encoded):
        code = ord(ch)
        if code < _OFFSET or code > _MAX_CHAR:
            raise InvalidArgument(
                f"Invalid polyline character {ch!r} at position {pos}"
            )
        b = code - _OFFSET
        result |= (b & _CHUNK_MASK) << shift
        shift += _CHUNK_BITS
        if b < _CONTINUATION:
            values.append(~(result >> 1) if result & 1 else result >> 1)
            result = 0
            shift = 0

    if shift:
        raise InvalidArgument("Polyline ends in the middle of a value")
    return values


def decode_polyline(encoded: str) -> tuple[GeoPoint, ...]:
    """Inverse of :func:`encode_polyline`, exact to five decimal places."""

    values = _decode_values(encoded)
    if len(values) % 2:
        raise InvalidArgument("Polyline holds an odd number of values")

    points: list[GeoPoint] = []
    lat = 0
    lng = 0
    for i in range(0, len(values), 2):
        lat += values[i]
        lng += values[i + 1]
        points.append(GeoPoint(lat=lat / PRECISION, lng=lng / PRECISION))
    return tuple(points)


def encoded_circle(
    center: GeoPoint, radius_m: float, segments: int = 36, closed: bool = False
) -> str:
    return encode_polyline(circle(center, radius_m, segments=segments, closed=closed))
