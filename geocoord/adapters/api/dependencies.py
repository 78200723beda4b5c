from __future__ import annotations

import os

from geocoord.app.services.geodesy_service import GeodesyService


def get_geodesy_service() -> GeodesyService:
    service = GeodesyService()

    # Allow tuning via env without changing code.
    if os.getenv("CIRCLE_DEFAULT_SEGMENTS"):
        service.default_segments = int(os.environ["CIRCLE_DEFAULT_SEGMENTS"])
    if os.getenv("CIRCLE_MAX_SEGMENTS"):
        service.max_segments = int(os.environ["CIRCLE_MAX_SEGMENTS"])
    if os.getenv("POLYLINE_MAX_POINTS"):
        service.max_polyline_points = int(os.environ["POLYLINE_MAX_POINTS"])

    return service
