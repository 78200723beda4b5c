from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoord.adapters.api.dependencies import get_geodesy_service
from geocoord.adapters.api.schemas.geodesy import (
    BearingResponseSchema,
    CircleRequestSchema,
    CircleResponseSchema,
    DestinationRequestSchema,
    DistanceResponseSchema,
    GeoPointSchema,
    PointPairRequestSchema,
    PointParseRequestSchema,
)
from geocoord.app.services.geodesy_service import GeodesyService
from geocoord.domain.exceptions import InvalidArgument
from geocoord.domain.models import GeoPoint

router = APIRouter(tags=["geodesy"])


def _to_point(schema: GeoPointSchema) -> GeoPoint:
    return GeoPoint(lat=schema.lat, lng=schema.lng)


def _to_schema(point: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=point.lat, lng=point.lng)


@router.post("/points/parse", response_model=GeoPointSchema)
def parse_point(req: PointParseRequestSchema) -> GeoPointSchema:
    given = [v for v in (req.text, req.mapping, req.pair) if v is not None]
    if len(given) != 1:
        raise InvalidArgument("Provide exactly one of 'text', 'mapping' or 'pair'")

    if req.text is not None:
        point = GeoPoint.from_string(req.text)
    elif req.mapping is not None:
        point = GeoPoint.from_mapping(req.mapping)
    else:
        point = GeoPoint.from_sequence(req.pair or [])
    return _to_schema(point)


@router.post("/distance", response_model=DistanceResponseSchema)
def get_distance(
    req: PointPairRequestSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> DistanceResponseSchema:
    d = service.distance_m(
        origin=_to_point(req.origin), destination=_to_point(req.destination)
    )
    return DistanceResponseSchema(distance_m=d)


@router.post("/bearing", response_model=BearingResponseSchema)
def get_bearing(
    req: PointPairRequestSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> BearingResponseSchema:
    b = service.bearing_deg(
        origin=_to_point(req.origin), destination=_to_point(req.destination)
    )
    return BearingResponseSchema(bearing_deg=b)


@router.post("/destination", response_model=GeoPointSchema)
def get_destination(
    req: DestinationRequestSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> GeoPointSchema:
    point = service.project(
        origin=_to_point(req.origin),
        bearing_deg=req.bearing_deg,
        distance_m=req.distance_m,
    )
    return _to_schema(point)


@router.post("/circle", response_model=CircleResponseSchema)
def get_circle(
    req: CircleRequestSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> CircleResponseSchema:
    result = service.circle(
        center=_to_point(req.center),
        radius_m=req.radius_m,
        segments=req.segments,
        closed=req.closed,
    )
    return CircleResponseSchema(
        points=[_to_schema(p) for p in result.points],
        polyline=result.polyline,
    )
