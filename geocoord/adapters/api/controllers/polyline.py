from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoord.adapters.api.dependencies import get_geodesy_service
from geocoord.adapters.api.schemas.geodesy import (
    GeoPointSchema,
    PolylineDecodeResponseSchema,
    PolylineEncodeRequestSchema,
    PolylineSchema,
)
from geocoord.app.services.geodesy_service import GeodesyService
from geocoord.domain.models import GeoPoint

router = APIRouter(prefix="/polyline", tags=["polyline"])


@router.post("/encode", response_model=PolylineSchema)
def encode(
    req: PolylineEncodeRequestSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> PolylineSchema:
    points = [GeoPoint(lat=p.lat, lng=p.lng) for p in req.points]
    return PolylineSchema(polyline=service.encode(points=points))


@router.post("/decode", response_model=PolylineDecodeResponseSchema)
def decode(
    req: PolylineSchema,
    service: GeodesyService = Depends(get_geodesy_service),
) -> PolylineDecodeResponseSchema:
    pts = service.decode(polyline=req.polyline)
    return PolylineDecodeResponseSchema(
        points=[GeoPointSchema(lat=p.lat, lng=p.lng) for p in pts]
    )
