from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    # No range checks; out-of-range degrees are valid input.
    lat: float
    lng: float


class PointParseRequestSchema(BaseModel):
    text: str | None = None
    mapping: dict[str, float] | None = None
    pair: list[float] | None = None


class PointPairRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema


class DistanceResponseSchema(BaseModel):
    distance_m: float


class BearingResponseSchema(BaseModel):
    bearing_deg: float


class DestinationRequestSchema(BaseModel):
    origin: GeoPointSchema
    bearing_deg: float
    distance_m: float


class CircleRequestSchema(BaseModel):
    center: GeoPointSchema
    radius_m: float = Field(..., ge=0.0)
    segments: int | None = Field(default=None, ge=1)
    closed: bool = False


class CircleResponseSchema(BaseModel):
    points: list[GeoPointSchema]
    polyline: str


class PolylineEncodeRequestSchema(BaseModel):
    points: list[GeoPointSchema]


class PolylineSchema(BaseModel):
    polyline: str


class PolylineDecodeResponseSchema(BaseModel):
    points: list[GeoPointSchema]
