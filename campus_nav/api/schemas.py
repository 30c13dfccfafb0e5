"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from campus_nav.domain.enums import LocationCategory, RoadType, RouteStatus


# ── Shared ────────────────────────────────────────────────────────────


class Point(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


def _check_coordinates(value: list[list[float]]) -> list[list[float]]:
    for pair in value:
        if len(pair) != 2:
            raise ValueError("each coordinate must be a [lat, lng] pair")
        lat, lng = pair
        if not -90 <= lat <= 90 or not -180 <= lng <= 180:
            raise ValueError(f"coordinate out of range: {pair}")
    return value


# ── Requests ──────────────────────────────────────────────────────────


class RoadCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    type: RoadType = RoadType.CUSTOM
    coordinates: list[list[float]] = Field(
        ...,
        min_length=2,
        description="Ordered [lat, lng] vertices of the polyline.",
    )

    @field_validator("coordinates")
    @classmethod
    def check_coordinates(cls, value: list[list[float]]) -> list[list[float]]:
        return _check_coordinates(value)


class RoadInput(RoadCreateRequest):
    """A road supplied inline with a route request instead of from storage."""

    id: str = Field(..., min_length=1)


class LocationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = ""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    category: LocationCategory = LocationCategory.CUSTOM


class RouteRequest(BaseModel):
    start: Point
    destination: Point
    roads: Optional[list[RoadInput]] = Field(
        None,
        description="Roads to route over; stored roads are used when omitted.",
    )


# ── Responses ─────────────────────────────────────────────────────────


class RoadResponse(BaseModel):
    id: str
    name: str
    type: RoadType
    coordinates: list[list[float]]
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class NearestRoadResponse(BaseModel):
    road: RoadResponse
    point: Point
    distance: float


class LocationResponse(BaseModel):
    id: str
    name: str
    description: str = ""
    lat: float
    lng: float
    category: LocationCategory
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class NearestLocationResponse(BaseModel):
    location: LocationResponse
    distance: float


class RouteResponse(BaseModel):
    waypoints: list[list[float]]
    distance: float
    estimated_minutes: float
    instructions: list[str]
    status: RouteStatus


class StatsResponse(BaseModel):
    roads: int
    locations: int


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
