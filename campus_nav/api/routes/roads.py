"""
Road endpoints
==============

GET    /api/v1/roads            -- list roads, oldest first
POST   /api/v1/roads            -- create a road polyline
GET    /api/v1/roads/nearest    -- closest road to a point (within radius)
GET    /api/v1/roads/{road_id}  -- fetch one road
DELETE /api/v1/roads/{road_id}  -- delete a road
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from campus_nav.api.dependencies import get_db
from campus_nav.api.middleware import limiter
from campus_nav.api.schemas import (
    ErrorResponse,
    NearestRoadResponse,
    Point,
    RoadCreateRequest,
    RoadResponse,
)
from campus_nav.config import settings
from campus_nav.domain.entities import Road
from campus_nav.domain.snapping import find_nearest_road
from campus_nav.infrastructure.repositories import RoadRepository, road_to_domain

router = APIRouter(prefix="/roads", tags=["roads"])

logger = logging.getLogger(__name__)


def road_response(road: Road) -> RoadResponse:
    return RoadResponse(
        id=road.id,
        name=road.name,
        type=road.type,
        coordinates=[list(c) for c in road.coordinates],
        created_at=road.created_at,
    )


@router.get("", response_model=list[RoadResponse], summary="List roads")
@limiter.limit(settings.rate_limit)
async def list_roads(request: Request, db: AsyncSession = Depends(get_db)):
    return await RoadRepository(db).list_roads()


@router.post(
    "",
    status_code=201,
    response_model=RoadResponse,
    summary="Create a road",
)
@limiter.limit(settings.rate_limit)
async def create_road(
    request: Request,
    body: RoadCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    road = await RoadRepository(db).create_road(
        name=body.name,
        type=body.type,
        coordinates=body.coordinates,
    )
    logger.info("Road %s created with %d vertices", road.id, len(body.coordinates))
    return road


@router.get(
    "/nearest",
    response_model=NearestRoadResponse,
    summary="Closest road to a point",
    responses={
        404: {"model": ErrorResponse, "description": "No road within the snap radius."}
    },
)
@limiter.limit(settings.rate_limit)
async def nearest_road(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    db: AsyncSession = Depends(get_db),
):
    rows = await RoadRepository(db).list_roads()
    match = find_nearest_road(
        (lat, lng),
        [road_to_domain(r) for r in rows],
        max_distance_m=settings.road_snap_radius_m,
    )
    if match is None:
        raise HTTPException(status_code=404, detail="No road nearby")
    return NearestRoadResponse(
        road=road_response(match.road),
        point=Point(lat=match.point[0], lng=match.point[1]),
        distance=match.distance,
    )


@router.get(
    "/{road_id}",
    response_model=RoadResponse,
    summary="Get a road",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_road(
    request: Request,
    road_id: str,
    db: AsyncSession = Depends(get_db),
):
    road = await RoadRepository(db).get_by_id(road_id)
    if not road:
        raise HTTPException(status_code=404, detail="Road not found")
    return road


@router.delete(
    "/{road_id}",
    status_code=204,
    summary="Delete a road",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def delete_road(
    request: Request,
    road_id: str,
    db: AsyncSession = Depends(get_db),
):
    repo = RoadRepository(db)
    road = await repo.get_by_id(road_id)
    if not road:
        raise HTTPException(status_code=404, detail="Road not found")
    await repo.delete(road)
    return Response(status_code=204)
