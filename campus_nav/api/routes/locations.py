"""
Location endpoints
==================

GET    /api/v1/locations                -- list points of interest
POST   /api/v1/locations                -- create a point of interest
GET    /api/v1/locations/nearest        -- closest location (within radius)
DELETE /api/v1/locations/{location_id}  -- delete a location
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from campus_nav.api.dependencies import get_db
from campus_nav.api.middleware import limiter
from campus_nav.api.schemas import (
    ErrorResponse,
    LocationCreateRequest,
    LocationResponse,
    NearestLocationResponse,
)
from campus_nav.config import settings
from campus_nav.domain.snapping import find_nearest_location
from campus_nav.infrastructure.repositories import (
    LocationRepository,
    location_to_domain,
)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationResponse], summary="List locations")
@limiter.limit(settings.rate_limit)
async def list_locations(request: Request, db: AsyncSession = Depends(get_db)):
    return await LocationRepository(db).list_locations()


@router.post(
    "",
    status_code=201,
    response_model=LocationResponse,
    summary="Create a location",
)
@limiter.limit(settings.rate_limit)
async def create_location(
    request: Request,
    body: LocationCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    return await LocationRepository(db).create_location(
        name=body.name,
        description=body.description,
        category=body.category,
        lat=body.lat,
        lng=body.lng,
    )


@router.get(
    "/nearest",
    response_model=NearestLocationResponse,
    summary="Closest location to a point",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "No location within the snap radius.",
        }
    },
)
@limiter.limit(settings.rate_limit)
async def nearest_location(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    db: AsyncSession = Depends(get_db),
):
    rows = await LocationRepository(db).list_locations()
    by_id = {str(r.id): r for r in rows}
    match = find_nearest_location(
        (lat, lng),
        [location_to_domain(r) for r in rows],
        max_distance_m=settings.location_snap_radius_m,
    )
    if match is None:
        raise HTTPException(status_code=404, detail="No location nearby")
    location, distance = match
    return NearestLocationResponse(
        location=LocationResponse.model_validate(by_id[location.id]),
        distance=distance,
    )


@router.delete(
    "/{location_id}",
    status_code=204,
    summary="Delete a location",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def delete_location(
    request: Request,
    location_id: str,
    db: AsyncSession = Depends(get_db),
):
    repo = LocationRepository(db)
    location = await repo.get_by_id(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    await repo.delete(location)
    return Response(status_code=204)
