"""
Routing endpoint
================

POST /api/v1/routes -- walking route between two points along campus roads

The request may carry its own road list; otherwise every stored road is
used.  The road set is snapshotted per request and the graph is rebuilt
each time, so edits to roads are picked up on the next call.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_nav.api.dependencies import RoutingOptions, get_db, get_routing_options
from campus_nav.api.middleware import limiter
from campus_nav.api.schemas import RouteRequest, RouteResponse
from campus_nav.config import settings
from campus_nav.domain.entities import Road
from campus_nav.domain.routing import compute_route
from campus_nav.infrastructure.repositories import RoadRepository, road_to_domain

router = APIRouter(prefix="/routes", tags=["routing"])


@router.post(
    "",
    response_model=RouteResponse,
    summary="Compute a route with turn-by-turn directions",
    description=(
        "Snaps both endpoints onto the nearest road, searches the road "
        "graph and returns waypoints, distance, estimated minutes and "
        "directions.  ``status`` is STRAIGHT_LINE_FALLBACK when no road "
        "path exists."
    ),
)
@limiter.limit(settings.rate_limit)
async def create_route(
    request: Request,
    body: RouteRequest,
    db: AsyncSession = Depends(get_db),
    options: RoutingOptions = Depends(get_routing_options),
):
    if body.roads is not None:
        roads = [
            Road(id=r.id, name=r.name, type=r.type, coordinates=r.coordinates)
            for r in body.roads
        ]
    else:
        rows = await RoadRepository(db).list_roads()
        roads = [road_to_domain(r) for r in rows]

    route = compute_route(
        body.start.as_tuple(),
        body.destination.as_tuple(),
        roads,
        minutes_per_km=options.minutes_per_km,
        precision=options.precision,
        tolerance_m=options.tolerance_m,
        logger=options.logger,
    )
    return RouteResponse(
        waypoints=[list(p) for p in route.waypoints],
        distance=route.distance,
        estimated_minutes=route.estimated_minutes,
        instructions=route.instructions,
        status=route.status,
    )
