"""
Admin / observability endpoints
===============================

GET /api/v1/admin/stats  -- number of stored roads and locations
GET /api/v1/admin/health -- simple health check
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_nav.api.dependencies import get_db
from campus_nav.api.middleware import limiter
from campus_nav.api.schemas import HealthResponse, StatsResponse
from campus_nav.config import settings
from campus_nav.infrastructure.repositories import LocationRepository, RoadRepository

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=StatsResponse, summary="Stored data counts")
@limiter.limit(settings.rate_limit)
async def get_stats(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    return StatsResponse(
        roads=await RoadRepository(db).count(),
        locations=await LocationRepository(db).count(),
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
