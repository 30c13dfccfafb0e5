"""FastAPI dependency injection helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from campus_nav.config import settings
from campus_nav.infrastructure.database import async_session_factory


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@dataclass(frozen=True)
class RoutingOptions:
    minutes_per_km: float
    precision: int
    tolerance_m: float
    logger: logging.Logger


def get_routing_options() -> RoutingOptions:
    """Routing knobs from settings plus the logger the router should report to."""
    return RoutingOptions(
        minutes_per_km=settings.minutes_per_km,
        precision=settings.node_precision,
        tolerance_m=settings.on_segment_tolerance_m,
        logger=logging.getLogger("campus_nav.routing"),
    )
