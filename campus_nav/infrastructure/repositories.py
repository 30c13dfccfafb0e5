"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  ``road_to_domain`` / ``location_to_domain``
turn rows into the immutable snapshots the router consumes.
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import LocationModel, RoadModel
from campus_nav.domain.entities import Location, Road
from campus_nav.domain.enums import LocationCategory, RoadType


def road_to_domain(row) -> Road:
    return Road(
        id=str(row.id),
        name=row.name,
        type=RoadType(row.type),
        coordinates=tuple(tuple(c) for c in row.coordinates),
        created_at=row.created_at,
    )


def location_to_domain(row) -> Location:
    return Location(
        id=str(row.id),
        name=row.name,
        lat=row.lat,
        lng=row.lng,
        description=row.description or "",
        category=LocationCategory(row.category),
    )


def linestring_wkt(coordinates: Sequence[Sequence[float]]) -> str:
    """WKT uses ``lng lat`` axis order."""
    points = ", ".join(f"{lng} {lat}" for lat, lng in coordinates)
    return f"LINESTRING({points})"


class RoadRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_road(
        self,
        *,
        name: str,
        coordinates: Sequence[Sequence[float]],
        type: RoadType = RoadType.CUSTOM,
    ) -> RoadModel:
        """Create a road with its PostGIS LINESTRING alongside the raw list."""
        from geoalchemy2.functions import ST_GeomFromText

        road = RoadModel(
            name=name,
            type=type,
            coordinates=[[lat, lng] for lat, lng in coordinates],
            path=ST_GeomFromText(linestring_wkt(coordinates), 4326),
        )
        self.session.add(road)
        await self.session.flush()
        return road

    async def get_by_id(self, road_id: str) -> Optional[RoadModel]:
        return await self.session.get(RoadModel, road_id)

    async def list_roads(self) -> list[RoadModel]:
        result = await self.session.execute(
            select(RoadModel).order_by(RoadModel.created_at)
        )
        return list(result.scalars().all())

    async def delete(self, road: RoadModel) -> None:
        await self.session.delete(road)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(RoadModel)
        )
        return result.scalar() or 0


class LocationRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_location(
        self,
        *,
        name: str,
        lat: float,
        lng: float,
        description: str = "",
        category: LocationCategory = LocationCategory.CUSTOM,
    ) -> LocationModel:
        from geoalchemy2.functions import ST_MakePoint, ST_SetSRID

        location = LocationModel(
            name=name,
            description=description,
            category=category,
            lat=lat,
            lng=lng,
            point=ST_SetSRID(ST_MakePoint(lng, lat), 4326),
        )
        self.session.add(location)
        await self.session.flush()
        return location

    async def get_by_id(self, location_id: str) -> Optional[LocationModel]:
        return await self.session.get(LocationModel, location_id)

    async def list_locations(self) -> list[LocationModel]:
        result = await self.session.execute(
            select(LocationModel).order_by(LocationModel.created_at)
        )
        return list(result.scalars().all())

    async def delete(self, location: LocationModel) -> None:
        await self.session.delete(location)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(LocationModel)
        )
        return result.scalar() or 0
