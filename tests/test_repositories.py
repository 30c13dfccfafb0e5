"""Unit tests for repository write paths that build PostGIS expressions."""

import pytest

from campus_nav.domain.enums import LocationCategory, RoadType
from campus_nav.infrastructure.repositories import (
    LocationRepository,
    RoadRepository,
    linestring_wkt,
)


class _RecordingSession:
    """Captures added rows; nothing is sent to a database."""

    def __init__(self):
        self.added = []

    def add(self, obj):
        self.added.append(obj)

    async def flush(self):
        pass


def _function_names(expr) -> list[str]:
    names = [expr.name]
    for clause in expr.clauses:
        if hasattr(clause, "clauses"):
            names.extend(_function_names(clause))
    return names


class TestLocationRepository:
    @pytest.mark.asyncio
    async def test_point_carries_wgs84_srid(self):
        session = _RecordingSession()
        location = await LocationRepository(session).create_location(
            name="Library",
            lat=19.1345,
            lng=72.9165,
            category=LocationCategory.SCHOOL,
        )
        assert session.added == [location]
        assert _function_names(location.point) == ["ST_SetSRID", "ST_MakePoint"]
        srid = list(location.point.clauses)[-1]
        assert srid.value == 4326


class TestRoadRepository:
    @pytest.mark.asyncio
    async def test_path_built_from_wkt_with_srid(self):
        session = _RecordingSession()
        coords = [(19.13, 72.91), (19.14, 72.92)]
        road = await RoadRepository(session).create_road(
            name="Main", coordinates=coords, type=RoadType.STREET
        )
        assert road.coordinates == [[19.13, 72.91], [19.14, 72.92]]
        assert _function_names(road.path) == ["ST_GeomFromText"]
        wkt, srid = [c.value for c in road.path.clauses]
        assert wkt == linestring_wkt(coords) == "LINESTRING(72.91 19.13, 72.92 19.14)"
        assert srid == 4326


def test_linestring_wkt_uses_lng_lat_order():
    assert linestring_wkt([(1.5, 2.5)]) == "LINESTRING(2.5 1.5)"
