"""Unit tests for route assembly and the straight-line fallback."""

import logging

import pytest

from campus_nav.domain.entities import Road
from campus_nav.domain.enums import RouteStatus
from campus_nav.domain.geometry import distance_meters
from campus_nav.domain.instructions import ARRIVAL_MESSAGE
from campus_nav.domain.routing import (
    collapse_duplicates,
    compute_route,
    estimate_minutes,
    straight_line_route,
)


class TestStraightLineFallback:
    def test_no_roads(self):
        start, dest = (19.1300, 72.9100), (19.1350, 72.9150)
        route = compute_route(start, dest, [])
        assert route.waypoints == [start, dest]
        assert route.distance == pytest.approx(distance_meters(start, dest))
        assert route.status is RouteStatus.STRAIGHT_LINE_FALLBACK
        assert route.is_fallback
        assert len(route.instructions) == 1
        assert route.instructions[0].startswith("Head North-East towards destination")

    def test_matches_helper(self):
        start, dest = (0, 0), (0.01, 0.01)
        assert compute_route(start, dest, []) == straight_line_route(start, dest)

    def test_unreachable_destination(self):
        roads = [
            Road(id="r1", coordinates=[(0, 0), (0, 1)]),
            Road(id="r2", coordinates=[(1, 0), (1, 1)]),
        ]
        route = compute_route((0, 0), (1, 1), roads)
        assert route.status is RouteStatus.STRAIGHT_LINE_FALLBACK
        assert route.waypoints == [(0, 0), (1, 1)]

    def test_identical_points_without_roads(self):
        route = compute_route((0.5, 0.5), (0.5, 0.5), [])
        assert route.distance == 0.0
        assert route.estimated_minutes == 0.0


class TestRoadRouting:
    def test_single_road_end_to_end(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 1)])]
        route = compute_route((0, 0), (0, 1), roads)
        assert route.status is RouteStatus.ROAD_ROUTED
        assert route.waypoints == [(0, 0), (0, 1)]
        assert route.distance == pytest.approx(distance_meters((0, 0), (0, 1)))
        assert route.instructions == ["Head East for 111.2 km.", ARRIVAL_MESSAGE]

    def test_route_passes_through_intersection(self, crossing_roads):
        start, dest = (0, 0), (1, 0)
        route = compute_route(start, dest, crossing_roads)
        assert route.status is RouteStatus.ROAD_ROUTED
        assert route.waypoints == [(0, 0), (0.5, 0.5), (1, 0)]
        expected = distance_meters(start, (0.5, 0.5)) + distance_meters((0.5, 0.5), dest)
        assert route.distance == pytest.approx(expected)
        assert route.distance > distance_meters(start, dest)
        assert route.instructions[0].startswith("Head North-East")
        assert route.instructions[1].startswith("Turn right")
        assert route.instructions[-1] == ARRIVAL_MESSAGE

    def test_endpoints_snapped_onto_roads(self, crossing_roads):
        route = compute_route((-0.1, -0.1), (1, 0), crossing_roads)
        assert route.waypoints[0] == (0, 0)
        assert route.waypoints[-1] == (1, 0)

    def test_same_segment_shortcut(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 1)])]
        route = compute_route((0, 0.25), (0, 0.75), roads)
        assert route.waypoints == [(0, 0.25), (0, 0.75)]
        assert route.distance == pytest.approx(distance_meters((0, 0.25), (0, 0.75)))

    def test_mid_segment_endpoints_on_different_segments(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 0.002), (0.002, 0.002)])]
        route = compute_route((0, 0.001), (0.001, 0.002), roads)
        assert route.waypoints == [(0, 0.001), (0, 0.002), (0.001, 0.002)]
        assert route.instructions[0].startswith("Head East")
        assert route.instructions[1].startswith("Turn left")

    def test_picks_shorter_of_two_roads(self):
        roads = [
            Road(id="short", coordinates=[(0, 0), (0.001, 0.001), (0, 0.002)]),
            Road(id="long", coordinates=[(0, 0), (-0.005, 0.001), (0, 0.002)]),
        ]
        route = compute_route((0, 0), (0, 0.002), roads)
        assert route.waypoints == [(0, 0), (0.001, 0.001), (0, 0.002)]

    def test_identical_start_and_destination(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 1)])]
        route = compute_route((0, 0.5), (0, 0.5), roads)
        assert route.waypoints == [(0, 0.5)]
        assert route.distance == 0.0
        assert route.instructions == [ARRIVAL_MESSAGE]

    def test_degenerate_road_falls_back(self):
        roads = [Road(id="dot", coordinates=[(0, 0), (0, 0)])]
        route = compute_route((1, 1), (2, 2), roads)
        assert route.status is RouteStatus.STRAIGHT_LINE_FALLBACK
        assert route.waypoints == [(1, 1), (2, 2)]
        assert route.distance == pytest.approx(distance_meters((1, 1), (2, 2)))

    def test_distinct_points_snapping_to_one_vertex_fall_back(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 1)])]
        start, dest = (0, -1), (0, -2)
        route = compute_route(start, dest, roads)
        assert route.status is RouteStatus.STRAIGHT_LINE_FALLBACK
        assert route.waypoints == [start, dest]
        assert route.distance == pytest.approx(distance_meters(start, dest))
        assert route.instructions[0].startswith("Head West towards destination")

    def test_identical_points_beyond_road_end(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 1)])]
        route = compute_route((0, -1), (0, -1), roads)
        assert route.status is RouteStatus.ROAD_ROUTED
        assert route.waypoints == [(0, 0)]
        assert route.distance == 0.0

    def test_shared_id_does_not_join_unrelated_roads(self):
        roads = [
            Road(id="dup", coordinates=[(0, 0), (0, 1)]),
            Road(id="dup", coordinates=[(1, 0), (1, 1)]),
        ]
        route = compute_route((0, 0.5), (1, 0.5), roads)
        assert route.status is RouteStatus.STRAIGHT_LINE_FALLBACK
        assert route.waypoints == [(0, 0.5), (1, 0.5)]

    def test_estimated_minutes(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 0.01)])]
        route = compute_route((0, 0), (0, 0.01), roads)
        assert route.estimated_minutes == pytest.approx(route.distance / 1000 * 2)

    def test_custom_pace(self):
        roads = [Road(id="r1", coordinates=[(0, 0), (0, 0.01)])]
        route = compute_route((0, 0), (0, 0.01), roads, minutes_per_km=12.0)
        assert route.estimated_minutes == pytest.approx(route.distance / 1000 * 12)


class TestLogging:
    def test_injected_logger_records_fallback(self, caplog):
        logger = logging.getLogger("tests.routing")
        with caplog.at_level(logging.INFO, logger="tests.routing"):
            compute_route((0, 0), (1, 1), [], logger=logger)
        assert "straight-line" in caplog.text

    def test_default_logger_is_silent(self, caplog):
        with caplog.at_level(logging.DEBUG):
            compute_route((0, 0), (1, 1), [])
        assert caplog.records == []


class TestHelpers:
    def test_collapse_duplicates(self):
        points = [(0, 0), (0, 0), (0, 1), (0, 1), (0, 0)]
        assert collapse_duplicates(points) == [(0, 0), (0, 1), (0, 0)]

    def test_collapse_duplicates_by_node(self):
        points = [(0, 0.001), (0, 0.0010000001), (0.001, 0.001)]
        assert collapse_duplicates(points) == [(0, 0.001), (0.001, 0.001)]

    def test_collapse_keeps_points_on_distinct_nodes(self):
        points = [(0, 0.001), (0, 0.001001)]
        assert collapse_duplicates(points) == points

    def test_estimate_minutes(self):
        assert estimate_minutes(1500) == pytest.approx(3.0)
