"""
Route Assembler
===============

start + destination + roads  ->  waypoints + distance + directions.

1. **Snap**    -- both endpoints onto their nearest road segment.
2. **Graph**   -- build the intersection-aware road graph.
3. **Search**  -- run Dijkstra for all four (start-segment endpoint,
   destination-segment endpoint) pairs and keep the cheapest
   ``d(snapped_start, s) + path + d(t, snapped_dest)``.  When both
   endpoints snap onto the same segment the direct hop between the two
   snapped points is a candidate too.
4. **Stitch**  -- ``[snapped_start, *path, snapped_dest]`` with adjacent
   duplicates collapsed.
5. **Explain** -- turn-by-turn instructions.

Failure policy
--------------
Routing never raises for a valid road list.  No roads, no snap, no
reachable path or two distinct endpoints snapping onto one point all
degrade to a straight line between the raw endpoints;
``Route.status`` tells the caller which of the two it got.

The distance travelled from a raw endpoint to its snapped point is not
included; the route starts and ends on the road network.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .entities import (
    DEFAULT_NODE_PRECISION,
    Graph,
    NodeId,
    Road,
    Route,
    SnappedPoint,
)
from .enums import RouteStatus
from .geometry import Coordinate, distance_meters
from .graph_builder import build_graph
from .instructions import build_instructions, straight_line_instruction
from .shortest_path import shortest_path
from .snapping import find_nearest_road_and_segment

MINUTES_PER_KM = 2.0

_silent_logger = logging.getLogger("campus_nav.routing.silent")
_silent_logger.addHandler(logging.NullHandler())
_silent_logger.propagate = False


def estimate_minutes(distance_m: float, minutes_per_km: float = MINUTES_PER_KM) -> float:
    """Fixed-pace travel time heuristic, not a speed model."""
    return distance_m / 1000 * minutes_per_km


def collapse_duplicates(
    points: Iterable[Coordinate], precision: int = DEFAULT_NODE_PRECISION
) -> list[Coordinate]:
    """Drop points that fall on the same node as their predecessor."""
    collapsed: list[Coordinate] = []
    last: Optional[NodeId] = None
    for p in points:
        key = NodeId.from_coord(p, precision)
        if key != last:
            collapsed.append(p)
            last = key
    return collapsed


def straight_line_route(
    start: Coordinate, dest: Coordinate, minutes_per_km: float = MINUTES_PER_KM
) -> Route:
    distance = distance_meters(start, dest)
    return Route(
        waypoints=[start, dest],
        distance=distance,
        estimated_minutes=estimate_minutes(distance, minutes_per_km),
        instructions=[straight_line_instruction(start, dest)],
        status=RouteStatus.STRAIGHT_LINE_FALLBACK,
    )


def _same_segment(a: SnappedPoint, b: SnappedPoint, graph: Graph) -> bool:
    """Same road, same segment index and the same endpoint nodes."""
    if a.road.id != b.road.id or a.segment_index != b.segment_index:
        return False
    return all(
        graph.key_for(p) == graph.key_for(q) for p, q in zip(a.segment, b.segment)
    )


def find_road_path(
    snapped_start: SnappedPoint, snapped_dest: SnappedPoint, graph: Graph
) -> Optional[tuple[list[Coordinate], float]]:
    """Cheapest waypoint chain between two snapped points, or ``None``."""
    best: Optional[tuple[list[Coordinate], float]] = None
    s_point, d_point = snapped_start.point, snapped_dest.point

    for s_coord in snapped_start.segment:
        for d_coord in snapped_dest.segment:
            s_id, d_id = graph.key_for(s_coord), graph.key_for(d_coord)
            result = shortest_path(graph, s_id, d_id)
            if result is None:
                continue
            total = (
                distance_meters(s_point, graph.coord(s_id))
                + result.distance
                + distance_meters(graph.coord(d_id), d_point)
            )
            if best is None or total < best[1]:
                path = [graph.coord(node_id) for node_id in result.path]
                best = ([s_point, *path, d_point], total)

    if _same_segment(snapped_start, snapped_dest, graph):
        direct = distance_meters(s_point, d_point)
        if best is None or direct < best[1]:
            best = ([s_point, d_point], direct)

    if best is None:
        return None
    return collapse_duplicates(best[0], graph.precision), best[1]


def compute_route(
    start: Coordinate,
    dest: Coordinate,
    roads: Iterable[Road],
    *,
    minutes_per_km: float = MINUTES_PER_KM,
    precision: int = DEFAULT_NODE_PRECISION,
    tolerance_m: float = 1e-6,
    logger: Optional[logging.Logger] = None,
) -> Route:
    """Route from *start* to *dest* along *roads*; always returns a route."""
    log = logger or _silent_logger
    roads = list(roads)

    if not roads:
        log.info("No roads available, using straight-line route")
        return straight_line_route(start, dest, minutes_per_km)

    snapped_start = find_nearest_road_and_segment(start, roads)
    snapped_dest = find_nearest_road_and_segment(dest, roads)
    if snapped_start is None or snapped_dest is None:
        log.info("Could not snap endpoints to a road, using straight-line route")
        return straight_line_route(start, dest, minutes_per_km)

    graph = build_graph(roads, precision=precision, tolerance_m=tolerance_m)
    log.debug(
        "Road graph built: %d nodes, %d edges from %d roads",
        len(graph.nodes),
        len(graph.edges),
        len(roads),
    )

    found = find_road_path(snapped_start, snapped_dest, graph)
    if found is None:
        log.info(
            "No path between roads %s and %s, using straight-line route",
            snapped_start.road.id,
            snapped_dest.road.id,
        )
        return straight_line_route(start, dest, minutes_per_km)

    waypoints, distance = found
    if len(waypoints) < 2 and start != dest:
        log.info(
            "Both endpoints snapped to the same point on road %s, "
            "using straight-line route",
            snapped_start.road.id,
        )
        return straight_line_route(start, dest, minutes_per_km)

    return Route(
        waypoints=waypoints,
        distance=distance,
        estimated_minutes=estimate_minutes(distance, minutes_per_km),
        instructions=build_instructions(waypoints),
        status=RouteStatus.ROAD_ROUTED,
    )
