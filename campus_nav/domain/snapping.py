"""
Nearest-segment locator.

Maps an arbitrary coordinate onto the road network by projecting it onto
every segment of every road and keeping the global minimum.

Complexity: O(S) per query, S = total segments.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .entities import Location, Road, SnappedPoint
from .geometry import Coordinate, distance_meters, project_onto_segment


def find_nearest_road_and_segment(
    point: Coordinate, roads: Iterable[Road]
) -> Optional[SnappedPoint]:
    """
    Snap *point* to the closest point on the closest road segment.

    The returned segment endpoints (not the projected point) are what the
    route assembler uses as graph entry nodes.  ``None`` only when there
    are no roads.  On ties the first segment encountered wins.
    """
    best: Optional[SnappedPoint] = None
    for road in roads:
        for index, (a, b) in enumerate(road.segments()):
            closest, dist = project_onto_segment(point, a, b)
            if best is None or dist < best.distance:
                best = SnappedPoint(
                    point=closest,
                    segment=(a, b),
                    segment_index=index,
                    road=road,
                    distance=dist,
                )
    return best


def find_nearest_road(
    point: Coordinate, roads: Iterable[Road], max_distance_m: float = 30.0
) -> Optional[SnappedPoint]:
    """Closest road to *point* if it lies within *max_distance_m*."""
    match = find_nearest_road_and_segment(point, roads)
    if match is None or match.distance > max_distance_m:
        return None
    return match


def find_nearest_location(
    point: Coordinate,
    locations: Iterable[Location],
    max_distance_m: float = 50.0,
) -> Optional[tuple[Location, float]]:
    """Closest campus location within *max_distance_m*, with its distance."""
    best: Optional[tuple[Location, float]] = None
    for loc in locations:
        d = distance_meters(point, (loc.lat, loc.lng))
        if best is None or d < best[1]:
            best = (loc, d)
    if best is None or best[1] > max_distance_m:
        return None
    return best
