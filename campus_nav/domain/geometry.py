"""
Geometry primitives for campus-scale routing.

Two frames are used
-------------------
* **Great-circle** (Haversine) metres for every distance that is reported
  to a user or used as an edge weight.
* **Planar lat/lng** for projection and intersection tests.  Roads are
  drawn as straight lines on a web map, so a segment is straight in
  lat/lng space, not along a great circle.  ``is_point_on_segment`` uses
  an equirectangular metre frame for the same reason: scaling both axes
  by constants keeps lat/lng-straight lines straight.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

Coordinate = tuple[float, float]

EARTH_RADIUS_M = 6_371_000.0
METERS_PER_DEGREE = math.pi * EARTH_RADIUS_M / 180.0


def distance_meters(p1: Coordinate, p2: Coordinate) -> float:
    """Return the great-circle distance in **metres** between two points."""
    lat1_r, lat2_r = math.radians(p1[0]), math.radians(p2[0])
    dlat = math.radians(p2[0] - p1[0])
    dlng = math.radians(p2[1] - p1[1])

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bearing_degrees(p1: Coordinate, p2: Coordinate) -> float:
    """Initial compass bearing from *p1* to *p2*, in ``[0, 360)``."""
    lat1, lat2 = math.radians(p1[0]), math.radians(p2[0])
    dlng = math.radians(p2[1] - p1[1])

    y = math.sin(dlng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(
        lat2
    ) * math.cos(dlng)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def project_onto_segment(
    p: Coordinate, a: Coordinate, b: Coordinate
) -> tuple[Coordinate, float]:
    """
    Closest point to *p* on the segment ``[a, b]`` and its distance in metres.

    The projection parameter is clamped to the segment, so points beyond
    either end snap to that endpoint (returned as the endpoint object
    itself, which keeps later exact-equality checks stable).
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    l2 = dx * dx + dy * dy
    if l2 == 0:
        return a, distance_meters(p, a)

    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / l2
    if t <= 0:
        closest = a
    elif t >= 1:
        closest = b
    else:
        closest = (a[0] + t * dx, a[1] + t * dy)
    return closest, distance_meters(p, closest)


def segment_intersection(
    p1: Coordinate, p2: Coordinate, p3: Coordinate, p4: Coordinate
) -> Coordinate | None:
    """
    Intersection of segments ``[p1, p2]`` and ``[p3, p4]``.

    Only crossings strictly inside both segments count (``0 < t < 1`` and
    ``0 < u < 1``).  Parallel, collinear and endpoint-touching segments
    return ``None``; touching segments already share a vertex node.
    """
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    x4, y4 = p4

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if den == 0:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den

    if 0 < t < 1 and 0 < u < 1:
        return (x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return None


def _planar_metres(p: Coordinate, q: Coordinate, lng_scale: float) -> float:
    dy = (q[0] - p[0]) * METERS_PER_DEGREE
    dx = (q[1] - p[1]) * METERS_PER_DEGREE * lng_scale
    return math.hypot(dx, dy)


def planar_distance(p: Coordinate, q: Coordinate, ref_lat: float) -> float:
    """Equirectangular distance in metres around latitude *ref_lat*."""
    return _planar_metres(p, q, math.cos(math.radians(ref_lat)))


def is_point_on_segment(
    node: Coordinate,
    a: Coordinate,
    b: Coordinate,
    tolerance_m: float = 1e-6,
) -> bool:
    """True when ``d(a, node) + d(node, b)`` equals ``d(a, b)`` within tolerance."""
    scale = math.cos(math.radians((a[0] + b[0]) / 2))
    total = _planar_metres(a, b, scale)
    partial = _planar_metres(a, node, scale) + _planar_metres(node, b, scale)
    return abs(partial - total) < tolerance_m
