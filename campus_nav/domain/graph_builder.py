"""
Road Graph Builder
==================

Turns freeform user-drawn polylines into a routable, undirected graph.

1. **Vertices**      -- every road coordinate becomes a node (deduplicated
   by ``NodeId``).
2. **Intersections** -- every pair of segments from two *different* roads
   is tested; interior crossings become extra nodes.
3. **Splitting**     -- each input segment collects all registered
   nodes lying on it, orders them from the first endpoint and links
   neighbours with edges tagged by the road id.

Complexity
----------
Let S = total segments, V = registered nodes.

* Intersections: O(S²)
* Splitting:     O(S x V)

Fine for campus networks (tens to low hundreds of segments); a spatial
index would be needed for city-scale inputs.
"""

from __future__ import annotations

from typing import Iterable

from .entities import DEFAULT_NODE_PRECISION, Graph, NodeId, Road
from .geometry import (
    Coordinate,
    distance_meters,
    is_point_on_segment,
    planar_distance,
    segment_intersection,
)


def build_graph(
    roads: Iterable[Road],
    *,
    precision: int = DEFAULT_NODE_PRECISION,
    tolerance_m: float = 1e-6,
) -> Graph:
    """Build the routing graph for *roads*.  No roads -> empty graph."""
    roads = list(roads)
    graph = Graph(precision=precision)

    for road in roads:
        for coord in road.coordinates:
            graph.add_node(coord)

    for i, first in enumerate(roads):
        for second in roads[i + 1 :]:
            for p1, p2 in first.segments():
                for p3, p4 in second.segments():
                    crossing = segment_intersection(p1, p2, p3, p4)
                    if crossing is not None:
                        graph.add_node(crossing)

    for road in roads:
        for p1, p2 in road.segments():
            _split_segment(graph, road.id, p1, p2, tolerance_m)

    return graph


def _split_segment(
    graph: Graph,
    road_id: str,
    p1: Coordinate,
    p2: Coordinate,
    tolerance_m: float,
) -> None:
    start_id = graph.key_for(p1)
    end_id = graph.key_for(p2)

    on_segment: dict[NodeId, Coordinate] = {
        start_id: graph.coord(start_id),
        end_id: graph.coord(end_id),
    }
    for node in graph.nodes.values():
        if node.id in on_segment:
            continue
        if is_point_on_segment(node.coord, p1, p2, tolerance_m):
            on_segment[node.id] = node.coord

    ref_lat = (p1[0] + p2[0]) / 2
    ordered = sorted(
        on_segment.items(),
        key=lambda item: planar_distance(p1, item[1], ref_lat),
    )

    for (a_id, a), (b_id, b) in zip(ordered, ordered[1:]):
        if a_id != b_id:
            graph.add_edge(a_id, b_id, distance_meters(a, b), road_id)
