"""
Shortest-path solver (Dijkstra)
===============================

Binary-heap Dijkstra over the undirected road graph.

* Edge weights are Haversine metres, hence never negative, so the first
  time a node is popped its distance is final.
* The search stops as soon as the target is popped.
* Heap entries carry an insertion counter so equal distances pop in the
  order they were pushed, which keeps results reproducible.

Complexity: O((V + E) log V).
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Optional

from .entities import Graph, NodeId, PathResult


def shortest_path(
    graph: Graph, source: NodeId, target: NodeId
) -> Optional[PathResult]:
    """Return the node path and distance from *source* to *target*, or ``None``."""
    if source not in graph.nodes or target not in graph.nodes:
        return None

    dist: dict[NodeId, float] = {source: 0.0}
    prev: dict[NodeId, NodeId] = {}
    visited: set[NodeId] = set()
    counter = itertools.count()
    heap: list[tuple[float, int, NodeId]] = [(0.0, next(counter), source)]

    while heap:
        d, _, u = heapq.heappop(heap)
        if u in visited:
            continue  # stale entry
        visited.add(u)
        if u == target:
            break

        for v, edge in graph.neighbours(u).items():
            if v in visited:
                continue
            alt = d + edge.weight
            if alt < dist.get(v, math.inf):
                dist[v] = alt
                prev[v] = u
                heapq.heappush(heap, (alt, next(counter), v))

    if target not in visited:
        return None

    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return PathResult(path=path, distance=dist[target])
