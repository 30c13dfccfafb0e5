"""
Domain entities for the routing core.

Patterns used
-------------
- ``Road`` is an immutable **Value Object**: a routing call receives a
  snapshot of roads and never mutates it.
- ``NodeId`` makes node identity an explicit contract: coordinates are
  rounded onto an integer grid of ``10**-precision`` degrees and two
  coordinates are the same node iff their grid cells are equal.  At the
  default precision of 6 the grid step is one micro-degree (about 0.11 m
  of latitude).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import LocationCategory, RoadType, RouteStatus
from .geometry import Coordinate

DEFAULT_NODE_PRECISION = 6


class InvalidRoad(ValueError):
    """Raised when a road polyline cannot be routed over."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Road:
    id: str
    coordinates: tuple[Coordinate, ...]
    name: str = ""
    type: RoadType = RoadType.CUSTOM
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        coords = tuple((float(lat), float(lng)) for lat, lng in self.coordinates)
        if len(coords) < 2:
            raise InvalidRoad(
                f"Road {self.id!r} needs at least 2 coordinates, got {len(coords)}"
            )
        object.__setattr__(self, "coordinates", coords)

    def segments(self) -> list[tuple[Coordinate, Coordinate]]:
        return list(zip(self.coordinates, self.coordinates[1:]))


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    lat: float
    lng: float
    description: str = ""
    category: LocationCategory = LocationCategory.CUSTOM


@dataclass(frozen=True, order=True)
class NodeId:
    lat_key: int
    lng_key: int

    @classmethod
    def from_coord(
        cls, coord: Coordinate, precision: int = DEFAULT_NODE_PRECISION
    ) -> NodeId:
        scale = 10**precision
        return cls(round(coord[0] * scale), round(coord[1] * scale))

    def __str__(self) -> str:
        return f"{self.lat_key},{self.lng_key}"


# ── Graph ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GraphNode:
    id: NodeId
    coord: Coordinate


@dataclass(frozen=True)
class GraphEdge:
    a: NodeId
    b: NodeId
    weight: float
    road_id: str


@dataclass
class Graph:
    precision: int = DEFAULT_NODE_PRECISION
    nodes: dict[NodeId, GraphNode] = field(default_factory=dict)
    adjacency: dict[NodeId, dict[NodeId, GraphEdge]] = field(default_factory=dict)
    edges: list[GraphEdge] = field(default_factory=list)

    def key_for(self, coord: Coordinate) -> NodeId:
        return NodeId.from_coord(coord, self.precision)

    def add_node(self, coord: Coordinate) -> NodeId:
        """Register *coord*; the first coordinate seen for a key is kept."""
        node_id = self.key_for(coord)
        if node_id not in self.nodes:
            self.nodes[node_id] = GraphNode(node_id, coord)
            self.adjacency[node_id] = {}
        return node_id

    def add_edge(self, a: NodeId, b: NodeId, weight: float, road_id: str) -> bool:
        """Connect *a* and *b* unless that pair is already connected."""
        if a == b or b in self.adjacency[a]:
            return False
        edge = GraphEdge(a, b, weight, road_id)
        self.adjacency[a][b] = edge
        self.adjacency[b][a] = edge
        self.edges.append(edge)
        return True

    def neighbours(self, node_id: NodeId) -> dict[NodeId, GraphEdge]:
        return self.adjacency.get(node_id, {})

    def coord(self, node_id: NodeId) -> Coordinate:
        return self.nodes[node_id].coord

    @property
    def is_empty(self) -> bool:
        return not self.nodes


# ── Query results ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class SnappedPoint:
    point: Coordinate
    segment: tuple[Coordinate, Coordinate]
    segment_index: int
    road: Road
    distance: float


@dataclass(frozen=True)
class PathResult:
    path: list[NodeId]
    distance: float


@dataclass
class Route:
    waypoints: list[Coordinate]
    distance: float
    estimated_minutes: float
    instructions: list[str]
    status: RouteStatus = RouteStatus.ROAD_ROUTED

    @property
    def is_fallback(self) -> bool:
        return self.status == RouteStatus.STRAIGHT_LINE_FALLBACK
