"""Domain enumerations and turn-classification thresholds."""

import enum


class RoadType(str, enum.Enum):
    HIGHWAY = "highway"
    STREET = "street"
    PATH = "path"
    CUSTOM = "custom"


class LocationCategory(str, enum.Enum):
    RESTAURANT = "restaurant"
    HOSPITAL = "hospital"
    SCHOOL = "school"
    SHOPPING = "shopping"
    GAS = "gas"
    HOTEL = "hotel"
    CUSTOM = "custom"


class RouteStatus(str, enum.Enum):
    ROAD_ROUTED = "ROAD_ROUTED"
    STRAIGHT_LINE_FALLBACK = "STRAIGHT_LINE_FALLBACK"


class TurnKind(str, enum.Enum):
    U_TURN = "Make a U-turn"
    RIGHT = "Turn right"
    SLIGHT_RIGHT = "Make a slight right"
    LEFT = "Turn left"
    SLIGHT_LEFT = "Make a slight left"
    STRAIGHT = ""


# Lower bound (inclusive) of |angle| for each class, strongest first
TURN_THRESHOLDS: list[tuple[float, TurnKind, TurnKind]] = [
    (135.0, TurnKind.U_TURN, TurnKind.U_TURN),
    (45.0, TurnKind.RIGHT, TurnKind.LEFT),
    (15.0, TurnKind.SLIGHT_RIGHT, TurnKind.SLIGHT_LEFT),
]

COMPASS_POINTS: list[str] = [
    "North",
    "North-East",
    "East",
    "South-East",
    "South",
    "South-West",
    "West",
    "North-West",
]
