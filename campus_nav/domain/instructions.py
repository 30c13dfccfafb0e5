"""
Turn-by-turn instruction generator.

Turn angle = bearing_out - bearing_in, normalised into (-180, 180].
Positive angles turn right.  Thresholds are inclusive toward the stronger
class (see ``TURN_THRESHOLDS``): exactly 45 degrees is "Turn right", not
"Make a slight right".  Straight-through vertices emit nothing and their
distance is folded into the leg that is being described.
"""

from __future__ import annotations

from typing import Sequence

from .enums import COMPASS_POINTS, TURN_THRESHOLDS, TurnKind
from .geometry import Coordinate, bearing_degrees, distance_meters

ARRIVAL_MESSAGE = "You will arrive at your destination."


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{round(meters)} m"
    return f"{meters / 1000:.1f} km"


def bearing_to_direction(bearing: float) -> str:
    """One of the 8 compass points, rounding the bearing to the nearest 45."""
    return COMPASS_POINTS[round(bearing / 45) % 8]


def normalize_turn_angle(angle: float) -> float:
    angle = (angle + 180.0) % 360.0 - 180.0
    return 180.0 if angle == -180.0 else angle


def classify_turn(angle: float) -> TurnKind:
    angle = normalize_turn_angle(angle)
    for bound, right, left in TURN_THRESHOLDS:
        if angle >= bound:
            return right
        if angle <= -bound:
            return left
    return TurnKind.STRAIGHT


def turn_angle(prev: Coordinate, current: Coordinate, nxt: Coordinate) -> float:
    bearing_in = bearing_degrees(prev, current)
    bearing_out = bearing_degrees(current, nxt)
    return normalize_turn_angle(bearing_out - bearing_in)


def build_instructions(waypoints: Sequence[Coordinate]) -> list[str]:
    """Directions for a road route, always ending with the arrival message."""
    if len(waypoints) < 2:
        return [ARRIVAL_MESSAGE]

    legs = [distance_meters(a, b) for a, b in zip(waypoints, waypoints[1:])]
    direction = bearing_to_direction(bearing_degrees(waypoints[0], waypoints[1]))

    # (turn, distance) per emitted step; the first step has no turn
    steps: list[tuple[TurnKind | None, float]] = [(None, legs[0])]
    for i in range(1, len(waypoints) - 1):
        kind = classify_turn(turn_angle(waypoints[i - 1], waypoints[i], waypoints[i + 1]))
        if kind is TurnKind.STRAIGHT:
            turn, travelled = steps[-1]
            steps[-1] = (turn, travelled + legs[i])
        else:
            steps.append((kind, legs[i]))

    instructions = []
    for turn, travelled in steps:
        if turn is None:
            instructions.append(f"Head {direction} for {format_distance(travelled)}.")
        else:
            instructions.append(
                f"{turn.value}, then continue for {format_distance(travelled)}."
            )
    instructions.append(ARRIVAL_MESSAGE)
    return instructions


def straight_line_instruction(start: Coordinate, dest: Coordinate) -> str:
    direction = bearing_to_direction(bearing_degrees(start, dest))
    return (
        f"Head {direction} towards destination "
        f"({format_distance(distance_meters(start, dest))})"
    )
