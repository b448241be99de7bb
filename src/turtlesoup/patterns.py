"""Path generators built on turtle primitives."""

import logging
import math
from collections.abc import Sequence

from .errors import DivisionByZeroError, InvalidInputError
from .geometry import bearing, chord_length, distance, normalize_turn
from .turtle import Point, Turtle

logger = logging.getLogger(__name__)

PALETTE = ("teal", "coral", "indigo", "gold", "crimson", "navy", "olive", "maroon")

SPIRAL_GROWTH = 1.05


def _check_count(name: str, value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value == 0:
        raise DivisionByZeroError(f"{name} must be >= 1, got 0")
    if value < 0:
        raise InvalidInputError(f"{name} must be >= 1, got {value}")


def _check_finite(name: str, value: float):
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")


def draw_polygon(turtle: Turtle, side_length: float, num_sides: int):
    """Draw a regular polygon starting at the current position and heading.

    The turtle turns a full 360 degrees in total, so it ends on its original
    heading.
    """
    _check_count("num_sides", num_sides)
    _check_finite("side_length", side_length)

    angle_per_turn = 360 / num_sides
    for _ in range(num_sides):
        turtle.forward(side_length)
        turtle.turn(angle_per_turn)


def draw_spiraling_circle(
    turtle: Turtle, radius: float, iterations: int, growth: float = SPIRAL_GROWTH
):
    """Approximate an outward spiral with `iterations` chords.

    Each step uses the chord of the current radius, then grows the radius by
    `growth`, so the path opens up instead of closing into a circle.
    """
    _check_count("iterations", iterations)
    _check_finite("growth", growth)
    if growth < 0:
        raise InvalidInputError(f"growth must be >= 0, got {growth}")

    base_angle = 360 / iterations
    # radius is monotonic, so checking both ends covers every step
    chord_length(radius, base_angle)
    try:
        final_radius = radius * growth ** (iterations - 1) if radius else 0.0
    except OverflowError:
        final_radius = math.inf
    if not math.isfinite(final_radius):
        raise InvalidInputError(
            f"spiral radius overflows after {iterations} steps of growth {growth}"
        )
    chord_length(final_radius, base_angle)

    current_radius = radius
    for _ in range(iterations):
        turtle.forward(chord_length(current_radius, base_angle))
        turtle.turn(base_angle)
        current_radius *= growth


def plot_optimal_path(
    turtle: Turtle, points: Sequence[Point], shortest_turn: bool = True
) -> list[str]:
    """Steer the turtle through consecutive waypoints.

    For each leg the turtle turns onto the bearing of the next point and moves
    the leg's length. Returns two display lines per leg. With `shortest_turn`
    the turn is wrapped into (-180, 180]; otherwise the raw difference between
    bearing and heading is used.
    """
    for i, p in enumerate(points):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidInputError(f"waypoint {i} is not finite: {p}")

    legs = [(current, nxt, distance(current, nxt)) for current, nxt in zip(points, points[1:])]
    for i, (_, _, leg_length) in enumerate(legs):
        _check_finite(f"leg {i} length", leg_length)

    instructions = []

    for current, nxt, travel_distance in legs:
        turn_angle = bearing(current, nxt) - turtle.get_heading()
        if shortest_turn:
            turn_angle = normalize_turn(turn_angle)

        turtle.turn(turn_angle)
        turtle.forward(travel_distance)

        for line in (f"Turn {turn_angle:.2f} degrees", f"Move {travel_distance:.2f} units"):
            logger.debug(line)
            instructions.append(line)

    return instructions


def create_geometric_artwork(turtle: Turtle):
    """Layered polygons in five complexity bands, each band in its own colour."""
    for complexity in range(1, 6):
        color = PALETTE[(complexity * 2) % len(PALETTE)]
        turtle.set_color(color)
        logger.debug("complexity %d in %s", complexity, color)

        for num_sides in range(3, 9):
            draw_polygon(turtle, 50 / complexity, num_sides)
            turtle.turn(360 / (num_sides * complexity))
