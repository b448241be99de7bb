"""Geometry helpers shared by the turtle and the pattern generators."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .errors import InvalidInputError

if TYPE_CHECKING:
    from .turtle import Point

CHORD_PRECISION = 1_000_000


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def chord_length(radius: float, angle_degrees: float) -> float:
    """Length of the chord subtending `angle_degrees` on a circle of `radius`.

    Rounded to 6 decimals, halves towards +inf, so repeated runs print
    identical geometry. A negative angle gives a negative chord.
    """
    if not math.isfinite(radius) or radius < 0:
        raise InvalidInputError(f"radius must be finite and >= 0, got {radius}")
    if not math.isfinite(angle_degrees):
        raise InvalidInputError(f"angle must be finite, got {angle_degrees}")

    half = math.radians(angle_degrees / 2)
    scaled = 2 * radius * math.sin(half) * CHORD_PRECISION
    if not math.isfinite(scaled):
        raise InvalidInputError(f"chord for radius {radius} is out of range")
    return math.floor(scaled + 0.5) / CHORD_PRECISION


def bearing(a: Point, b: Point) -> float:
    """Direction from a to b in degrees, (-180, 180]."""
    return math.degrees(math.atan2(b.y - a.y, b.x - a.x))


def normalize_heading(degrees: float) -> float:
    """Wrap into [0, 360)."""
    wrapped = degrees % 360.0
    # tiny negatives round up to exactly 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def normalize_turn(degrees: float) -> float:
    """Wrap into (-180, 180], the shortest equivalent turn."""
    wrapped = normalize_heading(degrees)
    return wrapped - 360.0 if wrapped > 180.0 else wrapped
