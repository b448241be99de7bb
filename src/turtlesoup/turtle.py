"""Turtle graphics state machine and recorded path."""

import math
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .errors import InvalidInputError
from .geometry import normalize_heading

Color = str

DEFAULT_COLOR: Color = "black"


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Segment:
    """One recorded stroke."""

    start: Point
    end: Point
    color: Color

    @property
    def length(self) -> float:
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)


@runtime_checkable
class Turtle(Protocol):
    """Anything that can be steered by the pattern generators."""

    def forward(self, distance: float) -> None: ...

    def turn(self, degrees: float) -> None: ...

    def set_color(self, color: Color) -> None: ...

    def get_heading(self) -> float: ...

    def get_position(self) -> Point: ...


def _require_finite(name: str, value: float):
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")


@dataclass
class SimpleTurtle:
    """Turtle that records every forward move as a segment.

    Heading is in degrees, 0 along +x, counter-clockwise positive, and is
    kept in [0, 360).
    """

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    pen_color: Color = DEFAULT_COLOR
    _path: list[Segment] = field(default_factory=list)

    def forward(self, distance: float):
        _require_finite("distance", distance)
        rad = math.radians(self.heading)
        start = self.position
        end = Point(
            start.x + distance * math.cos(rad),
            start.y + distance * math.sin(rad),
        )
        self._path.append(Segment(start, end, self.pen_color))
        self.position = end

    def turn(self, degrees: float):
        _require_finite("turn", degrees)
        self.heading = normalize_heading(self.heading + degrees)

    def set_color(self, color: Color):
        if not color:
            raise InvalidInputError("pen color must be a non-empty tag")
        self.pen_color = color

    def get_heading(self) -> float:
        return self.heading

    def get_position(self) -> Point:
        return self.position

    def get_path(self) -> tuple[Segment, ...]:
        """Snapshot of everything drawn so far, in draw order."""
        return tuple(self._path)
