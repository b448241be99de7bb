"""Path validation against the export canvas."""

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import Config
from .svg import to_canvas
from .turtle import Segment


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict = field(default_factory=dict)


class PathValidator:
    """Checks a recorded path before export."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas

    def validate(self, path: Sequence[Segment]) -> ValidationResult:
        errors = []
        warnings = []

        for i, segment in enumerate(path, 1):
            coords = (segment.start.x, segment.start.y, segment.end.x, segment.end.y)
            if not all(math.isfinite(v) for v in coords):
                errors.append(f"S{i}: non-finite coordinate {coords}")

        for i, (x1, y1, x2, y2) in enumerate(to_canvas(path, self.config), 1):
            for x, y in ((x1, y1), (x2, y2)):
                if not (0 <= x <= self.canvas.width and 0 <= y <= self.canvas.height):
                    warnings.append(
                        f"S{i}: ({x:.2f}, {y:.2f}) outside canvas "
                        f"[0, {self.canvas.width}] x [0, {self.canvas.height}]"
                    )
                    break

        return ValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            stats=self._stats(path),
        )

    def _stats(self, path: Sequence[Segment]) -> dict:
        stats = {
            "segments": len(path),
            "total_length": sum(s.length for s in path),
            "colors": dict(Counter(s.color for s in path)),
        }
        if path:
            xs = [v for s in path for v in (s.start.x, s.end.x)]
            ys = [v for s in path for v in (s.start.y, s.end.y)]
            stats["bounds"] = {
                "min_x": min(xs),
                "max_x": max(xs),
                "min_y": min(ys),
                "max_y": max(ys),
            }
        return stats
