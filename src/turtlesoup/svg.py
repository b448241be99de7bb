"""HTML/SVG export of recorded turtle paths."""

import html
import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from .config import Config
from .errors import ExportError
from .turtle import Segment

logger = logging.getLogger(__name__)


def to_canvas(path: Sequence[Segment], config: Config) -> np.ndarray:
    """Segment endpoints in canvas space, shape (n, 4) as x1, y1, x2, y2."""
    if not path:
        return np.empty((0, 4))

    coords = np.array(
        [(s.start.x, s.start.y, s.end.x, s.end.y) for s in path], dtype=float
    )
    cx, cy = config.canvas.center
    return coords * config.canvas.scale + np.array([cx, cy, cx, cy])


class SvgExporter:
    """Exports turtle paths to a standalone HTML page."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.canvas = self.config.canvas
        self.stroke = self.config.stroke

    def render(self, path: Sequence[Segment]) -> str:
        """Convert a recorded path to an HTML document string."""
        lines = []
        for segment, (x1, y1, x2, y2) in zip(path, to_canvas(path, self.config)):
            lines.append(
                f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
                f'stroke="{html.escape(segment.color)}" stroke-width="{self.stroke.width:g}" '
                f'stroke-opacity="{self.stroke.opacity:g}"/>'
            )

        body = "\n        ".join(lines)
        return f"""<!DOCTYPE html>
<html>
<head>
    <title>{html.escape(self.canvas.title)}</title>
    <style>
        body {{ background-color: {html.escape(self.canvas.background)}; display: flex; justify-content: center; }}
        svg {{ box-shadow: 0 4px 6px rgba(0,0,0,0.1); }}
    </style>
</head>
<body>
    <svg width="{self.canvas.width}" height="{self.canvas.height}">
        {body}
    </svg>
</body>
</html>
"""

    def export(self, path: Sequence[Segment], filename: str | Path | None = None) -> Path:
        """Render and write the document, replacing any existing file."""
        target = Path(filename or self.config.output.filename)
        document = self.render(path)
        try:
            target.write_text(document)
        except OSError as e:
            raise ExportError(f"cannot write {target}: {e}") from e

        logger.debug("wrote %d segments to %s", len(path), target)
        return target
