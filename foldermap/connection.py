"""Curved links drawn between two mind-map nodes."""

from __future__ import annotations

from typing import Optional

from .node import MindMapNode, Point

PEN_COLOR = "darkgray"
PEN_WIDTH = 2
Z_VALUE = -1


class Connection:
    """A cubic Bézier curve from a source node to a destination node."""

    def __init__(self, source: Optional[MindMapNode], destination: Optional[MindMapNode]) -> None:
        self.source = source
        self.destination = destination
        self.z_value = Z_VALUE
        self.path: Optional[tuple[Point, Point, Point, Point]] = None
        self.update_path()
        if source is not None:
            source.add_connection(self)
        if destination is not None:
            destination.add_connection(self)

    def update_path(self) -> None:
        """Recompute start, both control points and end from the node positions."""
        if self.source is None or self.destination is None:
            return
        sx, sy = self.source.pos
        ex, ey = self.destination.pos
        mid_x = sx + (ex - sx) * 0.5
        self.path = ((sx, sy), (mid_x, sy), (mid_x, ey), (ex, ey))

    def points(self, steps: int) -> list[Point]:
        """Sample the curve at steps + 1 evenly spaced parameter values."""
        if steps < 1:
            raise ValueError("steps must be at least 1")
        if self.path is None:
            return []
        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = self.path
        result = []
        for i in range(steps + 1):
            t = i / steps
            u = 1.0 - t
            a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
            result.append((a * x0 + b * x1 + c * x2 + d * x3, a * y0 + b * y1 + c * y2 + d * y3))
        return result