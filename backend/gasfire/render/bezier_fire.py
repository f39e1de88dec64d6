"""BezierFire — one closed flame silhouette made of cubic bezier segments.

All transforms return new instances; nothing here mutates in place.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from gasfire.utils.geometry import sample_bezier


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned frame: (x1, y1) top-left, (x2, y2) bottom-right."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def corners(self) -> list[tuple[float, float]]:
        """Clockwise from top-left."""
        return [
            (self.x1, self.y1),
            (self.x2, self.y1),
            (self.x2, self.y2),
            (self.x1, self.y2),
        ]


@dataclass(frozen=True)
class BezierSegment:
    """Cubic segment continuing from the previous endpoint."""

    cp1x: float
    cp1y: float
    cp2x: float
    cp2y: float
    x: float
    y: float

    @property
    def cp1(self) -> tuple[float, float]:
        return (self.cp1x, self.cp1y)

    @property
    def cp2(self) -> tuple[float, float]:
        return (self.cp2x, self.cp2y)

    @property
    def end(self) -> tuple[float, float]:
        return (self.x, self.y)

    def map_points(self, fn: Callable[[float, float], tuple[float, float]]) -> BezierSegment:
        cp1x, cp1y = fn(self.cp1x, self.cp1y)
        cp2x, cp2y = fn(self.cp2x, self.cp2y)
        x, y = fn(self.x, self.y)
        return BezierSegment(cp1x, cp1y, cp2x, cp2y, x, y)


@dataclass(frozen=True)
class BezierFire:
    """Flame path: start point, ordered segments, implicit close back to start.

    ``base`` anchors foot alignment and the inner-core scale pivot.
    """

    frame: Rect
    start: Point
    segments: tuple[BezierSegment, ...]
    base: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so instances stay hashable.
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError("BezierFire needs at least one segment")

    def approximate_centroid(self, samples: int = 10) -> Point:
        """Mean of ``samples`` evenly spaced points on every segment.

        Used as a scale pivot so scaling grows from the visual middle.
        """
        sampled = []
        previous = self.start.as_tuple()
        for seg in self.segments:
            sampled.append(sample_bezier(previous, seg.cp1, seg.cp2, seg.end, samples))
            previous = seg.end

        pts = np.concatenate(sampled)
        return Point(float(np.mean(pts[:, 0])), float(np.mean(pts[:, 1])))

    def _map(self, fn: Callable[[float, float], tuple[float, float]]) -> BezierFire:
        x1, y1 = fn(self.frame.x1, self.frame.y1)
        x2, y2 = fn(self.frame.x2, self.frame.y2)
        return BezierFire(
            frame=Rect(x1, y1, x2, y2),
            start=Point(*fn(self.start.x, self.start.y)),
            segments=tuple(seg.map_points(fn) for seg in self.segments),
            base=Point(*fn(self.base.x, self.base.y)),
        )

    def scale(self, center_x: float, center_y: float, factor: float) -> BezierFire:
        """Scale every coordinate about (center_x, center_y)."""
        return self._map(
            lambda x, y: (
                center_x + (x - center_x) * factor,
                center_y + (y - center_y) * factor,
            )
        )

    def move(self, offset_x: float, offset_y: float) -> BezierFire:
        """Translate every coordinate, frame and base included."""
        return self._map(lambda x, y: (x + offset_x, y + offset_y))

    def align_base_x(self, base_x: float) -> BezierFire:
        return self.move(base_x - self.base.x, 0)
