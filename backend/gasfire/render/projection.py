"""Projective transform (homography) solved from 4 point correspondences.

For each axis the 8 correspondence equations are split into a 4x4 system in
(a, b, g, h) with the translation term as a free parameter; both systems are
inverted and the two translation terms are recovered from the requirement that
g and h agree between them.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from gasfire.render.bezier_fire import BezierFire, Point
from gasfire.render.surface import Surface, draw_rect

# Origin coordinates make the systems singular; they are nudged to this value.
_ZERO_SUBSTITUTE = 0.5

# Stand-in for a zero determinant when recovering the translation terms.
_DET_EPSILON = 0.0001

Quad = list[tuple[float, float]]


@dataclass(frozen=True)
class TransformTemplate:
    src: tuple[tuple[float, float], ...]
    dest: tuple[tuple[float, float], ...]


def _nudge(value: float) -> float:
    return _ZERO_SUBSTITUTE if value == 0 else value


def _axis_system(src: NDArray[np.float64], target: NDArray[np.float64]) -> NDArray[np.float64]:
    """Row i: [X_i, Y_i, -X_i*t_i, -Y_i*t_i] for target coordinate t."""
    xs = src[:, 0]
    ys = src[:, 1]
    return np.column_stack([xs, ys, -xs * target, -ys * target])


def calc_projection_matrix(src: Quad, dest: Quad) -> list[float]:
    """Solve the 9 row-major coefficients (last fixed to 1) mapping src onto dest."""
    s = np.array([[_nudge(x), _nudge(y)] for x, y in src], dtype=np.float64)
    d = np.array([[_nudge(x), _nudge(y)] for x, y in dest], dtype=np.float64)
    dx = d[:, 0]
    dy = d[:, 1]

    tx = np.linalg.inv(_axis_system(s, dx))
    kx = tx @ dx
    kc = tx.sum(axis=1)

    ty = np.linalg.inv(_axis_system(s, dy))
    ky = ty @ dy
    kf = ty.sum(axis=1)

    det = kc[2] * (-kf[3]) - (-kf[2]) * kc[3]
    if det == 0:
        det = _DET_EPSILON
    inv_det = 1 / det

    diff3 = kx[2] - ky[2]
    diff4 = kx[3] - ky[3]
    c = (-kf[3] * inv_det) * diff3 + (kf[2] * inv_det) * diff4
    f = (-kc[3] * inv_det) * diff3 + (kc[2] * inv_det) * diff4

    return [
        float(kx[0] - c * kc[0]),
        float(kx[1] - c * kc[1]),
        float(c),
        float(ky[0] - f * kf[0]),
        float(ky[1] - f * kf[1]),
        float(f),
        float(kx[2] - c * kc[2]),
        float(kx[3] - c * kc[3]),
        1.0,
    ]


class ProjectiveTransform:
    """Immutable homography plus the template it was solved from."""

    def __init__(self, template: TransformTemplate, matrix: list[float]) -> None:
        self._template = template
        self._mat = tuple(matrix)

    @property
    def template(self) -> TransformTemplate:
        return self._template

    @property
    def matrix(self) -> tuple[float, ...]:
        return self._mat

    def transform(self, x: float, y: float) -> tuple[float, float]:
        m = self._mat
        z = x * m[6] + y * m[7] + m[8]
        return (
            (x * m[0] + y * m[1] + m[2]) / z,
            (x * m[3] + y * m[4] + m[5]) / z,
        )

    def transform_bezier(self, fire: BezierFire) -> BezierFire:
        """Map start, base and every control/end point.

        The frame is copied as-is and is stale afterwards.
        """
        return BezierFire(
            frame=fire.frame,
            start=Point(*self.transform(fire.start.x, fire.start.y)),
            segments=tuple(seg.map_points(self.transform) for seg in fire.segments),
            base=Point(*self.transform(fire.base.x, fire.base.y)),
        )

    def visualize(self, surface: Surface) -> None:
        """Stroke the source quad and its image under this transform."""
        src = list(self._template.src)
        draw_rect(surface, src)
        draw_rect(surface, [self.transform(x, y) for x, y in src])

    @classmethod
    def create(cls, src: Quad, dest: Quad) -> ProjectiveTransform:
        template = TransformTemplate(
            src=tuple((float(x), float(y)) for x, y in src),
            dest=tuple((float(x), float(y)) for x, y in dest),
        )
        return cls(template, calc_projection_matrix(src, dest))
