"""Leaf-node geometry helpers. No render imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def degree_to_rad(degree: float) -> float:
    return degree * math.pi / 180


def rad_to_degree(radian: float) -> float:
    return radian * 180 / math.pi


def slope_angle(dy: float, dx: float) -> float:
    """atan(dy / dx), with a vertical slope mapped to ±π/2."""
    if dx == 0:
        return math.copysign(math.pi / 2, dy)
    return math.atan(dy / dx)


def rotate(
    center_x: float,
    center_y: float,
    point: tuple[float, float],
    radian: float,
) -> tuple[float, float]:
    """Rotate a point about (center_x, center_y) by radian."""
    cos_theta = math.cos(radian)
    sin_theta = math.sin(radian)
    dx = point[0] - center_x
    dy = point[1] - center_y
    return (
        center_x + dx * cos_theta - dy * sin_theta,
        center_y + dx * sin_theta + dy * cos_theta,
    )


def bezier_point(
    t: float,
    start: tuple[float, float],
    cp1: tuple[float, float],
    cp2: tuple[float, float],
    end: tuple[float, float],
) -> tuple[float, float]:
    """Point on a cubic bezier at t (Bernstein basis)."""
    u = 1 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t

    x = start[0] * uuu + 3 * cp1[0] * uu * t + 3 * cp2[0] * u * tt + end[0] * ttt
    y = start[1] * uuu + 3 * cp1[1] * uu * t + 3 * cp2[1] * u * tt + end[1] * ttt
    return (x, y)


def sample_bezier(
    start: tuple[float, float],
    cp1: tuple[float, float],
    cp2: tuple[float, float],
    end: tuple[float, float],
    n: int = 10,
) -> NDArray[np.float64]:
    """Sample n points along a cubic bezier, endpoints included. Returns Nx2."""
    if n == 1:
        return np.array([start], dtype=np.float64)
    return np.array(
        [bezier_point(j / (n - 1), start, cp1, cp2, end) for j in range(n)],
        dtype=np.float64,
    )


def sample_arc(
    center_x: float,
    center_y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    n: int = 32,
) -> NDArray[np.float64]:
    """Sample n points along a circular arc from start_angle to end_angle."""
    angles = np.linspace(start_angle, end_angle, n)
    return np.column_stack(
        [center_x + radius * np.cos(angles), center_y + radius * np.sin(angles)]
    )
