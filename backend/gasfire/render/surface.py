"""2D drawing surfaces the compositor paints onto.

``Surface`` mirrors the canvas-style path API: build a path with move/line/curve
calls, then fill or stroke it. ``PillowSurface`` rasterizes, ``SvgSurface``
emits vector markup, ``RecordingSurface`` keeps a call log.
"""

from __future__ import annotations

import io
import math
from typing import Any, Protocol

from PIL import Image, ImageDraw

from gasfire.utils.geometry import sample_arc, sample_bezier

# Flattening resolution for curves on the raster surface.
_CURVE_STEPS = 32
_ARC_STEPS = 48

_TWO_PI = 2 * math.pi


class Surface(Protocol):
    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None: ...

    def stroke(self, color: str = "#000000") -> None: ...

    def arc(
        self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float
    ) -> None: ...


class RecordingSurface:
    """Appends every call as (method, args) to ``calls``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        self._record("bezier_curve_to", cp1x, cp1y, cp2x, cp2y, x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def stroke(self, color: str = "#000000") -> None:
        self._record("stroke", color)

    def arc(
        self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle)

    def fill_colors(self) -> list[str]:
        return [args[0] for name, args in self.calls if name == "fill"]


class PillowSurface:
    """Transparent RGBA raster. Curves are flattened to polylines before drawing."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)
        # Each subpath: [points, closed]
        self._subpaths: list[tuple[list[tuple[float, float]], bool]] = []

    def _current(self) -> list[tuple[float, float]] | None:
        if not self._subpaths or self._subpaths[-1][1]:
            return None
        return self._subpaths[-1][0]

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(([(x, y)], False))

    def line_to(self, x: float, y: float) -> None:
        current = self._current()
        if current is None:
            self.move_to(x, y)
            return
        current.append((x, y))

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        current = self._current()
        if current is None:
            self.move_to(cp1x, cp1y)
            current = self._current()
        pts = sample_bezier(current[-1], (cp1x, cp1y), (cp2x, cp2y), (x, y), _CURVE_STEPS)
        current.extend((float(px), float(py)) for px, py in pts[1:])

    def close_path(self) -> None:
        if self._subpaths and not self._subpaths[-1][1]:
            points = self._subpaths[-1][0]
            self._subpaths[-1] = (points, True)
            # Following segments start from the closed subpath's first point.
            self._subpaths.append(([points[0]], False))

    def arc(
        self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        pts = sample_arc(cx, cy, radius, start_angle, end_angle, _ARC_STEPS)
        points = [(float(px), float(py)) for px, py in pts]
        current = self._current()
        if current is None:
            self._subpaths.append((points, False))
        else:
            current.extend(points)

    def fill(self, color: str) -> None:
        for points, _closed in self._subpaths:
            if len(points) >= 3:
                self._draw.polygon(points, fill=color)

    def stroke(self, color: str = "#000000") -> None:
        for points, closed in self._subpaths:
            if len(points) < 2:
                continue
            line = points + [points[0]] if closed else points
            self._draw.line(line, fill=color, width=1)

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()


def _fmt(value: float) -> str:
    return f"{value:.3f}"


class SvgSurface:
    """Records filled and stroked paths as SVG <path> elements."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.elements: list[str] = []
        self._d: list[str] = []
        self._has_point = False

    def begin_path(self) -> None:
        self._d = []
        self._has_point = False

    def move_to(self, x: float, y: float) -> None:
        self._d.append(f"M {_fmt(x)},{_fmt(y)}")
        self._has_point = True

    def line_to(self, x: float, y: float) -> None:
        if not self._has_point:
            self.move_to(x, y)
            return
        self._d.append(f"L {_fmt(x)},{_fmt(y)}")

    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        if not self._has_point:
            self.move_to(cp1x, cp1y)
        self._d.append(
            f"C {_fmt(cp1x)},{_fmt(cp1y)} {_fmt(cp2x)},{_fmt(cp2y)} {_fmt(x)},{_fmt(y)}"
        )

    def close_path(self) -> None:
        if self._d:
            self._d.append("Z")

    def arc(
        self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        sweep = end_angle - start_angle
        sx = cx + radius * math.cos(start_angle)
        sy = cy + radius * math.sin(start_angle)
        if self._has_point:
            self.line_to(sx, sy)
        else:
            self.move_to(sx, sy)

        if sweep >= _TWO_PI:
            # A full circle needs two half arcs in SVG.
            mx = cx + radius * math.cos(start_angle + math.pi)
            my = cy + radius * math.sin(start_angle + math.pi)
            r = _fmt(radius)
            self._d.append(f"A {r},{r} 0 0 1 {_fmt(mx)},{_fmt(my)}")
            self._d.append(f"A {r},{r} 0 0 1 {_fmt(sx)},{_fmt(sy)}")
            return

        ex = cx + radius * math.cos(end_angle)
        ey = cy + radius * math.sin(end_angle)
        large_arc = 1 if (sweep % _TWO_PI) > math.pi else 0
        r = _fmt(radius)
        self._d.append(f"A {r},{r} 0 {large_arc} 1 {_fmt(ex)},{_fmt(ey)}")

    def fill(self, color: str) -> None:
        if self._d:
            self.elements.append(f'<path d="{" ".join(self._d)}" fill="{color}"/>')

    def stroke(self, color: str = "#000000") -> None:
        if self._d:
            self.elements.append(
                f'<path d="{" ".join(self._d)}" fill="none" stroke="{color}" stroke-width="1"/>'
            )

    def to_svg(self) -> str:
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg viewBox="0 0 {self.width} {self.height}" width="{self.width}"'
            f' height="{self.height}" xmlns="http://www.w3.org/2000/svg">',
        ]
        lines.extend(f"  {elem}" for elem in self.elements)
        lines.append("</svg>")
        return "\n".join(lines)


def draw_rect(surface: Surface, points: list[tuple[float, float]]) -> None:
    """Stroke a closed quadrilateral."""
    surface.begin_path()
    surface.move_to(*points[0])
    for x, y in points[1:4]:
        surface.line_to(x, y)
    surface.close_path()
    surface.stroke()


def draw_arc(
    surface: Surface,
    center_x: float,
    center_y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
) -> None:
    surface.begin_path()
    surface.arc(center_x, center_y, radius, start_angle, end_angle)
    surface.stroke()
