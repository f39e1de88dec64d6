"""Random bar placement → projective transform for derived fire instances.

The seed frame's bottom edge stays pinned while its top edge is swung onto a
randomly placed and rotated bar, which bends the flame sideways.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from gasfire.render.bezier_fire import BezierFire, Point, Rect
from gasfire.render.projection import ProjectiveTransform
from gasfire.render.surface import Surface, draw_arc, draw_rect
from gasfire.render.xorshift import XorShift
from gasfire.utils.geometry import degree_to_rad, rad_to_degree, rotate, slope_angle

logger = logging.getLogger(__name__)

# Shortest bar, in pixels. Shorter bars squash the flame tip to a sliver.
MIN_BAR_LENGTH = 51

# Trimmed from both ends of the angular range so bars never lie flat.
ANGLE_MARGIN_DEG = 30


@dataclass(frozen=True)
class BarPlacement:
    """One chosen bar: center, half length, rotation and rotated endpoints."""

    center: Point
    radius: float
    angle: float
    left: Point
    right: Point


class ProjectionGenerator:
    """Draws bar placements for a seed fire from a shared generator."""

    def __init__(self, xor_shift: XorShift, seed: BezierFire, canvas_width: float) -> None:
        self.xor_shift = xor_shift
        self.seed = seed
        self.canvas_width = canvas_width

    def bar_range_of_motion(self, radius: float) -> Rect:
        frame = self.seed.frame
        return Rect(
            x1=radius,
            y1=frame.y1,
            x2=self.canvas_width - radius,
            y2=frame.y1 + frame.height / 2,
        )

    def _determine_center_point(self, range_of_motion: Rect) -> Point:
        x = self.xor_shift.next_int_between(range_of_motion.x1, range_of_motion.x2)
        y = self.xor_shift.next_int_between(range_of_motion.y1, range_of_motion.y2)
        return Point(x, y)

    def calc_bar_angle_range(self, midpoint_x: float, midpoint_y: float) -> tuple[float, float]:
        """Start/end angles (radians) of the bar, shrunk by the safety margin.

        The range depends on whether the bar center sits left of, over, or
        right of the seed frame.
        """
        frame = self.seed.frame
        dy = midpoint_y - frame.y2
        to_left = slope_angle(dy, midpoint_x - frame.x1)
        to_right = slope_angle(dy, midpoint_x - frame.x2)

        if midpoint_x < frame.x1:
            start_angle = -(math.pi - to_left)
            end_angle = to_right
        elif frame.x1 <= midpoint_x <= frame.x2:
            start_angle = to_left
            end_angle = to_right
        else:
            start_angle = to_left
            end_angle = math.pi + to_right

        margin = degree_to_rad(ANGLE_MARGIN_DEG)
        return (start_angle + margin, end_angle - margin)

    def _determine_bar_angle(self, start_angle: float, end_angle: float) -> float:
        flip = self.xor_shift.next_int_between(0, 2) == 1
        angle_width = rad_to_degree(end_angle - start_angle)
        angle = start_angle + degree_to_rad(self.xor_shift.next_int_between(0, angle_width))
        if flip:
            return angle + math.pi
        return angle

    def next_placement(self, debug_surface: Surface | None = None) -> BarPlacement:
        frame = self.seed.frame
        bar_length = math.floor(
            self.xor_shift.next_int_between(MIN_BAR_LENGTH, frame.width) / 2
        ) * 2
        radius = bar_length / 2

        range_of_motion = self.bar_range_of_motion(radius)
        center = self._determine_center_point(range_of_motion)
        start_angle, end_angle = self.calc_bar_angle_range(center.x, center.y)
        angle = self._determine_bar_angle(start_angle, end_angle)

        left = rotate(center.x, center.y, (center.x - radius, center.y), angle)
        right = rotate(center.x, center.y, (center.x + radius, center.y), angle)

        if debug_surface is not None:
            logger.debug(
                "Bar angles: start=%.2f end=%.2f chosen=%.2f (degrees)",
                rad_to_degree(start_angle),
                rad_to_degree(end_angle),
                rad_to_degree(angle),
            )
            draw_rect(debug_surface, range_of_motion.corners())
            draw_arc(debug_surface, center.x, center.y, radius, start_angle, end_angle)
            draw_arc(
                debug_surface,
                center.x,
                center.y,
                radius,
                start_angle + math.pi,
                end_angle + math.pi,
            )

        return BarPlacement(
            center=center,
            radius=radius,
            angle=angle,
            left=Point(*left),
            right=Point(*right),
        )

    def next_transform(self, debug_surface: Surface | None = None) -> ProjectiveTransform:
        """Homography from the seed frame onto (bar left, bar right, frame bottom)."""
        placement = self.next_placement(debug_surface)
        frame = self.seed.frame
        return ProjectiveTransform.create(
            src=frame.corners(),
            dest=[
                placement.left.as_tuple(),
                placement.right.as_tuple(),
                (frame.x2, frame.y2),
                (frame.x1, frame.y2),
            ],
        )
