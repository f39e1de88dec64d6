"""Deterministic fire renderer."""

from gasfire.render.bezier_fire import BezierFire, BezierSegment, Point, Rect
from gasfire.render.composer import render_image
from gasfire.render.projection import ProjectiveTransform
from gasfire.render.surface import PillowSurface, RecordingSurface, Surface, SvgSurface
from gasfire.render.tier import check_tier_of, get_tiered_fire_color
from gasfire.render.xorshift import InvalidSeed, XorShift

__all__ = [
    "BezierFire",
    "BezierSegment",
    "Point",
    "Rect",
    "render_image",
    "ProjectiveTransform",
    "PillowSurface",
    "RecordingSurface",
    "Surface",
    "SvgSurface",
    "check_tier_of",
    "get_tiered_fire_color",
    "InvalidSeed",
    "XorShift",
]
