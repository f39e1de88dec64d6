"""Hand-authored seed fires, tuned for a 512x512 canvas."""

from __future__ import annotations

from gasfire.render.bezier_fire import BezierFire, BezierSegment, Point, Rect

BEZIER_FIRE_SEEDS: tuple[BezierFire, ...] = (
    BezierFire(
        frame=Rect(x1=120, y1=70, x2=392, y2=512),
        start=Point(134, 391),
        segments=(
            BezierSegment(cp1x=173, cp1y=530, cp2x=344, cp2y=530, x=383, y=391),
            BezierSegment(cp1x=406, cp1y=260, cp2x=282, cp2y=221, x=258, y=70),
            BezierSegment(cp1x=234, cp1y=221, cp2x=110, cp2y=260, x=134, y=391),
        ),
        base=Point(258, 406),
    ),
)

# Canvas edge the seeds were drawn against.
SEED_CANVAS_SIZE = 512
