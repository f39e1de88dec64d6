"""Fire composition — seeds the generator, bends seed copies, paints the layers.

Draw order is back to front: white halo, black outline, outer, middle, then a
single inner core for the first fire only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gasfire.render.bezier_fire import BezierFire
from gasfire.render.placement import ProjectionGenerator
from gasfire.render.seeds import BEZIER_FIRE_SEEDS
from gasfire.render.surface import Surface
from gasfire.render.tier import TieredFireColor, check_tier_of, get_tiered_fire_color
from gasfire.render.xorshift import XorShift

logger = logging.getLogger(__name__)

# Half-open range for the fire count draw.
MIN_FIRES = 2
MAX_FIRES = 4

HALO_COLOR = "#ffffff"
OUTLINE_COLOR = "#000000"

# Layer scale factors. Halo, outline and outer pivot on the centroid; middle and
# inner pivot on the fire base.
HALO_SCALE = 1.0
OUTLINE_SCALE = 0.93
OUTER_SCALE = 0.84
MIDDLE_SCALE = 0.55
INNER_SCALE = 0.3


def draw_bezier_fire(surface: Surface, fire: BezierFire, fill_color: str) -> None:
    surface.begin_path()
    surface.move_to(fire.start.x, fire.start.y)
    for seg in fire.segments:
        surface.bezier_curve_to(seg.cp1x, seg.cp1y, seg.cp2x, seg.cp2y, seg.x, seg.y)
    surface.close_path()
    surface.fill(fill_color)


def _draw_centroid_layer(
    surface: Surface,
    fires: Sequence[BezierFire],
    base_x: float,
    factor: float,
    color: str,
) -> None:
    for fire in fires:
        fire = fire.align_base_x(base_x)
        c = fire.approximate_centroid()
        draw_bezier_fire(surface, fire.scale(c.x, c.y, factor), color)


def draw_bezier_frame(
    surface: Surface,
    fire_color: TieredFireColor,
    fires: Sequence[BezierFire],
) -> None:
    """Paint all layers for the given fires; fires[0] anchors the baseline."""
    base_fire = fires[0]
    base_x = base_fire.base.x

    _draw_centroid_layer(surface, fires, base_x, HALO_SCALE, HALO_COLOR)
    _draw_centroid_layer(surface, fires, base_x, OUTLINE_SCALE, OUTLINE_COLOR)
    _draw_centroid_layer(surface, fires, base_x, OUTER_SCALE, fire_color.outer)

    for fire in fires:
        fire = fire.align_base_x(base_x)
        draw_bezier_fire(
            surface, fire.scale(fire.base.x, fire.base.y, MIDDLE_SCALE), fire_color.middle
        )

    draw_bezier_fire(
        surface,
        base_fire.scale(base_fire.base.x, base_fire.base.y, INNER_SCALE),
        fire_color.inner,
    )


def build_fires(
    xor_shift: XorShift,
    canvas_width: float,
    seeds: Sequence[BezierFire] = BEZIER_FIRE_SEEDS,
    debug_surface: Surface | None = None,
) -> list[BezierFire]:
    """Choose 2-3 fires; every fire after the first is bent by a bar placement.

    With ``debug_surface`` the bar ranges and projection quads are stroked onto it.
    """
    fires: list[BezierFire] = []
    fire_num = int(xor_shift.next_int_between(MIN_FIRES, MAX_FIRES))
    generator: ProjectionGenerator | None = None

    for i in range(fire_num):
        # Upper bound excludes the last seed; existing renders depend on this draw.
        seed_idx = int(xor_shift.next_int_between(0, len(seeds) - 1))
        fire = seeds[seed_idx]
        if i == 0:
            generator = ProjectionGenerator(xor_shift, fire, canvas_width)
        else:
            projection = generator.next_transform(debug_surface)
            if debug_surface is not None:
                projection.visualize(debug_surface)
            fire = projection.transform_bezier(fire)
        fires.append(fire)

    return fires


def render_image(
    surface: Surface,
    width: float,
    height: float,
    address: str,
    gas_used: int,
    seeds: Sequence[BezierFire] = BEZIER_FIRE_SEEDS,
) -> None:
    """Paint the fire for ``address`` onto ``surface``.

    Raises InvalidSeed if the address has fewer than 32 trailing hex chars.
    """
    xor_shift = XorShift.from_identifier(address)
    fires = build_fires(xor_shift, width, seeds)

    tier = check_tier_of(gas_used)
    logger.debug(
        "Rendering %d fires on %dx%d canvas (tier %d)", len(fires), width, height, tier
    )
    draw_bezier_frame(surface, get_tiered_fire_color(tier), fires)
