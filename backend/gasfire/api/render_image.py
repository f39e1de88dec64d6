"""GET /api/v1/gasfire/render-image — PNG (or SVG) fire for an address."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from gasfire.config import Settings
from gasfire.dependencies import get_settings
from gasfire.render.composer import render_image
from gasfire.render.surface import PillowSurface, SvgSurface
from gasfire.render.xorshift import InvalidSeed

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/gasfire")


def _parse_counter(data: str) -> int:
    try:
        counter = int(data)
    except ValueError:
        raise HTTPException(
            status_code=400, detail=f"data must be an integer: {data!r}"
        ) from None
    if counter < 0:
        raise HTTPException(status_code=400, detail="data must be non-negative")
    return counter


@router.get("/render-image")
def get_render_image(
    address: str = Query(..., description="Account identifier (hex, 0x prefix optional)"),
    data: str = Query(..., description="Cumulative gas used, decimal integer"),
    format: Literal["png", "svg"] = Query("png", description="Output format"),
    settings: Settings = Depends(get_settings),
) -> Response:
    counter = _parse_counter(data)
    size = settings.image_size

    surface: PillowSurface | SvgSurface
    surface = SvgSurface(size, size) if format == "svg" else PillowSurface(size, size)
    try:
        render_image(surface, size, size, address, counter)
    except InvalidSeed as e:
        logger.warning("Rejected address %r: %s", address, e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    if isinstance(surface, SvgSurface):
        return Response(content=surface.to_svg(), media_type="image/svg+xml")
    return Response(content=surface.to_png(), media_type="image/png")
