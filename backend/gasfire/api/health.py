"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from gasfire.models.responses import HealthResponse
from gasfire.render.seeds import BEZIER_FIRE_SEEDS

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        seed_shapes=len(BEZIER_FIRE_SEEDS),
    )
