"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    seed_shapes: int = 0


class VerifyResponse(BaseModel):
    mint_eligibility: bool
    # Decimal string; gas totals overflow JSON-safe integers.
    data: str
    # 0x + r + s, parity folded into the top bit of s.
    signature: str
