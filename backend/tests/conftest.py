"""Shared test fixtures."""

from __future__ import annotations

import pytest

from gasfire.render.bezier_fire import BezierFire, BezierSegment, Point, Rect
from gasfire.render.seeds import BEZIER_FIRE_SEEDS

# Address with only 0xaa in its low word: state (0, 0, 0, 170).
LOW_WORD_ADDRESS = "0x000000000000000000000000000000000000aa"

CHECKSUM_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
OTHER_ADDRESS = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"

# Classic xorshift128 reference seed and its first outputs as signed 32-bit ints.
MARSAGLIA_SEED = (123456789, 362436069, 521288629, 88675123)
MARSAGLIA_SEQUENCE = [
    -593279510,
    458299110,
    -1794094678,
    -661847888,
    516391518,
    -1917697722,
    -1695017917,
    717229868,
]

LOW_WORD_SEQUENCE = [170, 170, 170, 349520, 170, 349520, 170, 713390639, 713042565, 349520]

# Bar placement drawn for the second fire of LOW_WORD_ADDRESS.
LOW_WORD_BAR_LEFT = (187.1452322334, 247.9745038387)
LOW_WORD_BAR_RIGHT = (372.8547677666, 130.0254961613)

SEED_FIRE = BEZIER_FIRE_SEEDS[0]

SQUARE_FIRE = BezierFire(
    frame=Rect(10, 10, 110, 110),
    start=Point(10, 100),
    segments=(
        BezierSegment(30, 120, 90, 120, 110, 100),
        BezierSegment(120, 60, 70, 30, 60, 10),
        BezierSegment(50, 30, 0, 60, 10, 100),
    ),
    base=Point(60, 95),
)


@pytest.fixture
def seed_fire() -> BezierFire:
    return SEED_FIRE


@pytest.fixture
def square_fire() -> BezierFire:
    return SQUARE_FIRE

# Throwaway secp256k1 key for attestation tests.
SIGNER_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
