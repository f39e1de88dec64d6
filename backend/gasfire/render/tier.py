"""Usage counter → tier (1-8) → three-color flame palette."""

from __future__ import annotations

from dataclasses import dataclass

# Ascending; tier = 1 + number of boundaries the counter has reached.
TIER_BOUNDARIES: tuple[int, ...] = (
    50_000,
    100_000,
    500_000,
    1_000_000,
    5_000_000,
    10_000_000,
    50_000_000,
)

MIN_TIER = 1
MAX_TIER = len(TIER_BOUNDARIES) + 1


@dataclass(frozen=True)
class TieredFireColor:
    outer: str
    middle: str
    inner: str


_TIER_COLORS: tuple[TieredFireColor, ...] = (
    TieredFireColor(outer="#414141", middle="#797979", inner="#ffffff"),
    TieredFireColor(outer="#f86124", middle="#f6a223", inner="#f6e989"),
    TieredFireColor(outer="#408600", middle="#46ff1d", inner="#afff9f"),
    TieredFireColor(outer="#124d44", middle="#17a892", inner="#05ffda"),
    TieredFireColor(outer="#004d8a", middle="#0c93ff", inner="#8ee1ff"),
    TieredFireColor(outer="#3d00b0", middle="#6311ff", inner="#b28cff"),
    TieredFireColor(outer="#ad0091", middle="#ff35db", inner="#ff99ec"),
    TieredFireColor(outer="#8c0000", middle="#e80d0d", inner="#ff9898"),
)


def check_tier_of(gas_used: int) -> int:
    tier = MIN_TIER
    for boundary in TIER_BOUNDARIES:
        if gas_used < boundary:
            break
        tier += 1
    return tier


def get_tiered_fire_color(tier: int) -> TieredFireColor:
    assert MIN_TIER <= tier <= MAX_TIER, f"tier out of range: {tier}"
    return _TIER_COLORS[tier - 1]
