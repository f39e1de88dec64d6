"""Deterministic xorshift128 generator seeded from a hex account identifier.

The output sequence is part of the rendering contract: the same identifier must
always produce the same fire, so every operation below is 32-bit exact.
"""

from __future__ import annotations

import re

_MASK32 = 0xFFFFFFFF

# Hex characters consumed from the identifier: 4 words x 8 nibbles.
_SEED_HEX_CHARS = 32
_WORD_HEX_CHARS = 8

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class InvalidSeed(ValueError):
    """Identifier does not carry 32 trailing hex characters."""


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def strip_hex_prefix(identifier: str) -> str:
    if identifier[:2] in ("0x", "0X"):
        return identifier[2:]
    return identifier


class XorShift:
    """4-word xorshift register. State is owned by one render; never share it."""

    def __init__(self, x: int, y: int, z: int, w: int) -> None:
        self.x = x & _MASK32
        self.y = y & _MASK32
        self.z = z & _MASK32
        self.w = w & _MASK32

    @property
    def state(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.w)

    def next_int(self) -> int:
        """Advance the register and return the new w word as a signed 32-bit int."""
        t = (self.x ^ (self.x << 11)) & _MASK32
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = (self.w ^ (self.w >> 19)) ^ (t ^ (t >> 8))
        return _to_int32(self.w)

    def next_int_between(self, lo: float, hi: float) -> float:
        """lo + |next_int()| mod (hi - lo); 0 for an empty range.

        Modulo-biased on purpose: changing the reduction would change every image.
        """
        if hi - lo <= 0:
            return 0
        return lo + abs(self.next_int()) % (hi - lo)

    @classmethod
    def from_identifier(cls, identifier: str) -> XorShift:
        """Seed from the last 32 hex chars, most significant word first.

        Raises InvalidSeed for short or non-hex identifiers.
        """
        digits = strip_hex_prefix(identifier)
        if len(digits) < _SEED_HEX_CHARS:
            raise InvalidSeed(
                f"identifier needs at least {_SEED_HEX_CHARS} hex characters, got {len(digits)}"
            )
        tail = digits[-_SEED_HEX_CHARS:]
        if not _HEX_RE.fullmatch(tail):
            raise InvalidSeed(f"identifier tail is not hexadecimal: {tail!r}")

        words = [
            int(tail[i : i + _WORD_HEX_CHARS], 16)
            for i in range(0, _SEED_HEX_CHARS, _WORD_HEX_CHARS)
        ]
        return cls(*words)
