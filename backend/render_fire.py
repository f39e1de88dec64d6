"""Render a fire for an address to a PNG or SVG file.

Usage:
  python render_fire.py 0xabc...123 1500000                 # writes fire.png
  python render_fire.py 0xabc...123 1500000 -o fire.svg     # SVG output
  python render_fire.py 0xabc...123 0 --debug               # overlay bar ranges
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gasfire.render.composer import build_fires, render_image
from gasfire.render.surface import PillowSurface, SvgSurface
from gasfire.render.xorshift import InvalidSeed, XorShift


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a deterministic fire image")
    parser.add_argument("address", help="Hex identifier (at least 32 trailing hex chars)")
    parser.add_argument("gas_used", type=int, help="Cumulative gas used")
    parser.add_argument("-o", "--output", default="fire.png", help="Output path (.png or .svg)")
    parser.add_argument("-s", "--size", type=int, default=512, help="Canvas edge in pixels")
    parser.add_argument("--debug", action="store_true", help="Stroke placement diagnostics")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    out = Path(args.output)
    surface: PillowSurface | SvgSurface
    if out.suffix == ".svg":
        surface = SvgSurface(args.size, args.size)
    else:
        surface = PillowSurface(args.size, args.size)

    try:
        render_image(surface, args.size, args.size, args.address, args.gas_used)
    except InvalidSeed as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.debug:
        # Same address, same draws: replays placement on top of the finished fire.
        build_fires(XorShift.from_identifier(args.address), args.size, debug_surface=surface)

    if isinstance(surface, SvgSurface):
        out.write_text(surface.to_svg(), encoding="utf-8")
    else:
        out.write_bytes(surface.to_png())
    print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
