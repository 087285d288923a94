#!/usr/bin/env python3
# Render generated levels to PNGs using Pillow, one flat-coloured square per cell.

import argparse, logging, os
from PIL import Image, ImageDraw

from delvegen.mapgen.generator import generate_grid
from delvegen.render.tileset import glyph_color
from delvegen.tiles import Glyph


def render_matrix(matrix, out_png, tile_size=8):
    h, w = len(matrix), len(matrix[0])
    canvas = Image.new("RGBA", (w * tile_size, h * tile_size), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(matrix):
        for x, v in enumerate(row):
            x0, y0 = x * tile_size, y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=glyph_color(Glyph(v)))
    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    canvas.save(out_png)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--levels", type=int, default=4, help="Render levels 0..N-1")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    for lvl in range(args.levels):
        grid = generate_grid(args.seed, lvl)
        png = os.path.join(args.outdir, str(args.seed), f"{lvl:02d}.png")
        render_matrix(grid.as_matrix(), png, tile_size=args.tile)
    print(f"Wrote PNGs to {os.path.join(args.outdir, str(args.seed))}")

if __name__ == "__main__":
    main()
