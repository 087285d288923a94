#!/usr/bin/env python3
# Minimal interactive viewer for generated levels (no gameplay).
# - Left/Right: previous/next level
# - Up/Down: next/previous seed
# - K: cycle generator kind override (auto -> overworld -> rooms -> cave -> maze)
# - 60 Hz fixed loop

import argparse, logging
import pygame
from delvegen.mapgen.generator import GeneratorKind, make_level
from delvegen.render.tileset import Tileset
from delvegen.rng import RandomGenerator

KINDS = [None] + list(GeneratorKind)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--level", type=int, default=1)
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)

    seed, level, kind_i = args.seed, args.level, 0

    def load_grid():
        return make_level(RandomGenerator(seed), level, kind=KINDS[kind_i])

    grid = load_grid()
    screen = pygame.display.set_mode((grid.dimensions.x * args.tile, grid.dimensions.y * args.tile))
    running = True
    while running:
        reload = False
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    level += 1; reload = True
                elif ev.key == pygame.K_LEFT:
                    level = max(0, level - 1); reload = True
                elif ev.key == pygame.K_UP:
                    seed += 1; reload = True
                elif ev.key == pygame.K_DOWN:
                    seed = max(0, seed - 1); reload = True
                elif ev.key == pygame.K_k:
                    kind_i = (kind_i + 1) % len(KINDS); reload = True
        if reload:
            grid = load_grid()
            size = (grid.dimensions.x * args.tile, grid.dimensions.y * args.tile)
            if screen.get_size() != size:
                screen = pygame.display.set_mode(size)

        screen.fill((0, 0, 0))
        for y, row in enumerate(grid.cells):
            for x, cell in enumerate(row):
                screen.blit(tiles.get(cell.env), (x * args.tile, y * args.tile))

        kind = KINDS[kind_i].value if KINDS[kind_i] else "auto"
        pygame.display.set_caption(f"delvegen viewer  seed {seed}  level {level}  [{kind}]  dark:{grid.is_dark}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
