#!/usr/bin/env python3
# Minimal interactive top-down viewer for a built maze (no gameplay).
# - Walkable overlay toggle: W
# - Sample a random walkable position (exclude radius 3): R
# - Clear samples: C
# - Anchors (entrance/exit) always marked
# - 60 Hz fixed loop

import argparse, logging
import pygame
from mazedash.config import ConfigError, load_config
from mazedash.mapgen.generator import generate_maze
from mazedash.query import MazeQuery
from mazedash.render.tileset import Tileset, WALKABLE_TINT, SAMPLE_MARK
from mazedash.world.build import world_fills

def top_blocks(maze):
    top = {}
    for fill in world_fills(maze):
        for x, y, z in fill.blocks():
            prev = top.get((x, z))
            if prev is None or y >= prev[0]:
                top[(x, z)] = (y, fill.block_id)
    return top

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Maze seed (default: from config)")
    ap.add_argument("--size", type=int, default=None, help="Cells per side")
    ap.add_argument("--tile", type=int, default=3, help="Pixels per block")
    ap.add_argument("--walkable", action="store_true", help="Start with the walkable overlay on")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO)

    try:
        cfg = load_config()
        if args.seed is not None:
            cfg = cfg.replace(seed=args.seed)
        if args.size is not None:
            cfg = cfg.replace(size=args.size)
    except ConfigError as e:
        raise SystemExit(f"config: {e}")

    maze = generate_maze(cfg)
    query = MazeQuery(maze)
    top = top_blocks(maze)
    x0 = min(x for x, _ in top)
    z0 = min(z for _, z in top)
    W = (max(x for x, _ in top) - x0 + 1) * args.tile
    H = (max(z for _, z in top) - z0 + 1) * args.tile

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((W, H))
    tiles = Tileset(args.tile)
    cell_px = cfg.path_width * args.tile
    tint = tiles.overlay(WALKABLE_TINT, cell_px)

    def to_screen(wx, wz):
        return (int((wx - x0) * args.tile), int((wz - z0) * args.tile))

    samples = []
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_w:
                    args.walkable = not args.walkable
                elif ev.key == pygame.K_r:
                    p = query.random_walkable_position(3)
                    if p is None:
                        print("[viewer] no walkable cell to sample")
                    else:
                        samples.append(p)
                elif ev.key == pygame.K_c:
                    samples.clear()

        screen.fill((0, 0, 0))
        for (x, z), (_, block_id) in top.items():
            screen.blit(tiles.get(block_id), to_screen(x, z))

        if args.walkable:
            for gx, gz in query.all_walkable_cells():
                ox, oz = query.coords.cell_origin(gx, gz)
                screen.blit(tint, to_screen(ox, oz))

        for anchor, color in ((query.entrance_anchor(), (80, 200, 255)), (query.exit_anchor(), (255, 220, 0))):
            pygame.draw.circle(screen, color, to_screen(anchor.x, anchor.z), max(3, args.tile * 2))
        for p in samples:
            pygame.draw.circle(screen, SAMPLE_MARK, to_screen(p.x, p.z), max(2, args.tile))

        pygame.display.set_caption(
            f"Maze Viewer — seed {cfg.seed}  size {cfg.size}  samples:{len(samples)}  WALK:{args.walkable}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
