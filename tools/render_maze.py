#!/usr/bin/env python3
# Render a built maze top-down to PNG using Pillow.
# One pixel square per world block column; the topmost block in each column wins.

import argparse, os, logging
from PIL import Image, ImageDraw
from mazedash.blocks import block_color
from mazedash.config import ConfigError, load_config
from mazedash.mapgen.generator import generate_maze
from mazedash.query import MazeQuery
from mazedash.world.build import world_fills

def top_view(maze):
    """(x, z) -> (y, block_id) of the highest block placed in that column."""
    top = {}
    for fill in world_fills(maze):
        for x, y, z in fill.blocks():
            prev = top.get((x, z))
            if prev is None or y >= prev[0]:
                top[(x, z)] = (y, fill.block_id)
    return top

def render_maze(maze, out_png, scale=3, samples=0):
    top = top_view(maze)
    xs = [x for x, _ in top]
    zs = [z for _, z in top]
    x0, z0 = min(xs), min(zs)
    w, h = (max(xs) - x0 + 1) * scale, (max(zs) - z0 + 1) * scale
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)
    for (x, z), (_, block_id) in top.items():
        px, pz = (x - x0) * scale, (z - z0) * scale
        draw.rectangle((px, pz, px + scale - 1, pz + scale - 1), fill=block_color(block_id))
    if samples:
        q = MazeQuery(maze)
        for _ in range(samples):
            p = q.random_walkable_position(3)
            if p is None:
                break
            cx, cz = (p.x - x0) * scale, (p.z - z0) * scale
            draw.ellipse((cx - scale, cz - scale, cx + scale, cz + scale), fill=(230, 40, 40, 255))
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Maze seed (default: from config)")
    ap.add_argument("--size", type=int, default=None, help="Cells per side (default: from config)")
    ap.add_argument("--out", type=str, default="out/png/maze.png", help="Where to write the PNG")
    ap.add_argument("--scale", type=int, default=3, help="Pixels per block")
    ap.add_argument("--samples", type=int, default=0, help="Mark N random walkable positions")
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
    render_maze(generate_maze(cfg), args.out, scale=args.scale, samples=args.samples)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
