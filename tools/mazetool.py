#!/usr/bin/env python3
import argparse, csv, logging
from collections import Counter
from mazedash.blocks import BLOCK_NAMES
from mazedash.config import load_config
from mazedash.mapgen.generator import generate_maze
from mazedash.render.text import to_ascii
from mazedash.world.build import world_fills

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def build(args):
    cfg = load_config()
    overrides = {k: v for k, v in (("seed", args.seed), ("size", args.size)) if v is not None}
    if overrides:
        cfg = cfg.replace(**overrides)
    return generate_maze(cfg)

def cmd_emit(args):
    maze = build(args)
    if args.what == 'walls':
        mat = maze.grid.wall_bitmap()
    else:
        mat = [[int(v) for v in row] for row in maze.grid.visited_mask()]
    write_tsv(mat, args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_ascii(args):
    print(to_ascii(build(args)))

def cmd_fills(args):
    maze = build(args)
    kinds, blocks = Counter(), Counter()
    for fill in world_fills(maze):
        kinds[fill.kind] += 1
        blocks[fill.block_id] += fill.volume
    for kind, n in sorted(kinds.items()):
        print(f"{kind:9s} {n:8d} fills")
    for block_id, n in sorted(blocks.items()):
        print(f"block {block_id:3d} {n:8d} blocks  {BLOCK_NAMES.get(block_id, '?')}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--size', type=int, default=None)
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--what', choices=['layout', 'walls'], default='layout')
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('ascii')
    p2.set_defaults(func=cmd_ascii)
    p3 = sub.add_parser('fills')
    p3.set_defaults(func=cmd_fills)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)

if __name__ == '__main__':
    main()
