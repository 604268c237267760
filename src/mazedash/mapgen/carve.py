# src/mazedash/mapgen/carve.py
# Randomized depth-first carve over the cell graph.
# Explicit stack, so depth is bounded by size² rather than the interpreter's recursion limit.

from typing import List
from ..grid import Grid, XY
from ..rng import PMRandom


def carve_dfs(grid: Grid, start: XY, rng: PMRandom) -> int:
    """
    Carve a spanning tree rooted at `start`.

    Candidates are collected in the fixed N, E, S, W order and one is picked
    with a single draw (index = floor(rand * count)). Dead ends pop the stack.
    Returns the number of passages opened (size*size - 1 for a full tree).
    """
    sx, sy = start
    grid.cell(sx, sy).visited = True
    stack: List[XY] = [start]
    carved = 0

    while stack:
        x, y = stack[-1]
        candidates = grid.unvisited_neighbors(x, y)
        if not candidates:
            stack.pop()
            continue
        d, nx, ny = candidates[rng.below(len(candidates))]
        grid.remove_wall(x, y, d)
        grid.cell(nx, ny).visited = True
        stack.append((nx, ny))
        carved += 1

    return carved
