# src/mazedash/mapgen/repair.py
# Exit reachability check plus the straight-corridor fallback.

from typing import List, Optional
from ..grid import BY_SIDE, NORTH, SOUTH, EAST, WEST, Grid, MazeInvariantError, XY


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def has_path_to_exit(grid: Grid, exit_xy: XY) -> bool:
    return grid.cell(*exit_xy).visited


def closest_visited(grid: Grid, target: XY) -> Optional[XY]:
    # Row-major scan; strict '<' keeps the first cell on ties.
    best: Optional[XY] = None
    best_d = 0
    for c in grid:
        if not c.visited:
            continue
        d = manhattan((c.x, c.y), target)
        if best is None or d < best_d:
            best, best_d = (c.x, c.y), d
    return best


def carve_corridor(grid: Grid, start: XY, target: XY) -> List[XY]:
    """
    Walk from start to target, closing the row offset before the column
    offset, opening each wall pair on the way. Every cell on the walk,
    target included, ends up visited. Returns the cells walked.
    """
    x, y = start
    path = [(x, y)]
    grid.cell(x, y).visited = True
    while (x, y) != target:
        if y != target[1]:
            side = SOUTH if target[1] > y else NORTH
        else:
            side = EAST if target[0] > x else WEST
        d = BY_SIDE[side]
        grid.remove_wall(x, y, d)
        x, y = x + d.dx, y + d.dy
        grid.cell(x, y).visited = True
        path.append((x, y))
    return path


def connect_to_exit(grid: Grid, exit_xy: XY) -> List[XY]:
    """No-op (empty list) when the exit is already reachable."""
    if has_path_to_exit(grid, exit_xy):
        return []
    origin = closest_visited(grid, exit_xy)
    if origin is None:
        raise MazeInvariantError("nothing visited; carve never ran")
    return carve_corridor(grid, origin, exit_xy)
