# src/mazedash/mapgen/loops.py
# Extra wall removals that turn the spanning tree into a braided maze.

import math
from dataclasses import dataclass
from ..grid import DIRECTIONS, Grid
from ..rng import PMRandom

LOOP_DENSITY = 0.1


@dataclass(frozen=True)
class LoopReport:
    attempts: int
    opened: int    # walls that were still standing
    skipped: int   # neighbour fell outside the grid


def loop_attempts(size: int, density: float = LOOP_DENSITY) -> int:
    return math.floor(size * size * density)


def add_extra_connections(grid: Grid, rng: PMRandom, density: float = LOOP_DENSITY) -> LoopReport:
    """
    Draw x, y, then a direction, per attempt; open the pair when the
    neighbour exists, regardless of visited state. Already-open edges
    count as attempts but not as `opened`.
    """
    n = grid.size
    attempts = loop_attempts(n, density)
    opened = skipped = 0
    for _ in range(attempts):
        x = rng.below(n)
        y = rng.below(n)
        d = DIRECTIONS[rng.below(len(DIRECTIONS))]
        if grid.neighbor(x, y, d) is None:
            skipped += 1
            continue
        if grid.remove_wall(x, y, d):
            opened += 1
    return LoopReport(attempts=attempts, opened=opened, skipped=skipped)
