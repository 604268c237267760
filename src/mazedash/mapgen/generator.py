# src/mazedash/mapgen/generator.py
# Build pipeline: initialize -> carve -> repair -> loops, on one PRNG stream.

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, MazeConfig
from ..grid import NORTH, SOUTH, Grid, MazeInvariantError, XY
from ..maze import Maze
from ..rng import PMRandom
from .carve import carve_dfs
from .loops import add_extra_connections
from .repair import connect_to_exit

logger = logging.getLogger(__name__)


def entrance_cell(size: int) -> XY:
    return (size // 2, 0)


def exit_cell(size: int) -> XY:
    return (size // 2, size - 1)


def generate_maze(config: Optional[MazeConfig] = None, rng: Optional[PMRandom] = None) -> Maze:
    """
    Seed once, then carve, repair and inject loops from the same stream, so
    equal (seed, size, density) always gives the same walls. A caller-supplied
    rng is reset to config.seed first.
    """
    cfg = config or DEFAULT_CONFIG
    if rng is None:
        rng = PMRandom.from_seed(cfg.seed)
    else:
        rng.reset(cfg.seed)
    logger.info("generating maze size=%d seed=%d", cfg.size, cfg.seed)

    grid = Grid(cfg.size)
    entrance = entrance_cell(cfg.size)
    exit_xy = exit_cell(cfg.size)
    grid.open_boundary(*entrance, NORTH)

    carved = carve_dfs(grid, entrance, rng)
    logger.debug("carved %d passages", carved)

    corridor = connect_to_exit(grid, exit_xy)
    if corridor:
        logger.warning("exit unreachable after carve; opened corridor of %d cells", len(corridor))
    grid.open_boundary(*exit_xy, SOUTH)

    loops = add_extra_connections(grid, rng, cfg.loop_density)
    logger.debug("loop injection: %s", loops)

    if grid.visited_count() != cfg.size * cfg.size:
        raise MazeInvariantError(
            f"{cfg.size * cfg.size - grid.visited_count()} cells unreachable after build"
        )
    assert grid.walls_consistent(), "wall pair mismatch after build"

    logger.info("maze ready: %d cells, %d loop edges opened", cfg.size * cfg.size, loops.opened)
    return Maze(
        config=cfg,
        grid=grid,
        entrance=entrance,
        exit=exit_xy,
        seed=cfg.seed,
        loops=loops,
        stream_state=rng.state,
    )
