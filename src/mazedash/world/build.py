# src/mazedash/world/build.py
# Turns a finished Maze into block-fill operations for the world host.

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from ..blocks import MAZE_FLOOR, WallBlockPicker
from ..grid import SIDES
from ..maze import Maze
from .coords import BlockBox, CoordinateTranslator

logger = logging.getLogger(__name__)

FLOOR, PLATFORM, WALL = "floor", "platform", "wall"


@dataclass(frozen=True)
class BlockFill:
    box: BlockBox
    block_id: int
    kind: str

    @property
    def volume(self) -> int:
        return self.box.volume

    def blocks(self) -> Iterator[Tuple[int, int, int]]:
        return self.box.blocks()


@dataclass(frozen=True)
class BuildReport:
    fills: int
    blocks: int
    walls: int


def floor_fills(maze: Maze, coords: CoordinateTranslator) -> Iterator[BlockFill]:
    extent = coords.extent
    yield BlockFill(BlockBox(0, 0, 0, extent - 1, 0, extent - 1), MAZE_FLOOR, FLOOR)

    depth = coords.platform_depth
    if depth == 0:
        return
    x0, x1 = coords.platform_span(maze.entrance[0])
    if x1 > x0:
        yield BlockFill(BlockBox(x0, 0, -depth, x1 - 1, 0, -1), MAZE_FLOOR, PLATFORM)
    x0, x1 = coords.platform_span(maze.exit[0])
    if x1 > x0:
        yield BlockFill(BlockBox(x0, 0, extent, x1 - 1, 0, extent + depth - 1), MAZE_FLOOR, PLATFORM)


def wall_fills(maze: Maze, coords: CoordinateTranslator, picker: WallBlockPicker) -> Iterator[BlockFill]:
    """
    One single-block fill per wall block so each can take its own texture.
    Order: cells row-major, sides N/E/S/W, then along the wall, then upward.
    """
    for cell in maze.grid:
        for side in SIDES:
            if not cell.has_wall(side):
                continue
            slab = coords.wall_slab(cell.x, cell.y, side)
            for x, z in slab.columns():
                for y in range(slab.y0, slab.y1 + 1):
                    yield BlockFill(BlockBox(x, y, z, x, y, z), picker.next_block(), WALL)


def world_fills(maze: Maze, picker: Optional[WallBlockPicker] = None) -> Iterator[BlockFill]:
    coords = CoordinateTranslator(maze)
    picker = picker or WallBlockPicker(maze.config.wall_seed)
    yield from floor_fills(maze, coords)
    yield from wall_fills(maze, coords, picker)


def build_world(maze: Maze, sink: Callable[[BlockFill], None],
                picker: Optional[WallBlockPicker] = None) -> BuildReport:
    fills = blocks = walls = 0
    for fill in world_fills(maze, picker):
        sink(fill)
        fills += 1
        blocks += fill.volume
        if fill.kind == WALL:
            walls += 1
    logger.info("world build: %d fills, %d blocks (%d wall blocks)", fills, blocks, walls)
    return BuildReport(fills=fills, blocks=blocks, walls=walls)
