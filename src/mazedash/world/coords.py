# src/mazedash/world/coords.py
# Grid cell <-> world block mapping. Grid y runs along world z; world y is up.

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, NamedTuple, Tuple

from ..grid import BY_SIDE, EAST, NORTH, SOUTH, WEST, XY
from ..maze import Maze


class WorldPoint(NamedTuple):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class BlockBox:
    """Inclusive integer box of world blocks."""
    x0: int
    y0: int
    z0: int
    x1: int
    y1: int
    z1: int

    @property
    def volume(self) -> int:
        return (self.x1 - self.x0 + 1) * (self.y1 - self.y0 + 1) * (self.z1 - self.z0 + 1)

    def blocks(self) -> Iterator[Tuple[int, int, int]]:
        for x in range(self.x0, self.x1 + 1):
            for z in range(self.z0, self.z1 + 1):
                for y in range(self.y0, self.y1 + 1):
                    yield (x, y, z)

    def columns(self) -> Iterator[Tuple[int, int]]:
        """(x, z) positions along the box, in x-then-z order."""
        for x in range(self.x0, self.x1 + 1):
            for z in range(self.z0, self.z1 + 1):
                yield (x, z)


class CoordinateTranslator:
    def __init__(self, maze: Maze):
        self.maze = maze
        cfg = maze.config
        self.path_width = cfg.path_width
        self.wall_height = cfg.wall_height
        self.platform_width = cfg.platform_width
        self.platform_depth = cfg.platform_depth

    @property
    def extent(self) -> int:
        return self.maze.size * self.path_width

    @cached_property
    def anchor_height(self) -> float:
        # Computed once; every centre/anchor in the session shares it.
        return float(self.maze.config.standing_height)

    def cell_origin(self, gx: int, gy: int) -> XY:
        return (gx * self.path_width, gy * self.path_width)

    def cell_footprint(self, gx: int, gy: int) -> BlockBox:
        bx, bz = self.cell_origin(gx, gy)
        pw = self.path_width
        return BlockBox(bx, 0, bz, bx + pw - 1, 0, bz + pw - 1)

    def world_to_cell(self, wx: float, wz: float) -> XY:
        return (math.floor(wx / self.path_width), math.floor(wz / self.path_width))

    def in_grid_z(self, wz: float) -> bool:
        return 0 <= wz < self.extent

    def wall_slab(self, gx: int, gy: int, side: str) -> BlockBox:
        if side not in BY_SIDE:
            raise ValueError(f"unknown wall side {side!r}")
        bx, bz = self.cell_origin(gx, gy)
        last = self.path_width - 1
        h = self.wall_height
        if side == NORTH:
            return BlockBox(bx, 1, bz, bx + last, h, bz)
        if side == SOUTH:
            return BlockBox(bx, 1, bz + self.path_width, bx + last, h, bz + self.path_width)
        if side == WEST:
            return BlockBox(bx, 1, bz, bx, h, bz + last)
        return BlockBox(bx + self.path_width, 1, bz, bx + self.path_width, h, bz + last)

    def _center_x(self, gx: int) -> float:
        return gx * self.path_width + self.path_width / 2

    def entrance_anchor(self) -> WorldPoint:
        """Middle of the staging platform in front of the entrance cell."""
        return WorldPoint(
            self._center_x(self.maze.entrance[0]),
            self.anchor_height,
            -self.platform_depth / 2,
        )

    def exit_anchor(self) -> WorldPoint:
        return WorldPoint(
            self._center_x(self.maze.exit[0]),
            self.anchor_height,
            self.extent + self.platform_depth / 2,
        )

    def cell_center(self, gx: int, gz: int) -> WorldPoint:
        return WorldPoint(
            self._center_x(gx),
            self.anchor_height + 1.0,
            gz * self.path_width + self.path_width / 2,
        )

    def platform_span(self, gx: int) -> Tuple[int, int]:
        """Half-open x range of a platform centred on cell column gx, clipped to the grid."""
        half = self.platform_width // 2
        cx = gx * self.path_width
        return (max(0, cx - half), min(self.extent, cx + self.path_width + half))
