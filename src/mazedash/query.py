"""
Read-only spatial queries over a finished Maze.

Callers may probe arbitrary world coordinates (platforms, void, NaN from a
broken physics step); every probe answers with a plain value and never raises.
"""
import math
from typing import List, Optional

from .grid import XY
from .mapgen.repair import manhattan
from .maze import Maze
from .rng import PMRandom
from .world.coords import CoordinateTranslator, WorldPoint


class MazeQuery:
    def __init__(self, maze: Maze, rng: Optional[PMRandom] = None):
        self.maze = maze
        self.coords = CoordinateTranslator(maze)
        # Default sampling stream continues the build sequence.
        self.rng = rng if rng is not None else maze.continue_stream()

    # ---------- walkability ----------

    def is_walkable_cell(self, gx: int, gz: int) -> bool:
        grid = self.maze.grid
        return grid.in_bounds(gx, gz) and grid.cell(gx, gz).visited

    def is_walkable(self, wx: float, wy: float, wz: float) -> bool:
        # wy is accepted for call-site symmetry; height never matters here.
        if not (math.isfinite(wx) and math.isfinite(wz)):
            return False
        if not self.coords.in_grid_z(wz):
            return True  # entrance/exit platforms
        gx, gz = self.coords.world_to_cell(wx, wz)
        return self.is_walkable_cell(gx, gz)

    # ---------- positions ----------

    def cell_center(self, gx: int, gz: int) -> WorldPoint:
        return self.coords.cell_center(gx, gz)

    def entrance_anchor(self) -> WorldPoint:
        return self.coords.entrance_anchor()

    def exit_anchor(self) -> WorldPoint:
        return self.coords.exit_anchor()

    def all_walkable_cells(self) -> List[XY]:
        return [(c.x, c.y) for c in self.maze.grid if c.visited]

    def eligible_cells(self, exclude_radius: int) -> List[XY]:
        entrance, exit_xy = self.maze.entrance, self.maze.exit
        return [
            xy for xy in self.all_walkable_cells()
            if manhattan(xy, entrance) > exclude_radius and manhattan(xy, exit_xy) > exclude_radius
        ]

    def random_walkable_cell(self, exclude_radius: int = 2,
                             rng: Optional[PMRandom] = None) -> Optional[XY]:
        cells = self.eligible_cells(exclude_radius)
        if not cells:
            cells = self.all_walkable_cells()
        if not cells:
            return None
        return (rng or self.rng).choice(cells)

    def random_walkable_position(self, exclude_radius: int = 2,
                                 rng: Optional[PMRandom] = None) -> Optional[WorldPoint]:
        """
        Centre of a random walkable cell farther than `exclude_radius`
        (Manhattan, in cells) from both entrance and exit. Falls back to any
        walkable cell when nothing qualifies.
        """
        xy = self.random_walkable_cell(exclude_radius, rng)
        if xy is None:
            return None
        return self.cell_center(*xy)

    def maze_layout(self) -> List[List[bool]]:
        """Row z, column x: True where walkable."""
        return self.maze.grid.visited_mask()
