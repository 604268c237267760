from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

XY = Tuple[int, int]

NORTH, EAST, SOUTH, WEST = "north", "east", "south", "west"
SIDES = (NORTH, EAST, SOUTH, WEST)

# Bit per wall for compact layout dumps
WALL_BITS = {NORTH: 1, EAST: 2, SOUTH: 4, WEST: 8}


class MazeInvariantError(AssertionError):
    """Internal defect in the grid state (never a caller error)."""


@dataclass(frozen=True)
class Direction:
    dx: int
    dy: int
    wall: str
    opposite: str

# Fixed enumeration order: north, east, south, west
DIRECTIONS = (
    Direction(0, -1, NORTH, SOUTH),
    Direction(1, 0, EAST, WEST),
    Direction(0, 1, SOUTH, NORTH),
    Direction(-1, 0, WEST, EAST),
)
BY_SIDE = {d.wall: d for d in DIRECTIONS}


@dataclass
class Cell:
    x: int
    y: int
    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True
    visited: bool = False

    def has_wall(self, side: str) -> bool:
        return getattr(self, side)

    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.north, self.east, self.south, self.west)

    def wall_bits(self) -> int:
        return sum(bit for side, bit in WALL_BITS.items() if getattr(self, side))


@dataclass
class Grid:
    size: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if not self.cells:
            self.initialize()

    def initialize(self) -> None:
        # All walls up, nothing visited; drops any previous carve state.
        n = self.size
        self.cells = [Cell(x, y) for y in range(n) for x in range(n)]

    def idx(self, x: int, y: int) -> int:
        return y * self.size + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.idx(x, y)]

    def __iter__(self) -> Iterator[Cell]:
        # row-major
        return iter(self.cells)

    def neighbor(self, x: int, y: int, d: Direction) -> Optional[XY]:
        nx, ny = x + d.dx, y + d.dy
        return (nx, ny) if self.in_bounds(nx, ny) else None

    def unvisited_neighbors(self, x: int, y: int) -> List[Tuple[Direction, int, int]]:
        out = []
        for d in DIRECTIONS:
            nx, ny = x + d.dx, y + d.dy
            if self.in_bounds(nx, ny) and not self.cell(nx, ny).visited:
                out.append((d, nx, ny))
        return out

    def remove_wall(self, x: int, y: int, d: Direction) -> bool:
        """
        Open the edge between (x,y) and its neighbour in direction d.
        Both sides are cleared together. Returns True if a wall was actually
        present before the call.
        """
        nb = self.neighbor(x, y, d)
        if nb is None:
            raise MazeInvariantError(f"no neighbour {d.wall} of ({x},{y})")
        here, there = self.cell(x, y), self.cell(*nb)
        was_closed = here.has_wall(d.wall) or there.has_wall(d.opposite)
        setattr(here, d.wall, False)
        setattr(there, d.opposite, False)
        return was_closed

    def open_boundary(self, x: int, y: int, side: str) -> None:
        """Remove an outward-facing wall on the grid rim (entrance/exit)."""
        if self.neighbor(x, y, BY_SIDE[side]) is not None:
            raise MazeInvariantError(f"({x},{y}) {side} is not a boundary edge")
        setattr(self.cell(x, y), side, False)

    def walls_consistent(self) -> bool:
        for c in self.cells:
            # east and south cover every adjacent pair once
            for d in (DIRECTIONS[1], DIRECTIONS[2]):
                nb = self.neighbor(c.x, c.y, d)
                if nb is None:
                    continue
                if c.has_wall(d.wall) != self.cell(*nb).has_wall(d.opposite):
                    return False
        return True

    def visited_count(self) -> int:
        return sum(1 for c in self.cells if c.visited)

    def wall_bitmap(self) -> List[List[int]]:
        n = self.size
        return [[self.cell(x, y).wall_bits() for x in range(n)] for y in range(n)]

    def visited_mask(self) -> List[List[bool]]:
        n = self.size
        return [[self.cell(x, y).visited for x in range(n)] for y in range(n)]
