# Plain-text dump of a maze, for tools and test failure messages.
#   +--+  walls;  '  ' walkable cell;  '##' cell never reached
#   the gaps on the top/bottom rim are the entrance and exit.

from typing import List
from ..maze import Maze


def to_ascii(maze: Maze) -> str:
    grid = maze.grid
    n = grid.size
    lines: List[str] = []
    for y in range(n):
        top, mid = [], []
        for x in range(n):
            c = grid.cell(x, y)
            top.append("+--" if c.north else "+  ")
            mid.append(("|" if c.west else " ") + ("  " if c.visited else "##"))
        top.append("+")
        mid.append("|" if grid.cell(n - 1, y).east else " ")
        lines.append("".join(top))
        lines.append("".join(mid))
    bottom = ["+--" if grid.cell(x, n - 1).south else "+  " for x in range(n)]
    lines.append("".join(bottom) + "+")
    return "\n".join(lines)
