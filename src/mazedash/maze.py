from dataclasses import dataclass
from .config import MazeConfig
from .grid import Grid, XY
from .mapgen.loops import LoopReport
from .rng import PMRandom


@dataclass(frozen=True)
class Maze:
    """
    A finished maze. Produced only by mapgen.generator.generate_maze once the
    whole pipeline has run; treat `grid` as read-only afterwards.
    """
    config: MazeConfig
    grid: Grid
    entrance: XY
    exit: XY
    seed: int
    loops: LoopReport
    stream_state: int  # build stream position after the last loop draw

    @property
    def size(self) -> int:
        return self.grid.size

    def continue_stream(self) -> PMRandom:
        """A fresh stream that picks up exactly where the build left off."""
        return PMRandom(self.stream_state)
