# Canonical block IDs (the world host registers textures for these)
from typing import Sequence, Tuple
from .rng import PMRandom

MAZE_FLOOR = 101
WALL_DRAGONS_STONE = 100
WALL_GHOST_DIRT = 102
WALL_VOID_SAND = 103
WALL_INFECTED_SHADOWROCK = 104

WALL_BLOCK_IDS = (
    WALL_DRAGONS_STONE,
    WALL_GHOST_DIRT,
    WALL_VOID_SAND,
    WALL_INFECTED_SHADOWROCK,
)

BLOCK_NAMES = {
    MAZE_FLOOR: "Maze Floor",
    WALL_DRAGONS_STONE: "Dragon Stone Wall",
    WALL_GHOST_DIRT: "Ghost Dirt Wall",
    WALL_VOID_SAND: "Void Sand Wall",
    WALL_INFECTED_SHADOWROCK: "Infected Shadowrock Wall",
}

WALL_SEED = 54321
WALL_PATTERN_PERIOD = 1000  # draws before the texture pattern repeats


def is_wall_block(block_id: int) -> bool:
    return block_id in WALL_BLOCK_IDS


def block_color(block_id: int) -> Tuple[int, int, int, int]:
    # Debug colours for top-down renders
    if block_id == MAZE_FLOOR:         return ( 96, 160,  72, 255)
    if block_id == WALL_DRAGONS_STONE: return (110,  90,  90, 255)
    if block_id == WALL_GHOST_DIRT:    return (140, 120,  96, 255)
    if block_id == WALL_VOID_SAND:     return (190, 170, 120, 255)
    if block_id == WALL_INFECTED_SHADOWROCK: return (70, 60, 90, 255)
    return (220, 220, 220, 255)


class WallBlockPicker:
    """
    Cosmetic texture choice per wall block. Own stream, own seed: it never
    touches the carve stream, so textures can change without moving walls.
    """
    def __init__(self, seed: int = WALL_SEED, palette: Sequence[int] = WALL_BLOCK_IDS,
                 period: int = WALL_PATTERN_PERIOD):
        if not palette:
            raise ValueError("wall palette is empty")
        self.seed = seed
        self.palette = tuple(palette)
        self.period = period
        self.rng = PMRandom.from_seed(seed)
        self.draws = 0

    def reset(self) -> None:
        self.rng.reset(self.seed)
        self.draws = 0

    def next_block(self) -> int:
        if self.period and self.draws == self.period:
            self.reset()
        self.draws += 1
        return self.rng.choice(self.palette)
