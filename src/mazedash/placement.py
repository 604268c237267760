# src/mazedash/placement.py
# Item/NPC placement on top of the query layer. Spawning itself is the host's job:
# callers hand in a `spawn(name, position)` callback.

import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from .query import MazeQuery
from .rng import PMRandom
from .world.coords import WorldPoint

logger = logging.getLogger(__name__)

T = TypeVar("T")
SpawnFn = Callable[[str, WorldPoint], T]

DEFAULT_EXCLUDE_RADIUS = 3  # keep spawns off the entrance/exit approach


class PlacementError(Exception):
    """Raised when a caller asks to place something off the maze paths."""


@dataclass(frozen=True)
class Placement(Generic[T]):
    name: str
    position: WorldPoint
    entity: T


def place_item(query: MazeQuery, position: WorldPoint, name: str, spawn: SpawnFn) -> Placement:
    """
    Validate against is_walkable, then spawn. A non-walkable position is
    rejected as-is, never nudged onto a path.
    """
    if not query.is_walkable(position.x, position.y, position.z):
        raise PlacementError(
            f"cannot place {name} at ({position.x}, {position.y}, {position.z}): not a walkable path"
        )
    return Placement(name=name, position=position, entity=spawn(name, position))


def place_random_items(
    query: MazeQuery,
    count: int,
    spawn: SpawnFn,
    exclude_radius: int = DEFAULT_EXCLUDE_RADIUS,
    name_prefix: str = "item",
    rng: Optional[PMRandom] = None,
) -> List[Placement]:
    placed: List[Placement] = []
    for i in range(count):
        name = f"{name_prefix}-{i}"
        position = query.random_walkable_position(exclude_radius, rng)
        if position is None:
            logger.error("no walkable position for %s; skipping", name)
            continue
        try:
            placed.append(place_item(query, position, name, spawn))
        except PlacementError as e:
            logger.error("%s", e)
    logger.info("placed %d of %d %s", len(placed), count, name_prefix)
    return placed
