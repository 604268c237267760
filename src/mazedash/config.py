import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "MAZEDASH_"


class ConfigError(ValueError):
    """Raised when a maze cannot be built from the given settings."""


@dataclass(frozen=True)
class MazeConfig:
    # Defaults mirror the shipped game: 50x50 cells of 4x4 blocks (200x200 world).
    size: int = 50
    path_width: int = 4
    wall_height: int = 7
    platform_width: int = 10
    platform_depth: int = 10
    seed: int = 12345
    loop_density: float = 0.1
    wall_seed: int = 54321      # cosmetic wall-texture stream, separate from `seed`
    standing_height: float = 1.0

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ConfigError(f"size must be > 0, got {self.size}")
        if self.path_width <= 0:
            raise ConfigError(f"path_width must be > 0, got {self.path_width}")
        if self.wall_height <= 0:
            raise ConfigError(f"wall_height must be > 0, got {self.wall_height}")
        if self.platform_width < 0 or self.platform_depth < 0:
            raise ConfigError("platform dimensions must be >= 0")
        if self.loop_density < 0:
            raise ConfigError(f"loop_density must be >= 0, got {self.loop_density}")

    @classmethod
    def from_mapping(cls, data: Mapping) -> "MazeConfig":
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        kwargs = {}
        for key, value in data.items():
            kind = float if known[key].type in (float, "float") else int
            try:
                kwargs[key] = kind(value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{key}: expected {kind.__name__}, got {value!r}") from e
        return cls(**kwargs)

    def replace(self, **changes) -> "MazeConfig":
        merged = asdict(self)
        merged.update(changes)
        return MazeConfig.from_mapping(merged)


DEFAULT_CONFIG = MazeConfig()


def _read_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    # Allow either a flat file or one nested under `maze:`
    return dict(data.get("maze", data))


def load_config(
    base: Optional[Path] = Path("config/maze.yaml"),
    local: Optional[Path] = Path("config/local.yaml"),
    env: Optional[Mapping[str, str]] = None,
) -> MazeConfig:
    """
    Merge base YAML, then local YAML, then MAZEDASH_* environment overrides
    (e.g. MAZEDASH_SEED=7). Missing files are skipped.
    """
    cfg: Dict = {}
    for path in (base, local):
        if path is not None:
            loaded = _read_yaml(Path(path))
            if loaded:
                logger.debug("config: %d keys from %s", len(loaded), path)
            cfg.update(loaded)
    env = os.environ if env is None else env
    for f in fields(MazeConfig):
        v = env.get(ENV_PREFIX + f.name.upper())
        if v is not None:
            cfg[f.name] = v
    return MazeConfig.from_mapping(cfg)
