from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..blocks import block_color

WALKABLE_TINT = (255, 255, 0, 70)
SAMPLE_MARK = (230, 40, 40, 255)

class Tileset:
    """
    Tiny surface cache for the top-down viewer:
      - one flat-coloured square per block id
      - translucent overlays (walkable tint) at any size
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, block_id: int) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(block_color(block_id))
        return img

    @lru_cache(maxsize=8)
    def overlay(self, rgba: Tuple[int, int, int, int], size: int) -> pygame.Surface:
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        img.fill(rgba)
        return img
