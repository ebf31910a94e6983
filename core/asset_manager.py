"""
AssetManager  –  decoration images (background and friends).

It caches each (filename, size) pair separately so every unique size is
scaled once from the source file.  Decorations are optional: a file that
can't be loaded becomes a transparent surface so the game still starts.
Shape images go through ShapeAssetRegistry instead, where a missing file is
fatal.
"""
from __future__ import annotations
from pathlib import Path
import logging
import pygame

from core.shape_assets import load_image

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (1, 1)


class AssetManager:
    def __init__(self, assets_dir: Path):
        self.assets_dir = Path(assets_dir)
        # key = (filename, size‑tuple or None)  -> pygame.Surface
        self._cache: dict[tuple[str, tuple[int, int] | None], pygame.Surface] = {}

    # ----------------------------------------------------------------
    def get_image(self, filename: str, size: tuple[int, int] | None = None) -> pygame.Surface:
        """
        Return a Surface of the requested size.
        If *size* is None the original raster size is returned.
        """
        key = (filename, size)
        if key in self._cache:
            return self._cache[key]

        path = self.assets_dir / filename
        try:
            surf = load_image(path)
        except (pygame.error, OSError) as exc:
            logger.warning("Missing image resource: %s (%s)", path, exc)
            surf = pygame.Surface(PLACEHOLDER_SIZE, pygame.SRCALPHA)
            surf.fill((0, 0, 0, 0))

        if size is not None:
            surf = pygame.transform.smoothscale(surf, size)

        self._cache[key] = surf
        return surf
