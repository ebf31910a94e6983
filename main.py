"""
main.py

Entry point.  Loads every shape up front (any missing file aborts startup),
builds the match session, and runs the frame loop for the matching scene.
"""

import logging
import os
import sys
import pygame

from config              import WIDTH, HEIGHT, FPS, TITLE, ASSETS_DIR, SHAPES_DIR, SHAPE_NAMES, LOG_LEVEL
from core.asset_manager  import AssetManager
from core.log            import setup_default_logging
from core.match_session  import MatchSession
from core.shape_assets   import DirectoryStore, ShapeAssetRegistry
from scenes.shape_match  import ShapeMatchScene

logger = logging.getLogger(__name__)


def init_mixer() -> None:
    """Start audio; fall back to SDL's silent driver when there is no device."""
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        logger.warning("No audio device (%s); cues will be silent", exc)
        os.environ["SDL_AUDIODRIVER"] = "dummy"
        pygame.mixer.init()


def build_session() -> MatchSession:
    registry = ShapeAssetRegistry(DirectoryStore(SHAPES_DIR))
    result   = registry.load_all(SHAPE_NAMES)
    if not result.ok:
        err = result.error
        logger.error("%s", err)
        sys.exit(f"Could not load assets for shape: {err.name} ({err})")
    return MatchSession(result.value)


def main() -> None:
    setup_default_logging(LOG_LEVEL)
    pygame.init()
    init_mixer()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock  = pygame.time.Clock()

    session = build_session()
    scene   = ShapeMatchScene(screen, session, AssetManager(ASSETS_DIR))

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or scene.handle_event(ev) == "quit":
                running = False
                break

        scene.update(dt)
        scene.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
