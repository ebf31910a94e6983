"""
Global constants shared across modules.
"""
import os
from pathlib import Path

# Window ---------------------------------------------------------------
WIDTH, HEIGHT = 800, 600
FPS           = 60
TITLE         = "Shape Matching Game"

# Fonts / sizes --------------------------------------------------------
FONT_NAME     = None              # pygame's bundled default font
NAME_FONT     = "impact"          # SysFont, falls back to default
OUTLINE_SIZE  = (150, 150)        # drag source
TARGET_SIZE   = (200, 200)        # drop target

# Assets ---------------------------------------------------------------
PROJECT_ROOT    = Path(__file__).parent
ASSETS_DIR      = PROJECT_ROOT / "assets"
SHAPES_DIR      = Path(os.environ.get("SHAPEMATCH_ASSETS_DIR", ASSETS_DIR / "shapes"))
BACKGROUND_FILE = "sparkly_pink_background.png"

# Logging --------------------------------------------------------------
LOG_LEVEL  = os.environ.get("SHAPEMATCH_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Feedback timing (seconds) -------------------------------------------
CONFETTI_SECONDS     = 1.0        # celebratory pause after a match
CUE_FALLBACK_SECONDS = 2.0        # added to cue length before forcing advance

# Shape list, in presentation order -----------------------------------
SHAPE_NAMES = [
    "triangle", "square", "circle", "oval", "rectangle",
    "pentagon", "hexagon", "octagon", "rhombus", "trapezoid",
]
