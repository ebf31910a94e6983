"""
Values you can freely tinker with without touching the logic.
"""

# ── Colours ───────────────────────────────────────────────────────────
BG_COLOR               = (250, 205, 225)   # shown under / instead of background
TEXT_COLOR             = (60, 30, 70)
NAME_COLOR             = (150, 20, 90)

PLAY_AGAIN_BG_COLOR    = (144, 238, 144)   # light green
EXIT_BG_COLOR          = (250, 128, 114)   # salmon
BUTTON_FG_COLOR        = (30, 30, 30)

TARGET_HIGHLIGHT_COLOR = (255, 255, 255)   # border while hovering the target

# ── Layout / sizes ────────────────────────────────────────────────────
COUNTER_FONT_SIZE      = 28
NAME_FONT_SIZE         = 40
BUTTON_FONT_SIZE       = 24

COUNTER_TOP            = 24
SHAPE_GAP              = 20                # vertical gap between elements
BUTTON_SIZE            = (180, 50)
BUTTON_GAP             = 10
