"""
Fixed geometry, colors and defaults for the camp badge sheets.

ReportLab measures everything in points; 72 points equal 1 inch.
"""

import re

from reportlab.lib.pagesizes import letter

PAGE_WIDTH, PAGE_HEIGHT = letter  # 8.5" x 11"

BADGE_SIZE = 189.36  # 2.63" square, matches the pre-cut sticker stock
X_GAP = 6
Y_GAP = 4
LEFT_PADDING = 14
BOTTOM_PADDING = 10

GRID_ROWS = 4
GRID_COLS = 3
CELLS_PER_PAGE = GRID_ROWS * GRID_COLS

# Name band
NAME_MAX_WIDTH = 100
NAME_BASELINE_OFFSET = 115
NAME_SHRINK = 0.8
NAME_START_SIZES = {
    "default": 30,
    "plain": 24,
}

PRONOUN_SIZE = 14
PRONOUN_OFFSET = 24

MIN_FONT_SIZE = 6

BADGE_TEXT_COLOR = (0.4, 0.1, 0.1)
# (dx, dy, rgb) drawn in order, last one on top
NAME_SHADOW_LAYERS = (
    (1, -1, (0.25, 0.25, 0.25)),
    (0.5, -0.5, (0, 0, 0)),
    (0, 0, BADGE_TEXT_COLOR),
)

# Decorative faces sit tall, so their lines are packed tighter
FONT_LINE_SPACING = {
    "EagleLake-Regular": 0.8,
}

DEFAULT_STANDARD_FONT = "Helvetica-Bold"
FONT_FILE_SUFFIXES = (".ttf", ".otf")

# CSV columns
NAME_COLUMN = "badge_name"
TITLE_COLUMN = "badge_title"
PRONOUN_COLUMN = "badge_gender"

# Ordered (pattern, template id); first match wins
DEFAULT_BADGE_RULES = (
    (r"board", "LTA"),
    (r"committee", "Comm"),
    (r"staff|counsel", "Staff"),
    (r"volunteer", "Volunteer"),
)
NO_TITLE = "No title or job"
DEFAULT_RULE = (re.escape(NO_TITLE), "Plain")
HELP_TEMPLATE = "Help"

TEMPLATE_FILENAME = "template-{}.png"

DEFAULT_CSV = "data.csv"
DEFAULT_FONT = "fonts/Arial-Bold.ttf"
DEFAULT_IMG_DIR = "img"
BADGES_PDF = "badges.pdf"
BLANK_PDF = "blank-badges.pdf"
HELP_PDF = "help-badges.pdf"
