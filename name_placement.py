"""
Placement of the badge holder's name and pronouns inside one badge cell.

The name is split after the first word: the first word goes on the top line at
the largest size that fits the name band, and the rest of the name goes below it,
starting from 80% of the size the line above ended up with. Every line is
centered on the cell.
"""

import re
from typing import NamedTuple, Optional, Tuple

from badge_layout import cell_center_x
from badge_settings import (
    BADGE_SIZE,
    BADGE_TEXT_COLOR,
    MIN_FONT_SIZE,
    NAME_BASELINE_OFFSET,
    NAME_MAX_WIDTH,
    NAME_SHADOW_LAYERS,
    NAME_SHRINK,
    NAME_START_SIZES,
    PRONOUN_OFFSET,
    PRONOUN_SIZE,
)
from text_fit import measure_fitted


class LinePlacement(NamedTuple):
    text: str
    size: int
    x: float
    y: float
    width: float


class NameLayout(NamedTuple):
    lines: Tuple[LinePlacement, ...]
    baseline: float  # baseline of the last line drawn


class PronounPlacement(NamedTuple):
    text: str
    size: int
    x: float
    y: float


def split_name(full_name: str) -> Tuple[str, str]:
    """``"Jane Jordan Smith"`` -> ``("Jane", "Jordan Smith")``."""
    tokens = re.sub(r"\s+", " ", full_name or "").strip().split(" ")
    return tokens[0], " ".join(tokens[1:])


def layout_name(full_name: str, origin: Tuple[float, float], font,
                start_size: float = NAME_START_SIZES["default"],
                min_size: int = MIN_FONT_SIZE) -> NameLayout:
    x, y = origin
    center = cell_center_x(x)
    current_y = y + NAME_BASELINE_OFFSET
    size = start_size

    lines = []
    for i, text in enumerate(split_name(full_name)):
        # single-word names have nothing to put on the second line
        if not text:
            continue
        size, width = measure_fitted(text, size, NAME_MAX_WIDTH, font.width, min_size)
        current_y -= font.line_height(size) * font.line_spacing * i
        lines.append(LinePlacement(text, size, center - width / 2, current_y, width))
        size = size * NAME_SHRINK

    return NameLayout(tuple(lines), current_y)


def layout_pronouns(pronouns: Optional[str], origin: Tuple[float, float], anchor_y: float,
                    font, min_size: int = MIN_FONT_SIZE) -> Optional[PronounPlacement]:
    """Center ``(pronouns)`` a fixed distance below ``anchor_y``, or ``None`` if blank."""
    if not pronouns or not pronouns.strip():
        return None

    text = f"({pronouns.strip()})"
    size, width = measure_fitted(text, PRONOUN_SIZE, BADGE_SIZE, font.width, min_size)
    x = cell_center_x(origin[0]) - width / 2
    return PronounPlacement(text, size, x, anchor_y - PRONOUN_OFFSET)


def draw_name(c, layout: NameLayout, font) -> None:
    """Stamp each name line as a gray/black/ink stack for an engraved look."""
    for line in layout.lines:
        c.setFont(font.name, line.size)
        for dx, dy, rgb in NAME_SHADOW_LAYERS:
            c.setFillColorRGB(*rgb)
            c.drawString(line.x + dx, line.y + dy, line.text)


def draw_pronouns(c, placement: Optional[PronounPlacement], font) -> None:
    if placement is None:
        return
    c.setFont(font.name, placement.size)
    c.setFillColorRGB(*BADGE_TEXT_COLOR)
    c.drawString(placement.x, placement.y, placement.text)
