"""
Font resolution and metrics for badge text.

A font identifier is either a path to an outline font file or the name of one of
the PDF standard fonts bundled with ReportLab.
"""

import logging
from pathlib import Path
from typing import NamedTuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from badge_errors import AssetLoadError
from badge_settings import DEFAULT_STANDARD_FONT, FONT_FILE_SUFFIXES, FONT_LINE_SPACING

log = logging.getLogger(__name__)

FILE = "file"
MISSING_FILE = "missing-file"
STANDARD = "standard"


class BadgeFont(NamedTuple):
    name: str
    kind: str  # FILE or STANDARD
    path: str = ""

    @property
    def line_spacing(self) -> float:
        return FONT_LINE_SPACING.get(self.name, 1.0)

    def width(self, text: str, size: float) -> float:
        if not text:
            return 0.0
        return pdfmetrics.stringWidth(text, self.name, size)

    def line_height(self, size: float) -> float:
        """Ascender to descender height at ``size``."""
        ascent, descent = pdfmetrics.getAscentDescent(self.name, size)
        return ascent - descent


def classify_font(identifier: str) -> str:
    if Path(identifier).is_file():
        return FILE
    if Path(identifier).suffix.lower() in FONT_FILE_SUFFIXES:
        return MISSING_FILE
    return STANDARD


def resolve_font(identifier: str) -> BadgeFont:
    """Register ``identifier`` with ReportLab and return a handle to it.

    Existing files are embedded as TrueType fonts; an unreadable file, or a
    .ttf/.otf path that does not exist, is fatal. Anything else is taken as a
    standard font name; unknown names fall back to ``DEFAULT_STANDARD_FONT``.
    """
    kind = classify_font(identifier)
    if kind == MISSING_FILE:
        raise AssetLoadError(f"Font file {identifier} not found")
    if kind == FILE:
        path = Path(identifier)
        name = path.stem
        if name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(name, str(path)))
            except (TTFError, OSError) as e:
                raise AssetLoadError(f"Could not load font {path}: {e}") from e
        log.debug("Embedded font %s from %s", name, path)
        return BadgeFont(name, FILE, str(path))

    if identifier in pdfmetrics.standardFonts:
        return BadgeFont(identifier, STANDARD)

    log.warning("Font %r not found, using %s", identifier, DEFAULT_STANDARD_FONT)
    return BadgeFont(DEFAULT_STANDARD_FONT, STANDARD)
