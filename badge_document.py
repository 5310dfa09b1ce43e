"""
Build badge sheet PDFs: plan every page of the 4 x 3 grid, then draw it.

Planning is pure (template choice, name split, font sizes, coordinates) so the
same input always produces the same layout; drawing only replays the plan onto
a ReportLab canvas.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from badge_fonts import BadgeFont, resolve_font
from badge_layout import cell_origin, iter_cells, paginate
from badge_records import BadgeRecord
from badge_settings import BADGE_SIZE, MIN_FONT_SIZE, NAME_START_SIZES
from badge_templates import (
    BadgeRule,
    default_rule,
    default_rules,
    load_template_images,
    select_template,
)
from name_placement import (
    NameLayout,
    PronounPlacement,
    draw_name,
    draw_pronouns,
    layout_name,
    layout_pronouns,
)

log = logging.getLogger(__name__)


@dataclass
class BadgeContext:
    """Everything loaded once up front and shared by every badge on every page."""
    font: BadgeFont
    templates: Dict[str, ImageReader]
    rules: List[BadgeRule] = field(default_factory=default_rules)
    default_rule: BadgeRule = field(default_factory=default_rule)
    name_start_size: float = NAME_START_SIZES["default"]
    fill_blank_cells: bool = True
    min_font_size: int = MIN_FONT_SIZE


class CellPlan(NamedTuple):
    row: int
    col: int
    origin: Tuple[float, float]
    template_id: Optional[str]
    record: Optional[BadgeRecord] = None
    name: Optional[NameLayout] = None
    pronouns: Optional[PronounPlacement] = None


PagePlan = Tuple[CellPlan, ...]


def build_context(font_identifier: str, image_dir, rules: Optional[List[BadgeRule]] = None,
                  preset: str = "default", fill_blank_cells: bool = True) -> BadgeContext:
    """Resolve the font and preload every template the rules can pick."""
    if preset not in NAME_START_SIZES:
        raise ValueError(f"Unknown name preset {preset!r}")
    rules = default_rules() if rules is None else list(rules)
    fallback = default_rule()

    font = resolve_font(font_identifier)
    template_ids = [rule.template_id for rule in rules] + [fallback.template_id]
    templates = load_template_images(template_ids, image_dir)
    log.info("Loaded %d badge template(s), font %s", len(templates), font.name)

    return BadgeContext(
        font=font,
        templates=templates,
        rules=rules,
        default_rule=fallback,
        name_start_size=NAME_START_SIZES[preset],
        fill_blank_cells=fill_blank_cells,
    )


def plan_cell(row: int, col: int, record: Optional[BadgeRecord],
              context: BadgeContext) -> CellPlan:
    origin = cell_origin(row, col)
    if record is None:
        template_id = context.default_rule.template_id if context.fill_blank_cells else None
        return CellPlan(row, col, origin, template_id)

    template_id = select_template(record.title, context.rules, context.default_rule)
    name = layout_name(record.name, origin, context.font, context.name_start_size,
                       context.min_font_size)
    pronouns = layout_pronouns(record.pronouns, origin, name.baseline, context.font,
                               context.min_font_size)
    return CellPlan(row, col, origin, template_id, record, name, pronouns)


def plan_document(records: Sequence[BadgeRecord], context: BadgeContext) -> List[PagePlan]:
    return [
        tuple(plan_cell(row, col, record, context) for row, col, record in page)
        for page in paginate(records)
    ]


def tiled_page(template_id: str) -> PagePlan:
    return tuple(CellPlan(row, col, cell_origin(row, col), template_id) for row, col in iter_cells())


def render_document(pages: Sequence[PagePlan], c, templates: Dict[str, ImageReader],
                    font: Optional[BadgeFont] = None) -> None:
    placed = 0
    for page in pages:
        for cell in page:
            if cell.template_id is not None:
                x, y = cell.origin
                c.drawImage(templates[cell.template_id], x, y,
                            width=BADGE_SIZE, height=BADGE_SIZE, mask="auto")
            if cell.record is None:
                continue
            if font is None:
                raise ValueError(f"cell ({cell.row}, {cell.col}) has a badge to print but no font")
            log.info("%d: badge for %s", placed, cell.record.name)
            draw_name(c, cell.name, font)
            draw_pronouns(c, cell.pronouns, font)
            placed += 1
        c.showPage()


def _save(pages: Sequence[PagePlan], output_path, templates, font, title: str) -> None:
    c = canvas.Canvas(str(output_path), pagesize=letter)
    render_document(pages, c, templates, font)
    c.setTitle(title)
    c.save()
    log.info("Wrote %d page(s) to %s", len(pages), Path(output_path))


def write_badges_pdf(records: Sequence[BadgeRecord], context: BadgeContext,
                     output_path) -> List[PagePlan]:
    pages = plan_document(records, context)
    _save(pages, output_path, context.templates, context.font, "Camp badges")
    return pages


def write_tiled_sheet(template_id: str, image_dir, output_path) -> PagePlan:
    """One page with every cell stamped with ``template_id`` and no text."""
    templates = load_template_images([template_id], image_dir)
    page = tiled_page(template_id)
    _save([page], output_path, templates, None, f"{template_id} badges")
    return page
