"""
Badge background selection.

Each role/title is matched against an ordered rule list; the first rule whose
pattern appears anywhere in the title picks the template. Titles that match
nothing get the default rule's template.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

import pandas as pd
from PIL import Image
from reportlab.lib.utils import ImageReader

from badge_errors import AssetLoadError, RuleConfigError
from badge_settings import DEFAULT_BADGE_RULES, DEFAULT_RULE, TEMPLATE_FILENAME

log = logging.getLogger(__name__)


class BadgeRule(NamedTuple):
    pattern: re.Pattern
    template_id: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def make_rule(pattern: str, template_id: str) -> BadgeRule:
    try:
        compiled = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise RuleConfigError(f"Bad pattern {pattern!r} for template {template_id}: {e}") from e
    return BadgeRule(compiled, template_id)


def default_rules() -> List[BadgeRule]:
    return [make_rule(p, t) for p, t in DEFAULT_BADGE_RULES]


def default_rule() -> BadgeRule:
    return make_rule(*DEFAULT_RULE)


def load_rules(csv_path) -> List[BadgeRule]:
    """Read an ordered ``pattern,template`` CSV into a rule list."""
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError) as e:
        raise AssetLoadError(f"Could not read rules file {csv_path}: {e}") from e

    missing = {"pattern", "template"} - set(df.columns)
    if missing:
        raise RuleConfigError(f"{csv_path} is missing column(s): {', '.join(sorted(missing))}")

    rules = []
    for _, row in df.iterrows():
        pattern, template_id = row["pattern"].strip(), row["template"].strip()
        if not pattern or not template_id:
            raise RuleConfigError(f"{csv_path} has an empty pattern or template")
        rules.append(make_rule(pattern, template_id))
    return rules


def select_template(role_text: Optional[str], rules: Sequence[BadgeRule],
                    default: BadgeRule) -> str:
    text = role_text or ""
    for rule in rules:
        if rule.matches(text):
            return rule.template_id
    return default.template_id


def template_path(image_dir, template_id: str) -> Path:
    return Path(image_dir) / TEMPLATE_FILENAME.format(template_id)


def load_template_images(template_ids: Iterable[str], image_dir) -> Dict[str, ImageReader]:
    """Load every template image once, keyed by template id."""
    images: Dict[str, ImageReader] = {}
    for template_id in template_ids:
        if template_id in images:
            continue
        path = template_path(image_dir, template_id)
        try:
            img = Image.open(path)
            img.load()
        except OSError as e:
            raise AssetLoadError(f"Could not load badge template {path}: {e}") from e
        images[template_id] = ImageReader(img)
        log.debug("Loaded template %s (%dx%d)", template_id, *img.size)
    return images
