"""
Read badge holders from the registration CSV.
"""

import re
from typing import List, NamedTuple

import pandas as pd

from badge_errors import AssetLoadError, MissingNameError
from badge_settings import NAME_COLUMN, PRONOUN_COLUMN, TITLE_COLUMN


class BadgeRecord(NamedTuple):
    name: str
    title: str = ""
    pronouns: str = ""


def _clean(value) -> str:
    return re.sub(r"\s+", " ", str(value)).strip()


def records_from_frame(df: pd.DataFrame) -> List[BadgeRecord]:
    if NAME_COLUMN not in df.columns:
        raise MissingNameError(f"Input has no {NAME_COLUMN!r} column")

    records = []
    for index, (_, row) in enumerate(df.iterrows(), start=1):
        name = _clean(row[NAME_COLUMN])
        if not name:
            raise MissingNameError(f"Row {index} has an empty {NAME_COLUMN!r}")
        title = _clean(row[TITLE_COLUMN]) if TITLE_COLUMN in df.columns else ""
        pronouns = _clean(row[PRONOUN_COLUMN]) if PRONOUN_COLUMN in df.columns else ""
        records.append(BadgeRecord(name, title, pronouns))
    return records


def read_badge_records(csv_path) -> List[BadgeRecord]:
    """Load every row of ``csv_path`` in file order; blank lines are skipped."""
    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise AssetLoadError(f"Could not read badge data {csv_path}: {e}") from e
    return records_from_frame(df)
