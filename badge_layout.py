"""
Grid positions for the 4 x 3 badge sheet on a Letter page.

Row 0 is the bottom row and column 0 the leftmost, so the first badge on a page
lands in the bottom-left corner of the sticker stock.
"""

from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

from badge_settings import (
    BADGE_SIZE,
    BOTTOM_PADDING,
    GRID_COLS,
    GRID_ROWS,
    LEFT_PADDING,
    X_GAP,
    Y_GAP,
)

T = TypeVar("T")


def cell_origin(row: int, col: int) -> Tuple[float, float]:
    """Bottom-left corner of badge cell ``(row, col)`` in page points."""
    if not (0 <= row < GRID_ROWS and 0 <= col < GRID_COLS):
        raise ValueError(f"cell ({row}, {col}) is outside the {GRID_ROWS}x{GRID_COLS} grid")
    x = LEFT_PADDING + col * (BADGE_SIZE + X_GAP)
    y = BOTTOM_PADDING + row * (BADGE_SIZE + Y_GAP)
    return x, y


def cell_center_x(x: float) -> float:
    return x + BADGE_SIZE / 2


def iter_cells() -> Iterator[Tuple[int, int]]:
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            yield row, col


def paginate(items: Sequence[T]) -> List[List[Tuple[int, int, Optional[T]]]]:
    """Spread ``items`` over as many pages as needed, 12 cells per page.

    Cells past the last item carry ``None``. There is always at least one page.
    """
    pages = []
    index = 0
    while True:
        page = []
        for row, col in iter_cells():
            if index < len(items):
                page.append((row, col, items[index]))
                index += 1
            else:
                page.append((row, col, None))
        pages.append(page)
        if index >= len(items):
            break
    return pages
