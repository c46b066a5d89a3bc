"""
Header detection for draw-result grids.

Publishers label their columns differently ("Concurso", "Contest",
"Bola1", "Dezena 1", "Ball_1", ...) and often put a title or blank rows
above the real header.  The locator scans the top of the grid with an
ordered list of strategies, strictest first.
"""
import re
from typing import NamedTuple, Optional, Tuple

from lottostats.errors import HeaderNotFoundError

HEADER_SCAN_ROWS = 10

CONTEST_LABEL = re.compile(r"concurso|contest", re.IGNORECASE)
DATE_LABEL = re.compile(r"data|date", re.IGNORECASE)
NUMBER_LABEL = re.compile(r"(bola|dezena|ball|number|n[uú]mero|n[uú]m|d)\s*_?\d+", re.IGNORECASE)


class HeaderMatch(NamedTuple):
    header_row: int
    contest_col: int
    date_col: int
    # None means the number columns are unknown and every cell is scanned.
    number_cols: Optional[Tuple[int, ...]]


def _labels(row) -> list:
    return ["" if cell is None else str(cell).lower() for cell in row]


def _first_index(labels, pattern):
    for idx, label in enumerate(labels):
        if pattern.search(label):
            return idx
    return None


def _number_label_indices(labels) -> list:
    return [idx for idx, label in enumerate(labels) if NUMBER_LABEL.search(label)]


def in_range_number(cell, total_numbers: int):
    """Return *cell* as an int when it is an integral number in [1, total_numbers]."""
    if cell is None or isinstance(cell, bool):
        return None
    if isinstance(cell, (int, float)):
        value = cell
    elif isinstance(cell, str):
        try:
            value = float(cell.strip())
        except ValueError:
            return None
    else:
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    if not float(value).is_integer():
        return None
    value = int(value)
    if 1 <= value <= total_numbers:
        return value
    return None


def strict_header(grid, profile) -> Optional[HeaderMatch]:
    """Contest, date and enough number-slot columns all labelled in one row."""
    for i, row in enumerate(grid[:HEADER_SCAN_ROWS]):
        labels = _labels(row)
        contest_col = _first_index(labels, CONTEST_LABEL)
        date_col = _first_index(labels, DATE_LABEL)
        number_cols = _number_label_indices(labels)
        if contest_col is None or date_col is None:
            continue
        if len(number_cols) >= profile.draw_size:
            return HeaderMatch(i, contest_col, date_col, tuple(number_cols[:profile.draw_size]))
    return None


def loose_header(grid, profile) -> Optional[HeaderMatch]:
    """Contest and date labelled; the next row must already look like a draw."""
    for i, row in enumerate(grid[:HEADER_SCAN_ROWS]):
        labels = _labels(row)
        contest_col = _first_index(labels, CONTEST_LABEL)
        date_col = _first_index(labels, DATE_LABEL)
        if contest_col is None or date_col is None:
            continue
        if i + 1 >= len(grid):
            continue
        found = [
            n for n in (in_range_number(c, profile.total_numbers) for c in grid[i + 1])
            if n is not None
        ]
        if len(found) >= profile.draw_size:
            return HeaderMatch(i, contest_col, date_col, None)
    return None


STRATEGIES = (strict_header, loose_header)


def _missing_columns(grid, profile) -> list:
    rows = [_labels(row) for row in grid[:HEADER_SCAN_ROWS]]
    missing = []
    if not any(_first_index(labels, CONTEST_LABEL) is not None for labels in rows):
        missing.append("contest")
    if not any(_first_index(labels, DATE_LABEL) is not None for labels in rows):
        missing.append("date")
    if not any(len(_number_label_indices(labels)) >= profile.draw_size for labels in rows):
        missing.append(f"{profile.draw_size} number columns")
    if not missing:
        # Labels exist but never together in one row with data below them.
        missing.append("contest/date/numbers on a single header row")
    return missing


def locate_header(grid, profile) -> HeaderMatch:
    """Run each strategy in order and return the first match."""
    for strategy in STRATEGIES:
        match = strategy(grid, profile)
        if match is not None:
            return match
    raise HeaderNotFoundError(_missing_columns(grid, profile))
