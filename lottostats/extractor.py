"""
Draw extraction.

Applies a located header to every data row of a grid.  Rows that do not
yield a complete draw are dropped, never patched: one miscounted draw
would skew every aggregate computed afterwards.
"""
from dataclasses import dataclass
from datetime import date
from typing import Tuple, Union

from lottostats.dates import parse_date
from lottostats.header import HeaderMatch, in_range_number


@dataclass(frozen=True)
class Draw:
    contest: Union[int, str]
    numbers: Tuple[int, ...]
    date: date


def normalize_contest(cell):
    """Integral numbers and digit-only strings become ints; other text is stripped."""
    if cell is None or isinstance(cell, bool):
        return None
    if isinstance(cell, float):
        if cell != cell:
            return None
        return int(cell) if cell.is_integer() else cell
    if isinstance(cell, int):
        return cell
    text = str(cell).strip()
    if text.isdigit():
        return int(text)
    return text or None


def _row_numbers(row, number_cols, total_numbers):
    if number_cols is None:
        cells = row
    else:
        cells = [row[i] if i < len(row) else None for i in number_cols]
    found = {in_range_number(c, total_numbers) for c in cells}
    found.discard(None)
    return tuple(sorted(found))


def row_to_draw(row, match: HeaderMatch, profile):
    """Build a Draw from one data row, or return None if the row is invalid."""
    contest = normalize_contest(row[match.contest_col] if match.contest_col < len(row) else None)
    if contest is None:
        return None

    draw_date = parse_date(row[match.date_col] if match.date_col < len(row) else None)
    if draw_date is None:
        return None

    numbers = _row_numbers(row, match.number_cols, profile.total_numbers)
    if len(numbers) != profile.draw_size:
        return None

    return Draw(contest=contest, numbers=numbers, date=draw_date)


def extract_draws(grid, match: HeaderMatch, profile):
    """
    Return (draws, dropped) for all rows below the header.

    *dropped* counts the rows that failed validation.
    """
    draws = []
    dropped = 0
    for row in grid[match.header_row + 1:]:
        draw = row_to_draw(row, match, profile)
        if draw is None:
            dropped += 1
        else:
            draws.append(draw)
    return draws, dropped
