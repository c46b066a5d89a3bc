"""
History filters.

Helpers to narrow an already-consolidated history before re-running the
analysis, and to search the recent-draw list.
"""
import warnings
from datetime import date, datetime


def _as_date(value):
    if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
        return value
    if isinstance(value, datetime):
        return value.date()
    return date.fromisoformat(str(value))


def date_bounds(history):
    """(oldest, newest) draw dates, or None for an empty history."""
    if not history:
        return None
    dates = [d.date for d in history]
    return min(dates), max(dates)


def filter_by_date_range(history, start=None, end=None) -> tuple:
    """
    Draws dated between *start* and *end*, both inclusive.

    Either bound may be omitted.  Bounds can be dates, datetimes or ISO
    strings.  Order is preserved.
    """
    start, end = _as_date(start), _as_date(end)
    if start is not None and end is not None and start > end:
        raise ValueError(f"Start date {start} is after end date {end}")

    filtered = tuple(
        d for d in history
        if (start is None or d.date >= start) and (end is None or d.date <= end)
    )
    if history and not filtered:
        warnings.warn(f"No draws found between {start} and {end}")
    return filtered


def search_draws(draws, term: str) -> list:
    """Draws whose contest or dd/mm/yyyy date contains *term* (case-insensitive)."""
    term = (term or "").strip().lower()
    if not term:
        return list(draws)
    return [
        d for d in draws
        if term in str(d.contest).lower() or term in d.date.strftime("%d/%m/%Y")
    ]
