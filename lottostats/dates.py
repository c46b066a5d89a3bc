"""Date parsing for result-file cells (day/month/year order)."""
import re
from datetime import date, datetime

DATE_PATTERN = re.compile(r"(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4}|\d{2})(?!\d)")


def expand_year(year: int) -> int:
    """Two-digit years above 50 belong to the 1900s, the rest to the 2000s."""
    if year < 100:
        return year + (1900 if year > 50 else 2000)
    return year


def parse_date(value):
    """
    Return the first day/month/year date found in *value*, or None.

    Spreadsheet cells that already hold a datetime are taken as-is.
    Impossible dates such as 31/02/2024 give None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    match = DATE_PATTERN.search(str(value))
    if not match:
        return None

    day, month, year = (int(g) for g in match.groups())
    try:
        return date(expand_year(year), month, day)
    except ValueError:
        return None
