"""Date utilities for tally.

Pure functions for date parsing, range calculations and formatting.
Dates are compared as whole calendar days; time of day is never modelled.
"""

import re
from datetime import date, datetime, timedelta

import pandas as pd

from tally.domain.models import IsoDate, Month

ISO_DATE_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:[T ]\S*)?$")
YEAR_FIRST_PATTERN = re.compile(r"^\d{4}[-/.]")


def parse_date(text: str) -> IsoDate:
    """Normalize a user-entered date to YYYY-MM-DD.

    ISO dates (optionally followed by a time) are taken as-is. Other input
    starting with a four-digit year is read year-first (2025-1-5 is the 5th
    of January); anything else is read day-first (05/01/2025 is the 5th of
    January).

    Args:
        text: Date as typed by the user.

    Returns:
        Date in YYYY-MM-DD format.

    Raises:
        ValueError: If the text is not a recognizable date.
    """
    text = text.strip()
    iso = ISO_DATE_PATTERN.match(text)
    if iso:
        try:
            return IsoDate(date.fromisoformat(iso.group(1)).isoformat())
        except ValueError as e:
            raise ValueError(f"Invalid date: {text!r}") from e

    year_first = YEAR_FIRST_PATTERN.match(text) is not None
    try:
        parsed = pd.to_datetime(text, dayfirst=not year_first, yearfirst=year_first)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date: {text!r}") from e
    if pd.isna(parsed):
        raise ValueError(f"Invalid date: {text!r}")
    return IsoDate(parsed.strftime("%Y-%m-%d"))


def to_date(value: str) -> date:
    """Convert a stored date string to a calendar date.

    Anything after the YYYY-MM-DD prefix (such as a time component) is dropped.

    Raises:
        ValueError: If the string does not start with a valid ISO date.
    """
    return date.fromisoformat(value[:10])


def today() -> IsoDate:
    """Today's date in YYYY-MM-DD format."""
    return IsoDate(date.today().isoformat())


def month_range(month: Month) -> tuple[IsoDate, IsoDate, str]:
    """Calculate the inclusive date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (start_date, end_date, label) where:
        - start_date: First day of month (YYYY-MM-DD)
        - end_date: Last day of month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    dt = datetime.strptime(month, "%Y-%m")
    start = dt.strftime("%Y-%m-01")
    next_month = (dt.replace(day=28) + timedelta(days=4)).replace(day=1)
    end = (next_month - timedelta(days=1)).strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return IsoDate(start), IsoDate(end), label


def format_display_date(value: str) -> str:
    """Format a stored date for display (e.g., "Jan 05, 2025").

    Unparseable values are returned unchanged so that odd stored data
    still displays.
    """
    try:
        return to_date(value).strftime("%b %d, %Y")
    except ValueError:
        return value
